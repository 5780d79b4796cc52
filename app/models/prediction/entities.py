"""Prediction domain entities - factors, comparisons, passage predictions."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

from app.models.common import BaseEntity


class FactorName(StrEnum):
    CAMPAIGN_FINANCE = "campaign_finance"
    DEMOGRAPHICS = "demographics"
    BALLOT_WORDING = "ballot_wording"
    TIMING = "timing"
    OPPOSITION = "opposition"
    HISTORICAL_SIMILARITY = "historical_similarity"


class ImpactDirection(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class DataQuality(StrEnum):
    STRONG = "strong"
    MODERATE = "moderate"
    LIMITED = "limited"


class ComparisonResult(StrEnum):
    PASSED = "passed"
    FAILED = "failed"


@dataclass
class PredictionFactor(BaseEntity):
    """One weighted input signal of the passage model."""

    name: FactorName
    weight: float
    value: float
    impact: ImpactDirection
    description: str
    source: str
    has_real_data: bool


@dataclass
class HistoricalComparison(BaseEntity):
    """Past proposition ranked by resemblance to a target."""

    proposition_id: str
    proposition_number: str
    year: int
    similarity: float
    result: ComparisonResult
    yes_percentage: float


@dataclass
class Prediction(BaseEntity):
    """Passage prediction. Recomputed on demand, never a source of truth."""

    proposition_id: str
    passage_probability: float
    confidence: float
    data_quality: DataQuality
    data_sources: list[str]
    factors: list[PredictionFactor]
    historical_comparison: list[HistoricalComparison]
    weights_version: str
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC), compare=False)

    def factor(self, name: FactorName) -> PredictionFactor | None:
        """Look up a factor by name."""
        return next((f for f in self.factors if f.name == name), None)

    @property
    def real_data_count(self) -> int:
        return sum(1 for f in self.factors if f.has_real_data)
