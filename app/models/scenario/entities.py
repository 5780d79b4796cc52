"""Scenario domain entities - what-if parameter bundles and their results."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from app.models.common import BaseEntity


class SummaryComplexity(StrEnum):
    SIMPLER = "simpler"
    UNCHANGED = "unchanged"
    COMPLEX = "complex"


class EmphasisShift(StrEnum):
    ECONOMIC = "economic"
    SOCIAL = "social"
    ENVIRONMENTAL = "environmental"
    NONE = "none"


class ElectionType(StrEnum):
    PRIMARY = "primary"
    GENERAL = "general"
    SPECIAL = "special"


class OrganizationLevel(StrEnum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    STRONG = "strong"
    INTENSE = "intense"


class EndorsementType(StrEnum):
    POLITICAL = "political"
    ORGANIZATION = "organization"
    MEDIA = "media"
    CELEBRITY = "celebrity"


class Stance(StrEnum):
    SUPPORT = "support"
    OPPOSITION = "opposition"
    NEUTRAL = "neutral"


class DemographicCategory(StrEnum):
    AGE = "age"
    ETHNICITY = "ethnicity"
    INCOME = "income"
    EDUCATION = "education"


@dataclass
class FundingScenario(BaseEntity):
    support_multiplier: float = 1.0
    opposition_multiplier: float = 1.0
    custom_support_amount: float | None = None
    custom_opposition_amount: float | None = None


@dataclass
class DemographicTurnoutAdjustment(BaseEntity):
    demographic: str
    category: DemographicCategory
    multiplier: float


@dataclass
class RegionalTurnoutAdjustment(BaseEntity):
    region: str
    multiplier: float


@dataclass
class TurnoutScenario(BaseEntity):
    overall_multiplier: float = 1.0
    demographic_adjustments: list[DemographicTurnoutAdjustment] = field(default_factory=list)
    regional_adjustments: list[RegionalTurnoutAdjustment] = field(default_factory=list)


@dataclass
class FramingScenario(BaseEntity):
    title_sentiment: float = 0.0
    summary_complexity: SummaryComplexity = SummaryComplexity.UNCHANGED
    emphasis_shift: EmphasisShift = EmphasisShift.NONE
    custom_title: str | None = None
    custom_summary: str | None = None


@dataclass
class TimingScenario(BaseEntity):
    election_type: ElectionType
    month_offset: int = 0
    competing_measures: int = 0


@dataclass
class EndorsementChange(BaseEntity):
    entity: str
    type: EndorsementType
    original_position: Stance
    new_position: Stance
    influence: float


@dataclass
class OppositionScenario(BaseEntity):
    organization_level: OrganizationLevel = OrganizationLevel.MODERATE
    media_spend_ratio: float = 1.0
    endorsements: list[EndorsementChange] = field(default_factory=list)


@dataclass
class ScenarioParameters(BaseEntity):
    """Override bundle. The defaults are the identity bundle."""

    funding: FundingScenario = field(default_factory=FundingScenario)
    turnout: TurnoutScenario = field(default_factory=TurnoutScenario)
    framing: FramingScenario = field(default_factory=FramingScenario)
    timing: TimingScenario | None = None
    opposition: OppositionScenario | None = None


@dataclass
class ConfidenceInterval(BaseEntity):
    lower: float
    upper: float


@dataclass
class FactorContribution(BaseEntity):
    factor: str
    original_impact: float
    adjusted_impact: float
    contribution: float


@dataclass
class SensitivityPoint(BaseEntity):
    parameter: str
    value: float
    probability: float


@dataclass
class ScenarioResults(BaseEntity):
    original_probability: float
    new_probability: float
    probability_delta: float
    confidence_interval: ConfidenceInterval
    factor_contributions: list[FactorContribution]
    sensitivity_analysis: list[SensitivityPoint]


@dataclass
class Scenario(BaseEntity):
    """Named parameter bundle against a base proposition."""

    id: str
    name: str
    base_proposition_id: str
    parameters: ScenarioParameters
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    results: ScenarioResults | None = None


@dataclass
class ScenarioPreset(BaseEntity):
    """Reusable partial parameter bundle, as nested dicts keyed like ScenarioParameters."""

    id: str
    name: str
    description: str
    parameters: dict[str, Any]


@dataclass
class ScenarioComparison(BaseEntity):
    scenarios: list[Scenario]
    best_case: Scenario | None
    worst_case: Scenario | None
    average_probability: float
    probability_range: tuple[float, float]
