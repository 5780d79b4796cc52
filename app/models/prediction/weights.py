"""Versioned factor weight configuration."""

from dataclasses import dataclass, replace

from app.errors import InvalidInputError
from app.models.prediction.entities import FactorName, PredictionFactor
from settings.weights import FACTOR_WEIGHTS, WEIGHTS_VERSION


@dataclass(frozen=True)
class FactorWeights:
    """Canonical factor weights. Bump `version` whenever a weight changes."""

    version: str
    campaign_finance: float
    demographics: float
    ballot_wording: float
    timing: float
    opposition: float
    historical_similarity: float

    def weight_for(self, name: FactorName) -> float:
        return getattr(self, name.value)

    def as_dict(self) -> dict[FactorName, float]:
        return {name: self.weight_for(name) for name in FactorName}

    @property
    def total(self) -> float:
        return sum(self.as_dict().values())

    def with_overrides(self, overrides: dict[str, float]) -> "FactorWeights":
        """Copy with some weights replaced; the version records the override."""
        unknown = set(overrides) - {n.value for n in FactorName}
        if unknown:
            raise InvalidInputError(f"Unknown factor weights: {sorted(unknown)}")
        if not overrides:
            return self
        return replace(self, version=f"{self.version}+custom", **overrides)

    def recorded_on(self, version: str, factor_list: list[PredictionFactor]) -> "FactorWeights":
        """Copy carrying the weights a computed prediction actually used."""
        return replace(self, version=version, **{f.name.value: f.weight for f in factor_list})


DEFAULT_WEIGHTS = FactorWeights(version=WEIGHTS_VERSION, **FACTOR_WEIGHTS)
