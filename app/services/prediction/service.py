"""Prediction service - weighted aggregation of factors into a passage probability."""

from dataclasses import dataclass, field

from loguru import logger

from app.errors import InvalidInputError, NotFoundError
from app.models.prediction import (
    DEFAULT_WEIGHTS,
    DataQuality,
    FactorWeights,
    HistoricalComparison,
    Prediction,
    PredictionFactor,
)
from app.models.proposition import (
    BallotAnalysis,
    DemographicImpact,
    Proposition,
    PropositionFinance,
)
from app.models.scenario import ElectionType, EmphasisShift
from app.services.prediction import factors
from app.services.similarity.matcher import find_similar
from helpers import formulas


@dataclass
class PredictionInputs:
    """Authoritative records a prediction is computed from."""

    proposition: Proposition | None
    finance: PropositionFinance | None = None
    demographics: DemographicImpact | None = None
    ballot_analysis: BallotAnalysis | None = None
    historical_pool: list[Proposition] = field(default_factory=list)


@dataclass
class FactorAdjustments:
    """Knobs applied inside factor computation. Defaults change nothing."""

    turnout_multiplier: float = 1.0
    group_multipliers: dict[tuple[str, str], float] = field(default_factory=dict)
    region_multipliers: dict[str, float] = field(default_factory=dict)
    emphasis: EmphasisShift | None = None
    election_type: ElectionType | None = None
    competing_measures: int | None = None
    opposition_pressure: float = 1.0
    endorsement_shift: float = 0.0


def data_quality_for(real_count: int) -> DataQuality:
    """strong for 4+ factors backed by data, moderate for 2-3, limited otherwise."""
    if real_count >= 4:
        return DataQuality.STRONG
    if real_count >= 2:
        return DataQuality.MODERATE
    return DataQuality.LIMITED


def calculate_confidence(
    factor_list: list[PredictionFactor],
    finance: PropositionFinance | None,
    comparisons: list[HistoricalComparison],
) -> float:
    """Counts ranked comparisons, not the size of the historical pool they came from."""
    confidence = 0.5 + sum(1 for f in factor_list if f.has_real_data) * 0.06

    if len(comparisons) >= 3:
        confidence += 0.05
    elif comparisons:
        confidence += 0.02

    if finance:
        spending = finance.total_support + finance.total_opposition
        if spending > 10_000_000:
            confidence += 0.1
        elif spending > 1_000_000:
            confidence += 0.05

    return formulas.clamp(confidence, 0.3, 0.9)


class PredictionService:
    """Passage probability as a weighted mean over factors backed by data."""

    def __init__(self, weights: FactorWeights = DEFAULT_WEIGHTS):
        self._weights = weights
        logger.debug("PredictionService initialized (weights {})", weights.version)

    @property
    def weights(self) -> FactorWeights:
        return self._weights

    def set_weights(self, overrides: dict[str, float]) -> None:
        self._weights = self._weights.with_overrides(overrides)
        logger.info("Factor weights set to version {}", self._weights.version)

    def reset_weights(self) -> None:
        self._weights = DEFAULT_WEIGHTS

    def calculate_factors(
        self,
        inputs: PredictionInputs,
        comparisons: list[HistoricalComparison],
        weights: FactorWeights | None = None,
        adjustments: FactorAdjustments | None = None,
    ) -> list[PredictionFactor]:
        """All six factors in canonical order, each carrying its weight."""
        w = weights or self._weights
        adj = adjustments or FactorAdjustments()
        prop = inputs.proposition

        return [
            factors.finance_factor(inputs.finance, weight=w.campaign_finance),
            factors.demographic_factor(
                inputs.demographics,
                prop.category,
                turnout_multiplier=adj.turnout_multiplier,
                group_multipliers=adj.group_multipliers,
                region_multipliers=adj.region_multipliers,
                weight=w.demographics,
            ),
            factors.wording_factor(
                inputs.ballot_analysis, prop.category, adj.emphasis, weight=w.ballot_wording
            ),
            factors.timing_factor(
                prop.election_date,
                election_type=adj.election_type,
                competing_measures=adj.competing_measures,
                turnout_multiplier=adj.turnout_multiplier,
                weight=w.timing,
            ),
            factors.opposition_factor(
                prop.opponents,
                inputs.finance,
                pressure=adj.opposition_pressure,
                endorsement_shift=adj.endorsement_shift,
                weight=w.opposition,
            ),
            factors.historical_factor(comparisons, weight=w.historical_similarity),
        ]

    def generate_prediction(
        self,
        proposition: Proposition | None,
        finance: PropositionFinance | None = None,
        historical_pool: list[Proposition] | None = None,
        demographics: DemographicImpact | None = None,
        ballot_analysis: BallotAnalysis | None = None,
        custom_weights: dict[str, float] | None = None,
    ) -> Prediction:
        """Passage prediction for a proposition from whatever data is available."""
        inputs = PredictionInputs(
            proposition=proposition,
            finance=finance,
            demographics=demographics,
            ballot_analysis=ballot_analysis,
            historical_pool=historical_pool or [],
        )
        weights = self._weights.with_overrides(custom_weights) if custom_weights else None
        return self.predict(inputs, weights)

    def predict(
        self,
        inputs: PredictionInputs,
        weights: FactorWeights | None = None,
        adjustments: FactorAdjustments | None = None,
    ) -> Prediction:
        """Aggregate factors for a prepared input bundle."""
        prop = inputs.proposition
        if prop is None or not prop.id:
            raise NotFoundError("Proposition not found")

        w = weights or self._weights
        comparisons = find_similar(prop, inputs.historical_pool) if inputs.historical_pool else []
        factor_list = self.calculate_factors(inputs, comparisons, w, adjustments)

        probability = self.aggregate(factor_list)
        real_count = sum(1 for f in factor_list if f.has_real_data)

        prediction = Prediction(
            proposition_id=prop.id,
            passage_probability=probability,
            confidence=calculate_confidence(factor_list, inputs.finance, comparisons),
            data_quality=data_quality_for(real_count),
            data_sources=[f.source for f in factor_list if f.has_real_data],
            factors=factor_list,
            historical_comparison=comparisons,
            weights_version=w.version,
        )
        logger.info(
            "Prediction {}: p={:.3f}, quality={}, {} real factors",
            prop.id,
            probability,
            prediction.data_quality,
            real_count,
        )
        return prediction

    @staticmethod
    def aggregate(factor_list: list[PredictionFactor]) -> float:
        """Weighted mean over factors with real data, weights renormalized.

        Raises InvalidInputError when no factor has data or their weights sum to zero.
        """
        present = [f for f in factor_list if f.has_real_data]
        if not present:
            raise InvalidInputError("No prediction factor has data")

        probability = formulas.weighted_average(
            [f.value for f in present],
            [f.weight for f in present],
        )
        return formulas.clamp(probability, 0.0, 1.0)

