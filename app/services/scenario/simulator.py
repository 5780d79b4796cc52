"""Scenario simulator - re-runs the factor model under parameter overrides."""

import numpy as np
from loguru import logger

from app.errors import InvalidInputError, NotFoundError
from app.models.prediction import FactorWeights, Prediction
from app.models.proposition import BallotAnalysis, Committee, Complexity, PropositionFinance
from app.models.scenario import (
    ConfidenceInterval,
    FactorContribution,
    FramingScenario,
    FundingScenario,
    OppositionScenario,
    OrganizationLevel,
    ScenarioParameters,
    ScenarioResults,
    SensitivityPoint,
    Stance,
    SummaryComplexity,
)
from app.services.prediction import FactorAdjustments, PredictionInputs, PredictionService
from app.services.prediction.wording import analyze_ballot_wording, neutral_analysis
from helpers import formulas

ORGANIZATION_PRESSURE = {
    OrganizationLevel.MINIMAL: 0.5,
    OrganizationLevel.MODERATE: 1.0,
    OrganizationLevel.STRONG: 1.5,
    OrganizationLevel.INTENSE: 2.0,
}

STANCE_VALUES = {Stance.SUPPORT: 1.0, Stance.NEUTRAL: 0.0, Stance.OPPOSITION: -1.0}
ENDORSEMENT_SCALE = 0.05

COMPLEXITY_ORDER = (Complexity.SIMPLE, Complexity.MODERATE, Complexity.COMPLEX)
READABILITY_STEP = 10

# One-at-a-time grids, every other parameter held at identity
SENSITIVITY_GRIDS = {
    "support_multiplier": np.linspace(0.5, 2.0, 7),
    "opposition_multiplier": np.linspace(0.5, 2.0, 7),
    "turnout_multiplier": np.linspace(0.6, 1.4, 5),
    "title_sentiment": np.linspace(-0.5, 0.5, 5),
}


def confidence_interval(probability: float, confidence: float) -> ConfidenceInterval:
    """Symmetric interval that widens as confidence drops."""
    half_width = (1 - confidence) * 0.5
    return ConfidenceInterval(
        lower=formulas.clamp(probability - half_width, 0.0, 1.0),
        upper=formulas.clamp(probability + half_width, 0.0, 1.0),
    )


def endorsement_shift(opposition: OppositionScenario) -> float:
    return sum(
        e.influence * ENDORSEMENT_SCALE * (STANCE_VALUES[e.new_position] - STANCE_VALUES[e.original_position])
        for e in opposition.endorsements
    )


def validate_parameters(parameters: ScenarioParameters) -> None:
    """Reject non-positive multipliers and negative custom amounts."""
    multipliers = {
        "support_multiplier": parameters.funding.support_multiplier,
        "opposition_multiplier": parameters.funding.opposition_multiplier,
        "overall_multiplier": parameters.turnout.overall_multiplier,
    }
    for a in parameters.turnout.demographic_adjustments:
        multipliers[f"turnout[{a.category}:{a.demographic}]"] = a.multiplier
    for a in parameters.turnout.regional_adjustments:
        multipliers[f"turnout[{a.region}]"] = a.multiplier
    if parameters.opposition is not None:
        multipliers["media_spend_ratio"] = parameters.opposition.media_spend_ratio

    bad = sorted(name for name, m in multipliers.items() if m <= 0)
    if bad:
        raise InvalidInputError(f"Multipliers must be positive: {bad}")

    for amount in (parameters.funding.custom_support_amount, parameters.funding.custom_opposition_amount):
        if amount is not None and amount < 0:
            raise InvalidInputError(f"Custom funding amount must not be negative: {amount}")


def _scale_committees(committees: list[Committee], factor: float) -> list[Committee]:
    return [c.evolve(total_raised=c.total_raised * factor, total_spent=c.total_spent * factor) for c in committees]


def apply_funding(
    finance: PropositionFinance | None,
    funding: FundingScenario,
    proposition_id: str,
) -> PropositionFinance | None:
    """Custom amounts replace totals; multipliers scale totals and committee money."""
    if finance is None:
        if funding.custom_support_amount is None and funding.custom_opposition_amount is None:
            return None
        finance = PropositionFinance(proposition_id=proposition_id, total_support=0.0, total_opposition=0.0)

    def scaled(original: float, custom: float | None, multiplier: float) -> tuple[float, float]:
        if custom is None:
            return original * multiplier, multiplier
        return custom, (custom / original if original > 0 else 1.0)

    support, support_ratio = scaled(finance.total_support, funding.custom_support_amount, funding.support_multiplier)
    opposition, opposition_ratio = scaled(
        finance.total_opposition, funding.custom_opposition_amount, funding.opposition_multiplier
    )

    return finance.evolve(
        total_support=support,
        total_opposition=opposition,
        support_committees=_scale_committees(finance.support_committees, support_ratio),
        opposition_committees=_scale_committees(finance.opposition_committees, opposition_ratio),
    )


def apply_framing(inputs: PredictionInputs, framing: FramingScenario) -> BallotAnalysis | None:
    """Ballot analysis as the reframed label would score."""
    prop = inputs.proposition
    analysis = inputs.ballot_analysis

    if framing.custom_title or framing.custom_summary:
        analysis = analyze_ballot_wording(
            framing.custom_title or prop.title,
            framing.custom_summary or prop.summary,
            None if framing.custom_summary else prop.full_text,
            prop.id,
        )

    reworded = framing.title_sentiment != 0 or framing.summary_complexity != SummaryComplexity.UNCHANGED
    if not reworded:
        return analysis
    if analysis is None:
        analysis = neutral_analysis(prop.id)

    sentiment = formulas.clamp(analysis.sentiment_score + framing.title_sentiment, -1.0, 1.0)
    readability = analysis.readability_score
    complexity = analysis.complexity

    if framing.summary_complexity != SummaryComplexity.UNCHANGED:
        step = -1 if framing.summary_complexity == SummaryComplexity.SIMPLER else 1
        idx = min(max(COMPLEXITY_ORDER.index(complexity) + step, 0), len(COMPLEXITY_ORDER) - 1)
        complexity = COMPLEXITY_ORDER[idx]
        readability = formulas.clamp(readability - step * READABILITY_STEP, 0.0, 100.0)

    return analysis.evolve(sentiment_score=sentiment, readability_score=readability, complexity=complexity)


class ScenarioSimulator:
    """What-if recomputation of a prediction."""

    def __init__(self, prediction_service: PredictionService):
        self._predictions = prediction_service

    def apply(self, inputs: PredictionInputs, parameters: ScenarioParameters) -> tuple[PredictionInputs, FactorAdjustments]:
        """Adjusted copy of the inputs plus factor-level knobs. Never mutates `inputs`."""
        if inputs.proposition is None:
            raise NotFoundError("Proposition not found")
        validate_parameters(parameters)

        prop = inputs.proposition.evolve()
        adjustments = FactorAdjustments(
            turnout_multiplier=parameters.turnout.overall_multiplier,
            group_multipliers={
                (a.category.value, a.demographic): a.multiplier for a in parameters.turnout.demographic_adjustments
            },
            region_multipliers={a.region: a.multiplier for a in parameters.turnout.regional_adjustments},
            emphasis=parameters.framing.emphasis_shift,
        )
        finance = apply_funding(inputs.finance, parameters.funding, prop.id)

        if parameters.timing is not None:
            timing = parameters.timing
            if prop.election_date is not None and timing.month_offset:
                prop.election_date = formulas.add_months(prop.election_date, timing.month_offset)
            adjustments.election_type = timing.election_type
            adjustments.competing_measures = timing.competing_measures

        if parameters.opposition is not None:
            opposition = parameters.opposition
            adjustments.opposition_pressure = ORGANIZATION_PRESSURE[opposition.organization_level]
            adjustments.endorsement_shift = endorsement_shift(opposition)
            if finance is not None and opposition.media_spend_ratio != 1.0:
                finance.opposition_committees = [
                    c.evolve(total_spent=c.total_spent * opposition.media_spend_ratio)
                    for c in finance.opposition_committees
                ]

        adjusted = PredictionInputs(
            proposition=prop,
            finance=finance,
            demographics=inputs.demographics,
            ballot_analysis=apply_framing(inputs, parameters.framing),
            historical_pool=inputs.historical_pool,
        )
        return adjusted, adjustments

    def run(
        self,
        inputs: PredictionInputs,
        parameters: ScenarioParameters,
        weights: FactorWeights | None = None,
    ) -> Prediction:
        adjusted, adjustments = self.apply(inputs, parameters)
        return self._predictions.predict(adjusted, weights, adjustments)

    def simulate(
        self,
        inputs: PredictionInputs,
        parameters: ScenarioParameters,
        baseline: Prediction | None = None,
    ) -> ScenarioResults:
        """Scenario probability against the baseline, with contributions and sensitivity.

        A given baseline is re-run with the weights recorded on its factors.
        """
        weights = None
        if baseline is None:
            baseline = self._predictions.predict(inputs)
        else:
            weights = self._predictions.weights.recorded_on(baseline.weights_version, baseline.factors)
        adjusted = self.run(inputs, parameters, weights)

        original_factors = {f.name: f for f in baseline.factors}
        contributions = []
        for f in adjusted.factors:
            original = original_factors.get(f.name)
            if original is None:
                continue
            contributions.append(
                FactorContribution(
                    factor=f.name.value,
                    original_impact=original.value * original.weight,
                    adjusted_impact=f.value * f.weight,
                    contribution=(f.value - original.value) * original.weight,
                )
            )

        results = ScenarioResults(
            original_probability=baseline.passage_probability,
            new_probability=adjusted.passage_probability,
            probability_delta=adjusted.passage_probability - baseline.passage_probability,
            confidence_interval=confidence_interval(adjusted.passage_probability, adjusted.confidence),
            factor_contributions=contributions,
            sensitivity_analysis=self.sensitivity(inputs, weights),
        )
        logger.info(
            "Scenario for {}: {:.3f} -> {:.3f} ({:+.3f})",
            baseline.proposition_id,
            results.original_probability,
            results.new_probability,
            results.probability_delta,
        )
        return results

    def sensitivity(self, inputs: PredictionInputs, weights: FactorWeights | None = None) -> list[SensitivityPoint]:
        """Sweep each lever over its grid with everything else at identity."""
        points = []
        for parameter, grid in SENSITIVITY_GRIDS.items():
            for value in grid:
                value = round(float(value), 4)
                prediction = self.run(inputs, _single_lever(parameter, value), weights)
                points.append(SensitivityPoint(parameter, value, prediction.passage_probability))
        return points


def _single_lever(parameter: str, value: float) -> ScenarioParameters:
    params = ScenarioParameters()
    if parameter == "support_multiplier":
        params.funding.support_multiplier = value
    elif parameter == "opposition_multiplier":
        params.funding.opposition_multiplier = value
    elif parameter == "turnout_multiplier":
        params.turnout.overall_multiplier = value
    elif parameter == "title_sentiment":
        params.framing.title_sentiment = value
    return params
