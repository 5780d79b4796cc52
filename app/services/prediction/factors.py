"""Factor model - one pure, total function per prediction factor.

Every function returns a `PredictionFactor` valued in [0, 1]. When its input is
missing it falls back to the neutral default (0.5, impact neutral) and flags
`has_real_data=False`, so the aggregator never has to null-check inputs.
"""

from datetime import date

from app.models.prediction import (
    DEFAULT_WEIGHTS,
    ComparisonResult,
    FactorName,
    HistoricalComparison,
    ImpactDirection,
    PredictionFactor,
)
from app.models.proposition import (
    BallotAnalysis,
    Complexity,
    DemographicBreakdown,
    DemographicImpact,
    PropositionCategory,
    PropositionFinance,
    VotingPattern,
)
from app.models.scenario import ElectionType, EmphasisShift
from helpers import formulas

NEUTRAL_VALUE = 0.5

SOURCES = {
    FactorName.CAMPAIGN_FINANCE: "CAL-ACCESS campaign filings",
    FactorName.DEMOGRAPHICS: "Census ACS demographic projections",
    FactorName.BALLOT_WORDING: "Ballot label analysis",
    FactorName.TIMING: "Election calendar",
    FactorName.OPPOSITION: "Committee filings and endorsements",
    FactorName.HISTORICAL_SIMILARITY: "CA SOS historical results",
}

# Scored dimensions of a demographic breakdown
DIMENSIONS = ("age_groups", "urban_rural", "income")

# Dimension weights conditioned on the measure's subject
CATEGORY_DIMENSION_WEIGHTS: dict[PropositionCategory, dict[str, float]] = {
    PropositionCategory.TAXATION: {"income": 0.5, "urban_rural": 0.25, "age_groups": 0.25},
    PropositionCategory.HOUSING: {"income": 0.5, "urban_rural": 0.3, "age_groups": 0.2},
    PropositionCategory.LABOR: {"income": 0.5, "urban_rural": 0.2, "age_groups": 0.3},
    PropositionCategory.EDUCATION: {"age_groups": 0.5, "income": 0.25, "urban_rural": 0.25},
    PropositionCategory.CIVIL_RIGHTS: {"age_groups": 0.5, "urban_rural": 0.3, "income": 0.2},
    PropositionCategory.HEALTHCARE: {"age_groups": 0.4, "income": 0.4, "urban_rural": 0.2},
    PropositionCategory.ENVIRONMENT: {"urban_rural": 0.5, "age_groups": 0.25, "income": 0.25},
    PropositionCategory.TRANSPORTATION: {"urban_rural": 0.5, "income": 0.3, "age_groups": 0.2},
}
EQUAL_DIMENSION_WEIGHTS = {d: 1 / 3 for d in DIMENSIONS}

# Demographic adjustment category -> breakdown attribute
ADJUSTMENT_DIMENSIONS = {
    "age": "age_groups",
    "ethnicity": "ethnicity",
    "income": "income",
    "education": "education",
}

EMPHASIS_CATEGORIES: dict[EmphasisShift, frozenset[PropositionCategory]] = {
    EmphasisShift.ECONOMIC: frozenset({
        PropositionCategory.TAXATION,
        PropositionCategory.LABOR,
        PropositionCategory.HOUSING,
        PropositionCategory.TRANSPORTATION,
    }),
    EmphasisShift.SOCIAL: frozenset({
        PropositionCategory.EDUCATION,
        PropositionCategory.HEALTHCARE,
        PropositionCategory.CRIMINAL_JUSTICE,
        PropositionCategory.CIVIL_RIGHTS,
    }),
    EmphasisShift.ENVIRONMENTAL: frozenset({PropositionCategory.ENVIRONMENT}),
}


def classify_impact(value: float, upper: float = 0.55, lower: float = 0.45) -> ImpactDirection:
    """Impact direction of a factor value around neutral."""
    if value > upper:
        return ImpactDirection.POSITIVE
    if value < lower:
        return ImpactDirection.NEGATIVE
    return ImpactDirection.NEUTRAL


def neutral_factor(name: FactorName, description: str, weight: float | None = None) -> PredictionFactor:
    """Neutral default used whenever a factor's input is unavailable."""
    return PredictionFactor(
        name=name,
        weight=DEFAULT_WEIGHTS.weight_for(name) if weight is None else weight,
        value=NEUTRAL_VALUE,
        impact=ImpactDirection.NEUTRAL,
        description=description,
        source=SOURCES[name],
        has_real_data=False,
    )


def _factor(name: FactorName, weight: float | None, value: float, impact: ImpactDirection, description: str):
    return PredictionFactor(
        name=name,
        weight=DEFAULT_WEIGHTS.weight_for(name) if weight is None else weight,
        value=value,
        impact=impact,
        description=description,
        source=SOURCES[name],
        has_real_data=True,
    )


def finance_factor(finance: PropositionFinance | None, weight: float | None = None) -> PredictionFactor:
    """Support share of total campaign money, compressed into [0.2, 0.8]."""
    name = FactorName.CAMPAIGN_FINANCE
    if finance is None:
        return neutral_factor(name, "Campaign finance data unavailable", weight)

    total = finance.total_support + finance.total_opposition
    if total <= 0:
        return neutral_factor(name, "No campaign spending recorded", weight)

    support_ratio = finance.total_support / total
    advantage = support_ratio - 0.5
    value = formulas.clamp(0.5 + advantage * 0.6, 0.2, 0.8)

    verb = "outpaces" if support_ratio > 0.5 else "trails"
    return _factor(
        name,
        weight,
        value,
        classify_impact(advantage, 0.1, -0.1),
        f"Support spending {verb} opposition by {abs(advantage * 100):.1f}%",
    )


def _dimension_sums(
    patterns: dict[str, VotingPattern],
    multiplier: float,
    group_multipliers: dict[str, float],
) -> tuple[float, float]:
    """Turnout-weighted (yes, yes + no) over one dimension's groups."""
    yes = total = 0.0
    for group, p in patterns.items():
        turnout = min(p.estimated_turnout * multiplier * group_multipliers.get(group, 1.0), 1.0)
        voters = p.population * turnout
        yes += voters * p.projected_yes
        total += voters * (p.projected_yes + p.projected_no)
    return yes, total


def _group_multipliers(
    adjustments: dict[tuple[str, str], float] | None,
    dimension: str,
) -> dict[str, float]:
    if not adjustments:
        return {}
    return {
        group: m
        for (category, group), m in adjustments.items()
        if ADJUSTMENT_DIMENSIONS.get(category) == dimension
    }


def _breakdown_sums(
    breakdown: DemographicBreakdown,
    dimension: str,
    multiplier: float,
    adjustments: dict[tuple[str, str], float] | None,
) -> tuple[float, float]:
    return _dimension_sums(
        getattr(breakdown, dimension),
        multiplier,
        _group_multipliers(adjustments, dimension),
    )


def demographic_factor(
    demographics: DemographicImpact | None,
    category: PropositionCategory,
    turnout_multiplier: float = 1.0,
    group_multipliers: dict[tuple[str, str], float] | None = None,
    region_multipliers: dict[str, float] | None = None,
    weight: float | None = None,
) -> PredictionFactor:
    """Projected yes share across age, urban/rural and income splits.

    `group_multipliers` keys are (adjustment category, group) pairs such as
    ("age", "18-29"). `region_multipliers` add (m - 1) times a region's own
    turnout-weighted votes on top of the statewide sums.
    """
    name = FactorName.DEMOGRAPHICS
    if demographics is None:
        return neutral_factor(name, "Demographic analysis unavailable", weight)

    dim_weights = CATEGORY_DIMENSION_WEIGHTS.get(category, EQUAL_DIMENSION_WEIGHTS)
    regions = {r.region: r for r in demographics.by_region}

    shares, share_weights = [], []
    for dimension in DIMENSIONS:
        yes, total = _breakdown_sums(demographics.statewide, dimension, turnout_multiplier, group_multipliers)

        for region, m in (region_multipliers or {}).items():
            if region not in regions:
                continue
            r_yes, r_total = _breakdown_sums(regions[region].breakdown, dimension, turnout_multiplier, group_multipliers)
            yes += (m - 1.0) * r_yes
            total += (m - 1.0) * r_total

        if total > 0:
            shares.append(formulas.clamp(yes / total, 0.0, 1.0))
            share_weights.append(dim_weights[dimension])

    if not shares:
        return neutral_factor(name, "Demographic projections contain no voting patterns", weight)

    value = formulas.clamp(formulas.weighted_average(shares, share_weights), 0.0, 1.0)
    return _factor(
        name,
        weight,
        value,
        classify_impact(value),
        f"Demographic projections show {value * 100:.1f}% support",
    )


def wording_factor(
    analysis: BallotAnalysis | None,
    category: PropositionCategory | None = None,
    emphasis: EmphasisShift | None = None,
    weight: float | None = None,
) -> PredictionFactor:
    """Sentiment and readability of the ballot label, bounded to [0.3, 0.7]."""
    name = FactorName.BALLOT_WORDING
    if analysis is None:
        return neutral_factor(name, "Ballot wording analysis unavailable", weight)

    value = 0.5
    value += analysis.sentiment_score * 0.15
    value += (analysis.readability_score / 100 - 0.5) * 0.1

    if analysis.complexity == Complexity.SIMPLE:
        value += 0.05
    elif analysis.complexity == Complexity.COMPLEX:
        value -= 0.05

    if emphasis and emphasis != EmphasisShift.NONE and category is not None:
        value += 0.03 if category in EMPHASIS_CATEGORIES[emphasis] else -0.01

    value = formulas.clamp(value, 0.3, 0.7)
    framing = "positive" if analysis.sentiment_score > 0 else "neutral"
    return PredictionFactor(
        name=name,
        weight=DEFAULT_WEIGHTS.weight_for(name) if weight is None else weight,
        value=value,
        impact=classify_impact(analysis.sentiment_score, 0.2, -0.2),
        description=f"Ballot language is {analysis.complexity} with {framing} framing",
        source=SOURCES[name],
        has_real_data=not analysis.synthetic,
    )


def infer_election_type(election_date: date) -> ElectionType:
    """November is general, March and June are primaries, anything else special."""
    if election_date.month == 11:
        return ElectionType.GENERAL
    if election_date.month in (3, 6):
        return ElectionType.PRIMARY
    return ElectionType.SPECIAL


def timing_factor(
    election_date: date | None,
    election_type: ElectionType | None = None,
    competing_measures: int | None = None,
    turnout_multiplier: float = 1.0,
    weight: float | None = None,
) -> PredictionFactor:
    """Presidential-year general elections favor passage over primaries and specials."""
    name = FactorName.TIMING
    if election_date is None:
        return neutral_factor(name, "Election date unknown", weight)

    election_type = election_type or infer_election_type(election_date)
    presidential = formulas.is_presidential_year(election_date.year)

    value = 0.5
    if election_type == ElectionType.GENERAL:
        value += 0.1 if presidential else 0.05
    elif election_type == ElectionType.PRIMARY:
        value -= 0.05

    if competing_measures:
        value -= 0.005 * max(0, competing_measures - 5)

    value += (turnout_multiplier - 1.0) * 0.1
    value = formulas.clamp(value, 0.2, 0.8)

    suffix = " in presidential year" if presidential else ""
    return _factor(
        name,
        weight,
        value,
        classify_impact(value),
        f"{election_type.value.capitalize()} election{suffix}",
    )


def _spend_split(finance: PropositionFinance) -> tuple[float, float]:
    """(support, opposition) spend from committees, falling back to totals."""
    support = sum(c.total_spent for c in finance.support_committees)
    opposition = sum(c.total_spent for c in finance.opposition_committees)
    if support + opposition > 0:
        return support, opposition
    return finance.total_support, finance.total_opposition


def opposition_factor(
    opponents: list[str] | None,
    finance: PropositionFinance | None,
    pressure: float = 1.0,
    endorsement_shift: float = 0.0,
    weight: float | None = None,
) -> PredictionFactor:
    """Organized opposition: group count, committee count and relative spend."""
    name = FactorName.OPPOSITION
    committees = finance.opposition_committees if finance else []
    if opponents is None and not committees:
        return neutral_factor(name, "Opposition data unavailable", weight)

    groups = len(opponents) if opponents is not None else len(committees)

    if groups == 0:
        value = 0.7
    elif groups > 5:
        value = 0.35
    else:
        value = 0.5 - groups * 0.03

    if len(committees) > 3:
        value -= 0.1

    if finance is not None:
        support, opposition = _spend_split(finance)
        if support + opposition > 0:
            share = opposition / (support + opposition)
            value -= max(0.0, share - 0.5) * 0.2

    value -= (pressure - 1.0) * 0.1
    value += endorsement_shift
    value = formulas.clamp(value, 0.2, 0.8)

    noun = "group" if groups == 1 else "groups"
    return _factor(
        name,
        weight,
        value,
        classify_impact(value),
        f"{groups} organized opposition {noun}",
    )


def historical_factor(
    comparisons: list[HistoricalComparison] | None,
    weight: float | None = None,
) -> PredictionFactor:
    """Similarity-weighted outcome of comparable past measures."""
    name = FactorName.HISTORICAL_SIMILARITY
    if not comparisons:
        return neutral_factor(name, "No comparable historical propositions", weight)

    sims = [c.similarity for c in comparisons]
    if sum(sims) <= 0:
        return neutral_factor(name, "Historical comparisons carry no similarity weight", weight)

    pass_rate = formulas.weighted_average(
        [1.0 if c.result == ComparisonResult.PASSED else 0.0 for c in comparisons], sims
    )
    yes_share = formulas.weighted_average([c.yes_percentage / 100 for c in comparisons], sims)
    value = formulas.clamp(0.5 * pass_rate + 0.5 * yes_share, 0.2, 0.8)

    passed = sum(1 for c in comparisons if c.result == ComparisonResult.PASSED)
    return _factor(
        name,
        weight,
        value,
        classify_impact(value),
        f"{passed} of {len(comparisons)} similar propositions passed",
    )
