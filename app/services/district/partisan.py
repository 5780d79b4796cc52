"""Per-district partisan arithmetic - pure functions over district demographics."""

from app.errors import InvalidInputError
from app.models.district import (
    District,
    FactorDirection,
    ImpactFactor,
    PartisanChange,
    PartisanMetrics,
    ShiftDirection,
    Significance,
)
from helpers import formulas

BASE_TURNOUT = 0.55
TURNOUT_RANGE = (0.3, 0.85)
ENGAGEMENT_RANGE = (0.3, 0.9)
SHIFT_RANGE = (-2.0, 2.0)


def calculate_partisan_metrics(district: District) -> PartisanMetrics:
    """Current partisan balance from voter registration."""
    reg = district.demographics.voter_registration
    total = reg.total
    if total <= 0:
        raise InvalidInputError(f"District {district.id} has no registered voters")

    margin = reg.democratic - reg.republican
    competitiveness = 1 - abs(margin) / total
    swing = reg.independent / total + competitiveness * 0.3

    return PartisanMetrics(
        democratic_advantage=margin / total * 100,
        competitiveness_index=formulas.clamp(competitiveness, 0.0, 1.0),
        swing_potential=formulas.clamp(swing, 0.0, 1.0),
        voter_engagement=estimate_turnout(district),
    )


def estimate_turnout(district: District) -> float:
    """Expected turnout from income, education and urban/rural mix, in [0.3, 0.85]."""
    demo = district.demographics
    turnout = BASE_TURNOUT

    if demo.median_income > 100_000:
        turnout += 0.1
    elif demo.median_income > 75_000:
        turnout += 0.05
    elif demo.median_income < 40_000:
        turnout -= 0.05

    college = demo.education_levels.get("bachelors", 0.0) + demo.education_levels.get("graduate", 0.0)
    if college > 0.4:
        turnout += 0.08
    elif college > 0.25:
        turnout += 0.04

    if demo.urban_rural_split.urban > 0.7:
        turnout += 0.03
    if demo.urban_rural_split.rural > 0.5:
        turnout -= 0.02

    return formulas.clamp(turnout, *TURNOUT_RANGE)


def estimate_registration_shift(district: District) -> float:
    """Registration shift (points of democratic advantage) expected after passage."""
    demo = district.demographics
    shift = 0.0

    if demo.median_age < 35:
        shift += 0.5
    elif demo.median_age > 55:
        shift -= 0.3

    if demo.urban_rural_split.urban > 0.6:
        shift += 0.3
    elif demo.urban_rural_split.rural > 0.5:
        shift -= 0.2

    if demo.median_income < 50_000:
        shift += 0.2
    elif demo.median_income > 150_000:
        shift -= 0.1

    return formulas.clamp(shift, *SHIFT_RANGE)


def project_post_passage_metrics(current: PartisanMetrics, district: District) -> PartisanMetrics:
    """Apply the registration shift to current metrics."""
    shift = estimate_registration_shift(district)

    return PartisanMetrics(
        democratic_advantage=current.democratic_advantage + shift,
        competitiveness_index=formulas.clamp(current.competitiveness_index + abs(shift) * 0.01, 0.0, 1.0),
        swing_potential=formulas.clamp(current.swing_potential - abs(shift) * 0.02, 0.0, 1.0),
        voter_engagement=formulas.clamp(current.voter_engagement + shift * 0.01, *ENGAGEMENT_RANGE),
    )


def classify_shift(balance_shift: float) -> tuple[ShiftDirection, Significance]:
    """Direction beyond +-0.5 points; significance above 1 and 2 points."""
    if balance_shift > 0.5:
        direction = ShiftDirection.DEMOCRATIC
    elif balance_shift < -0.5:
        direction = ShiftDirection.REPUBLICAN
    else:
        direction = ShiftDirection.NEUTRAL

    magnitude = abs(balance_shift)
    if magnitude > 2:
        significance = Significance.SIGNIFICANT
    elif magnitude > 1:
        significance = Significance.MODERATE
    else:
        significance = Significance.MINIMAL

    return direction, significance


def identify_driver_factors(balance_shift: float) -> list[str]:
    if balance_shift > 0:
        return ["Urban population growth", "Younger voter demographics"]
    if balance_shift < 0:
        return ["Suburban shift patterns", "Economic policy alignment"]
    return []


def calculate_change(current: PartisanMetrics, projected: PartisanMetrics) -> PartisanChange:
    balance_shift = projected.democratic_advantage - current.democratic_advantage
    direction, significance = classify_shift(balance_shift)

    return PartisanChange(
        balance_shift=balance_shift,
        direction=direction,
        significance=significance,
        driver_factors=identify_driver_factors(balance_shift),
    )


def identify_key_factors(district: District, change: PartisanChange) -> list[ImpactFactor]:
    """Demographic traits that explain the district's reaction."""
    result = []

    if district.demographics.urban_rural_split.urban > 0.6:
        result.append(
            ImpactFactor(
                name="Urban concentration",
                description="High urban population influences policy reception",
                magnitude=0.7,
                direction=(
                    FactorDirection.POSITIVE
                    if change.direction == ShiftDirection.DEMOCRATIC
                    else FactorDirection.NEGATIVE
                ),
            )
        )

    if district.demographics.median_age < 40:
        result.append(
            ImpactFactor(
                name="Young electorate",
                description="Younger voters more likely to support progressive measures",
                magnitude=0.5,
                direction=FactorDirection.POSITIVE,
            )
        )

    return result
