"""Shared fixtures - small in-memory propositions, finance and districts."""

from datetime import date

import pytest

from app.models.district import (
    District,
    DistrictDemographics,
    DistrictType,
    UrbanRuralSplit,
    VoterRegistration,
)
from app.models.proposition import (
    Committee,
    DemographicBreakdown,
    DemographicImpact,
    Position,
    Proposition,
    PropositionCategory,
    PropositionFinance,
    PropositionResult,
    PropositionStatus,
    VotingPattern,
)
from app.services.prediction import PredictionInputs, PredictionService


def build_proposition(**overrides) -> Proposition:
    fields = {
        "id": "2024-1",
        "number": "1",
        "year": 2024,
        "title": "Affordable Housing Bond Act",
        "summary": "Authorizes bonds to fund affordable housing for low income families.",
        "status": PropositionStatus.UPCOMING,
        "category": PropositionCategory.HOUSING,
        "election_date": date(2024, 11, 5),
    }
    fields.update(overrides)
    return Proposition(**fields)


def build_result(passed: bool, yes: float) -> PropositionResult:
    yes_votes = int(yes * 100_000)
    return PropositionResult(
        yes_votes=yes_votes,
        no_votes=10_000_000 - yes_votes,
        yes_percentage=yes,
        no_percentage=100 - yes,
        total_votes=10_000_000,
        turnout=0.6,
        passed=passed,
    )


def build_district(
    dem: int = 100_000,
    rep: int = 100_000,
    ind: int = 0,
    other: int = 0,
    **overrides,
) -> District:
    demographics = DistrictDemographics(
        median_income=overrides.pop("median_income", 60_000),
        median_age=overrides.pop("median_age", 45),
        urban_rural_split=overrides.pop("urban_rural_split", UrbanRuralSplit(0.5, 0.3, 0.2)),
        voter_registration=VoterRegistration(dem, rep, ind, other),
        education_levels=overrides.pop("education_levels", {}),
    )
    fields = {
        "id": "cd-1",
        "name": "District 1",
        "type": DistrictType.CONGRESSIONAL,
        "population": 760_000,
        "registered_voters": dem + rep + ind + other,
        "demographics": demographics,
    }
    fields.update(overrides)
    return District(**fields)


def _pattern(yes: float, population: int = 1_000_000) -> VotingPattern:
    return VotingPattern(population=population, estimated_turnout=0.6, projected_yes=yes, projected_no=1 - yes)


@pytest.fixture
def proposition() -> Proposition:
    return build_proposition()


@pytest.fixture
def finance() -> PropositionFinance:
    return PropositionFinance(proposition_id="2024-1", total_support=25_000_000, total_opposition=8_500_000)


@pytest.fixture
def committee_finance() -> PropositionFinance:
    return PropositionFinance(
        proposition_id="2024-1",
        total_support=10_000_000,
        total_opposition=6_000_000,
        support_committees=[Committee("s1", "Yes on 1", Position.SUPPORT, 10_000_000, 9_000_000)],
        opposition_committees=[Committee("o1", "No on 1", Position.OPPOSITION, 6_000_000, 5_000_000)],
    )


@pytest.fixture
def supportive_demographics() -> DemographicImpact:
    breakdown = DemographicBreakdown(
        age_groups={"18-29": _pattern(0.68), "30-49": _pattern(0.62), "65+": _pattern(0.52)},
        urban_rural={"urban": _pattern(0.66), "rural": _pattern(0.48, 300_000)},
        income={"low": _pattern(0.70), "high": _pattern(0.55)},
    )
    return DemographicImpact(proposition_id="2024-1", statewide=breakdown)


@pytest.fixture
def inputs(proposition, finance, supportive_demographics) -> PredictionInputs:
    return PredictionInputs(proposition=proposition, finance=finance, demographics=supportive_demographics)


@pytest.fixture
def prediction_service() -> PredictionService:
    return PredictionService()


@pytest.fixture
def make_proposition():
    return build_proposition


@pytest.fixture
def make_result():
    return build_result


@pytest.fixture
def make_district():
    return build_district
