"""Proposition domain entities - ballot measures, finance, wording, demographics."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

from app.models.common import BaseEntity


class PropositionStatus(StrEnum):
    UPCOMING = "upcoming"
    ACTIVE = "active"
    PASSED = "passed"
    FAILED = "failed"


class PropositionCategory(StrEnum):
    TAXATION = "taxation"
    EDUCATION = "education"
    HEALTHCARE = "healthcare"
    ENVIRONMENT = "environment"
    CRIMINAL_JUSTICE = "criminal_justice"
    LABOR = "labor"
    HOUSING = "housing"
    TRANSPORTATION = "transportation"
    GOVERNMENT = "government"
    CIVIL_RIGHTS = "civil_rights"
    OTHER = "other"


class Position(StrEnum):
    SUPPORT = "support"
    OPPOSITION = "opposition"


class DonorType(StrEnum):
    INDIVIDUAL = "individual"
    ORGANIZATION = "organization"
    PAC = "pac"


class Complexity(StrEnum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


@dataclass
class PropositionResult(BaseEntity):
    """Certified election result. Immutable once recorded."""

    yes_votes: int
    no_votes: int
    yes_percentage: float
    no_percentage: float
    total_votes: int
    turnout: float
    passed: bool


@dataclass
class Proposition(BaseEntity):
    """California ballot proposition."""

    id: str
    number: str
    year: int
    title: str
    summary: str
    status: PropositionStatus
    category: PropositionCategory
    election_date: date | None = None
    result: PropositionResult | None = None
    full_text: str | None = None
    sponsors: list[str] = field(default_factory=list)
    # None = unknown, [] = known to have no organized opposition
    opponents: list[str] | None = None


@dataclass
class Committee(BaseEntity):
    """Campaign committee for or against a measure."""

    id: str
    name: str
    position: Position
    total_raised: float
    total_spent: float


@dataclass
class Donor(BaseEntity):
    """Top donor to a measure campaign."""

    name: str
    amount: float
    position: Position
    type: DonorType


@dataclass
class PropositionFinance(BaseEntity):
    """Aggregated campaign finance for a proposition."""

    proposition_id: str
    total_support: float
    total_opposition: float
    support_committees: list[Committee] = field(default_factory=list)
    opposition_committees: list[Committee] = field(default_factory=list)
    top_donors: list[Donor] = field(default_factory=list)
    last_updated: datetime | None = None


@dataclass
class BallotAnalysis(BaseEntity):
    """Readability and framing of the ballot label."""

    proposition_id: str
    word_count: int
    readability_score: float
    sentiment_score: float
    complexity: Complexity
    key_phrases: list[str] = field(default_factory=list)
    # Built from neutral defaults rather than measured text
    synthetic: bool = False


@dataclass
class VotingPattern(BaseEntity):
    """Projected vote of one demographic group."""

    population: int
    estimated_turnout: float
    projected_yes: float
    projected_no: float


@dataclass
class DemographicBreakdown(BaseEntity):
    """Voting patterns keyed by group within each demographic dimension."""

    age_groups: dict[str, VotingPattern] = field(default_factory=dict)
    ethnicity: dict[str, VotingPattern] = field(default_factory=dict)
    income: dict[str, VotingPattern] = field(default_factory=dict)
    education: dict[str, VotingPattern] = field(default_factory=dict)
    urban_rural: dict[str, VotingPattern] = field(default_factory=dict)


@dataclass
class RegionalDemographics(BaseEntity):
    """Breakdown for one California region."""

    region: str
    counties: list[str]
    breakdown: DemographicBreakdown


@dataclass
class DemographicImpact(BaseEntity):
    """Statewide and regional demographic projections for a proposition."""

    proposition_id: str
    statewide: DemographicBreakdown
    by_region: list[RegionalDemographics] = field(default_factory=list)
