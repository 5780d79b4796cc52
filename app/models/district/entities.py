"""District domain entities - reference data and partisan impact results."""

from dataclasses import dataclass, field
from enum import StrEnum

from app.models.common import BaseEntity


class DistrictType(StrEnum):
    CONGRESSIONAL = "congressional"
    STATE_SENATE = "state_senate"
    STATE_ASSEMBLY = "state_assembly"
    COUNTY = "county"
    CITY = "city"


class ShiftDirection(StrEnum):
    DEMOCRATIC = "democratic"
    REPUBLICAN = "republican"
    NEUTRAL = "neutral"


class NetDirection(StrEnum):
    DEMOCRATIC = "democratic"
    REPUBLICAN = "republican"
    MIXED = "mixed"


class Significance(StrEnum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"


class FactorDirection(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass
class UrbanRuralSplit(BaseEntity):
    urban: float
    suburban: float
    rural: float


@dataclass
class VoterRegistration(BaseEntity):
    democratic: int
    republican: int
    independent: int
    other: int

    @property
    def total(self) -> int:
        return self.democratic + self.republican + self.independent + self.other


@dataclass
class DistrictDemographics(BaseEntity):
    """Census and registration profile of a district."""

    median_income: float
    median_age: float
    urban_rural_split: UrbanRuralSplit
    voter_registration: VoterRegistration
    ethnic_breakdown: dict[str, float] = field(default_factory=dict)
    education_levels: dict[str, float] = field(default_factory=dict)


@dataclass
class District(BaseEntity):
    """Electoral or administrative district. Static reference data."""

    id: str
    name: str
    type: DistrictType
    population: int
    registered_voters: int
    demographics: DistrictDemographics
    code: str = ""
    counties: list[str] = field(default_factory=list)


@dataclass
class PartisanMetrics(BaseEntity):
    """Partisan balance of a district, always derived from its demographics."""

    democratic_advantage: float
    competitiveness_index: float
    swing_potential: float
    voter_engagement: float


@dataclass
class PartisanChange(BaseEntity):
    """Difference between current and projected partisan metrics."""

    balance_shift: float
    direction: ShiftDirection
    significance: Significance
    driver_factors: list[str] = field(default_factory=list)


@dataclass
class ImpactFactor(BaseEntity):
    name: str
    description: str
    magnitude: float
    direction: FactorDirection


@dataclass
class DistrictImpactDetail(BaseEntity):
    """Projected effect of passage on one district."""

    district_id: str
    district_name: str
    district_type: DistrictType
    current_partisan: PartisanMetrics
    projected_partisan: PartisanMetrics
    change: PartisanChange
    key_factors: list[ImpactFactor] = field(default_factory=list)
    counties: list[str] = field(default_factory=list)
    population: int = 0

    @property
    def competitiveness_delta(self) -> float:
        return self.projected_partisan.competitiveness_index - self.current_partisan.competitiveness_index


@dataclass
class StatewideImpact(BaseEntity):
    total_affected_districts: int
    average_balance_shift: float
    net_direction: NetDirection
    competitiveness_change: float


@dataclass
class ImpactSummary(BaseEntity):
    """Counts of districts by significance, shift and competitiveness."""

    total_districts: int
    impacted_districts: dict[str, int]
    shift_distribution: dict[str, int]
    competitiveness_change: dict[str, int]
    representation_impact: str


@dataclass
class PropositionImpact(BaseEntity):
    proposition_id: str
    statewide: StatewideImpact
    districts: list[DistrictImpactDetail]
    summary: ImpactSummary
    skipped_districts: list[str] = field(default_factory=list)


@dataclass
class RegionAggregate(BaseEntity):
    region_name: str
    districts: list[str]
    total_population: int
    avg_partisan_balance: float
    avg_turnout: float
    total_impact: float
