"""District API response schemas."""

from pydantic import BaseModel


class PartisanItem(BaseModel):
    democratic_advantage: float
    competitiveness_index: float
    swing_potential: float
    voter_engagement: float


class DistrictImpactItem(BaseModel):
    """Projected effect on one district."""

    district_id: str
    district_name: str
    district_type: str
    current_partisan: PartisanItem
    projected_partisan: PartisanItem
    balance_shift: float
    direction: str
    significance: str
    driver_factors: list[str]


class StatewideItem(BaseModel):
    total_affected_districts: int
    average_balance_shift: float
    net_direction: str
    competitiveness_change: float


class ImpactResponse(BaseModel):
    """Statewide, per-district and summary impact of a proposition."""

    proposition_id: str
    statewide: StatewideItem
    districts: list[DistrictImpactItem]
    impacted_districts: dict[str, int]
    shift_distribution: dict[str, int]
    representation_impact: str
    skipped_districts: list[str] = []


class RegionItem(BaseModel):
    """Aggregate for one California region."""

    region_name: str
    districts: list[str]
    total_population: int
    avg_partisan_balance: float
    avg_turnout: float
    total_impact: float
