"""District domain models - reference data, partisan metrics, regions."""

from app.models.district.entities import (
    District,
    DistrictDemographics,
    DistrictImpactDetail,
    DistrictType,
    FactorDirection,
    ImpactFactor,
    ImpactSummary,
    NetDirection,
    PartisanChange,
    PartisanMetrics,
    PropositionImpact,
    RegionAggregate,
    ShiftDirection,
    Significance,
    StatewideImpact,
    UrbanRuralSplit,
    VoterRegistration,
)
from app.models.district.regions import CALIFORNIA_REGIONS, CaliforniaRegion

__all__ = [
    "District",
    "DistrictDemographics",
    "DistrictImpactDetail",
    "DistrictType",
    "FactorDirection",
    "ImpactFactor",
    "ImpactSummary",
    "NetDirection",
    "PartisanChange",
    "PartisanMetrics",
    "PropositionImpact",
    "RegionAggregate",
    "ShiftDirection",
    "Significance",
    "StatewideImpact",
    "UrbanRuralSplit",
    "VoterRegistration",
    # Regions
    "CaliforniaRegion",
    "CALIFORNIA_REGIONS",
]
