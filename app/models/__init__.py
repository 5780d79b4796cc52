"""Models package - entities for all domains."""

from app.models.common import BaseEntity
from app.models.district import (
    CALIFORNIA_REGIONS,
    CaliforniaRegion,
    District,
    DistrictImpactDetail,
    PartisanChange,
    PartisanMetrics,
    PropositionImpact,
    RegionAggregate,
)
from app.models.prediction import (
    DEFAULT_WEIGHTS,
    DataQuality,
    FactorName,
    FactorWeights,
    HistoricalComparison,
    ImpactDirection,
    Prediction,
    PredictionFactor,
)
from app.models.proposition import (
    BallotAnalysis,
    DemographicImpact,
    Proposition,
    PropositionCategory,
    PropositionFinance,
    PropositionResult,
    PropositionStatus,
)
from app.models.scenario import (
    Scenario,
    ScenarioParameters,
    ScenarioPreset,
    ScenarioResults,
)

__all__ = [
    # Common
    "BaseEntity",
    # Proposition
    "BallotAnalysis",
    "DemographicImpact",
    "Proposition",
    "PropositionCategory",
    "PropositionFinance",
    "PropositionResult",
    "PropositionStatus",
    # Prediction
    "DEFAULT_WEIGHTS",
    "DataQuality",
    "FactorName",
    "FactorWeights",
    "HistoricalComparison",
    "ImpactDirection",
    "Prediction",
    "PredictionFactor",
    # District
    "CALIFORNIA_REGIONS",
    "CaliforniaRegion",
    "District",
    "DistrictImpactDetail",
    "PartisanChange",
    "PartisanMetrics",
    "PropositionImpact",
    "RegionAggregate",
    # Scenario
    "Scenario",
    "ScenarioParameters",
    "ScenarioPreset",
    "ScenarioResults",
]
