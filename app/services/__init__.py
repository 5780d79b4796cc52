"""Services package - service class exports."""

from app.services.district.impact import DistrictImpactService
from app.services.prediction.service import PredictionService
from app.services.scenario.service import ScenarioService
from app.services.scenario.simulator import ScenarioSimulator
from app.services.similarity.service import SimilarityService

__all__ = [
    "DistrictImpactService",
    "PredictionService",
    "ScenarioService",
    "ScenarioSimulator",
    "SimilarityService",
]
