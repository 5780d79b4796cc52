"""Dependency Injection container - initialized at app startup."""

from app.services.district.impact import DistrictImpactService
from app.services.prediction.service import PredictionService
from app.services.scenario.service import ScenarioService
from app.services.scenario.simulator import ScenarioSimulator
from app.services.similarity.pool import HistoricalSource
from app.services.similarity.service import SimilarityService
from ballot_client import PropositionClient


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, source: HistoricalSource | None = None) -> None:
        """Initialize all dependencies. Call once at app startup.

        `source` serves historical propositions; defaults to the HTTP client.
        """
        if self._initialized:
            return

        self.source = source or PropositionClient()

        self.prediction = PredictionService()
        self.similarity = SimilarityService(source=self.source)
        self.district_impact = DistrictImpactService()
        self.simulator = ScenarioSimulator(prediction_service=self.prediction)
        self.scenarios = ScenarioService(simulator=self.simulator)

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() rebuilds them."""
        self._initialized = False


# Global container instance
container = Container()
