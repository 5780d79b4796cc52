"""What-if scenario simulation."""

from app.services.scenario.service import ScenarioService, parameters_from_dict
from app.services.scenario.simulator import ScenarioSimulator, confidence_interval

__all__ = ["ScenarioService", "ScenarioSimulator", "confidence_interval", "parameters_from_dict"]
