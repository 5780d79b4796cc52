"""Scenario service - in-memory scenario lifecycle, presets and comparison."""

import uuid
from datetime import UTC, datetime
from typing import Any

from loguru import logger
from pydantic import ValidationError

from app.errors import InvalidInputError, NotFoundError
from app.models.prediction import Prediction
from app.models.scenario import (
    Scenario,
    ScenarioComparison,
    ScenarioParameters,
    ScenarioPreset,
    ScenarioResults,
)
from app.services.prediction import PredictionInputs
from app.services.scenario.schemas import ScenarioParametersSchema
from app.services.scenario.simulator import ScenarioSimulator
from settings.presets import DEFAULT_PRESETS

MERGED_SECTIONS = ("funding", "turnout", "framing")
REPLACED_SECTIONS = ("timing", "opposition")


def _now() -> datetime:
    return datetime.now(UTC)


def parameters_from_dict(data: dict[str, Any]) -> ScenarioParameters:
    """Validate a nested parameter dict into a bundle.

    Raises InvalidInputError on unknown fields, bad enum values, non-numeric
    or non-positive multipliers and negative custom amounts.
    """
    try:
        return ScenarioParametersSchema.model_validate(data).to_entity()
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(part) for part in first["loc"])
        raise InvalidInputError(f"Invalid scenario parameters at {where}: {first['msg']}") from e


class ScenarioService:
    """Scenarios kept in memory for the lifetime of the service."""

    def __init__(self, simulator: ScenarioSimulator, presets: list[dict] = DEFAULT_PRESETS):
        self._simulator = simulator
        self._presets = {p["id"]: ScenarioPreset(**p) for p in presets}
        self._scenarios: dict[str, Scenario] = {}
        logger.debug("ScenarioService initialized ({} presets)", len(self._presets))

    def create(
        self,
        base_proposition_id: str,
        parameters: ScenarioParameters | None = None,
        name: str | None = None,
        description: str | None = None,
    ) -> Scenario:
        now = _now()
        scenario = Scenario(
            id=uuid.uuid4().hex,
            name=name or f"Scenario {len(self._scenarios) + 1}",
            base_proposition_id=base_proposition_id,
            parameters=parameters or self.get_default_parameters(),
            created_at=now,
            updated_at=now,
            description=description,
        )
        self._scenarios[scenario.id] = scenario
        logger.debug("Created scenario {} for {}", scenario.id, base_proposition_id)
        return scenario

    def create_from_preset(
        self,
        base_proposition_id: str,
        preset_id: str,
        overrides: dict[str, Any] | None = None,
    ) -> Scenario | None:
        """Seed a scenario from a preset, then apply user overrides. None for an unknown preset."""
        preset = self._presets.get(preset_id)
        if preset is None:
            logger.warning("Unknown scenario preset: {}", preset_id)
            return None

        parameters = self.merge_parameters(preset.parameters, overrides)
        return self.create(base_proposition_id, parameters, preset.name, preset.description)

    def run(
        self,
        scenario_id: str,
        inputs: PredictionInputs,
        baseline: Prediction | None = None,
    ) -> ScenarioResults:
        scenario = self._require(scenario_id)
        if inputs.proposition is None or inputs.proposition.id != scenario.base_proposition_id:
            raise InvalidInputError(f"Inputs do not belong to proposition {scenario.base_proposition_id}")

        results = self._simulator.simulate(inputs, scenario.parameters, baseline)
        self._scenarios[scenario_id] = scenario.evolve(results=results, updated_at=_now())
        return results

    def get_by_id(self, scenario_id: str) -> Scenario | None:
        return self._scenarios.get(scenario_id)

    def get_by_proposition(self, proposition_id: str) -> list[Scenario]:
        return [s for s in self._scenarios.values() if s.base_proposition_id == proposition_id]

    def delete(self, scenario_id: str) -> bool:
        return self._scenarios.pop(scenario_id, None) is not None

    def duplicate(self, scenario_id: str, name: str | None = None) -> Scenario | None:
        original = self._scenarios.get(scenario_id)
        if original is None:
            return None

        now = _now()
        copy = original.evolve(
            id=uuid.uuid4().hex,
            name=name or f"{original.name} (Copy)",
            parameters=self.merge_parameters(original.parameters),
            results=None,
            created_at=now,
            updated_at=now,
        )
        self._scenarios[copy.id] = copy
        return copy

    def update_parameters(self, scenario_id: str, parameters: dict[str, Any] | ScenarioParameters) -> Scenario | None:
        """Merge new parameters into a scenario; stale results are dropped."""
        scenario = self._scenarios.get(scenario_id)
        if scenario is None:
            return None

        updated = scenario.evolve(
            parameters=self.merge_parameters(scenario.parameters, parameters),
            results=None,
            updated_at=_now(),
        )
        self._scenarios[scenario_id] = updated
        return updated

    def get_presets(self) -> list[ScenarioPreset]:
        return list(self._presets.values())

    @staticmethod
    def get_default_parameters() -> ScenarioParameters:
        return ScenarioParameters()

    @staticmethod
    def merge_parameters(*parameter_sets: dict[str, Any] | ScenarioParameters | None) -> ScenarioParameters:
        """Layer partial bundles over the defaults.

        Funding, turnout and framing merge field by field; timing and
        opposition are replaced as a whole.
        """
        merged: dict[str, Any] = ScenarioParameters().to_dict()

        for params in parameter_sets:
            if params is None:
                continue
            if isinstance(params, ScenarioParameters):
                params = params.to_dict()

            for section in MERGED_SECTIONS:
                if params.get(section):
                    merged[section] = {**merged[section], **params[section]}
            for section in REPLACED_SECTIONS:
                if params.get(section):
                    merged[section] = params[section]

        return parameters_from_dict(merged)

    @staticmethod
    def compare_scenarios(scenarios: list[Scenario]) -> ScenarioComparison:
        """Best, worst and average outcome among scenarios that have been run."""
        with_results = [s for s in scenarios if s.results is not None]
        if not with_results:
            return ScenarioComparison(
                scenarios=[],
                best_case=None,
                worst_case=None,
                average_probability=0.0,
                probability_range=(0.0, 0.0),
            )

        probabilities = [s.results.new_probability for s in with_results]
        return ScenarioComparison(
            scenarios=with_results,
            best_case=max(with_results, key=lambda s: s.results.new_probability),
            worst_case=min(with_results, key=lambda s: s.results.new_probability),
            average_probability=sum(probabilities) / len(probabilities),
            probability_range=(min(probabilities), max(probabilities)),
        )

    def clear(self) -> None:
        self._scenarios.clear()

    def _require(self, scenario_id: str) -> Scenario:
        scenario = self._scenarios.get(scenario_id)
        if scenario is None:
            raise NotFoundError(f"Scenario {scenario_id} not found")
        return scenario
