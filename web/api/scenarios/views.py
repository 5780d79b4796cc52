"""Scenario API views - thin layer over services."""

from typing import Any

from app.container import container
from app.errors import NotFoundError
from app.models.scenario import Scenario, ScenarioResults
from app.services.prediction import PredictionInputs
from web.api.errors import api_view, validate_proposition_id
from web.api.schemas import ApiResponse

from .schemas import (
    ComparisonResponse,
    ContributionItem,
    PresetItem,
    ResultsItem,
    ScenarioItem,
    SensitivityItem,
)


def _scenario_item(s: Scenario) -> ScenarioItem:
    return ScenarioItem(
        id=s.id,
        name=s.name,
        base_proposition_id=s.base_proposition_id,
        description=s.description,
        parameters=s.parameters.to_dict(),
        created_at=s.created_at,
        updated_at=s.updated_at,
        has_results=s.results is not None,
    )


def _results_item(r: ScenarioResults) -> ResultsItem:
    return ResultsItem(
        original_probability=r.original_probability,
        new_probability=r.new_probability,
        probability_delta=r.probability_delta,
        confidence_lower=r.confidence_interval.lower,
        confidence_upper=r.confidence_interval.upper,
        factor_contributions=[ContributionItem.model_validate(c.to_dict()) for c in r.factor_contributions],
        sensitivity_analysis=[SensitivityItem.model_validate(p.to_dict()) for p in r.sensitivity_analysis],
    )


@api_view
def get_presets() -> ApiResponse:
    """Available scenario presets."""
    items = [PresetItem.model_validate(p.to_dict()) for p in container.scenarios.get_presets()]
    return ApiResponse.ok(items)


@api_view
def create_scenario(
    proposition_id: str,
    parameters: dict[str, Any] | None = None,
    name: str | None = None,
) -> ApiResponse:
    """New scenario from partial parameters layered over the defaults."""
    validate_proposition_id(proposition_id)
    service = container.scenarios
    scenario = service.create(proposition_id, service.merge_parameters(parameters), name)
    return ApiResponse.ok(_scenario_item(scenario))


@api_view
def create_from_preset(
    proposition_id: str,
    preset_id: str,
    overrides: dict[str, Any] | None = None,
) -> ApiResponse:
    validate_proposition_id(proposition_id)
    scenario = container.scenarios.create_from_preset(proposition_id, preset_id, overrides)
    if scenario is None:
        raise NotFoundError(f"Preset {preset_id} not found")
    return ApiResponse.ok(_scenario_item(scenario))


@api_view
def get_scenario(scenario_id: str) -> ApiResponse:
    scenario = container.scenarios.get_by_id(scenario_id)
    if scenario is None:
        raise NotFoundError(f"Scenario {scenario_id} not found")
    return ApiResponse.ok(_scenario_item(scenario))


@api_view
def list_scenarios(proposition_id: str) -> ApiResponse:
    validate_proposition_id(proposition_id)
    items = [_scenario_item(s) for s in container.scenarios.get_by_proposition(proposition_id)]
    return ApiResponse.ok(items, count=len(items))


@api_view
def update_scenario(scenario_id: str, parameters: dict[str, Any]) -> ApiResponse:
    scenario = container.scenarios.update_parameters(scenario_id, parameters)
    if scenario is None:
        raise NotFoundError(f"Scenario {scenario_id} not found")
    return ApiResponse.ok(_scenario_item(scenario))


@api_view
def delete_scenario(scenario_id: str) -> ApiResponse:
    if not container.scenarios.delete(scenario_id):
        raise NotFoundError(f"Scenario {scenario_id} not found")
    return ApiResponse.ok({"id": scenario_id})


@api_view
def run_scenario(scenario_id: str, inputs: PredictionInputs) -> ApiResponse:
    """Simulate a stored scenario against the proposition's current inputs."""
    results = container.scenarios.run(scenario_id, inputs)
    return ApiResponse.ok(_results_item(results), scenario_id=scenario_id)


@api_view
def compare_scenarios(proposition_id: str) -> ApiResponse:
    """Best and worst case among the proposition's scenarios that have been run."""
    validate_proposition_id(proposition_id)
    comparison = container.scenarios.compare_scenarios(container.scenarios.get_by_proposition(proposition_id))

    data = ComparisonResponse(
        scenario_ids=[s.id for s in comparison.scenarios],
        best_case=comparison.best_case.id if comparison.best_case else None,
        worst_case=comparison.worst_case.id if comparison.worst_case else None,
        average_probability=comparison.average_probability,
        probability_min=comparison.probability_range[0],
        probability_max=comparison.probability_range[1],
    )
    return ApiResponse.ok(data)
