"""Scenario API."""

from web.api.scenarios.views import (
    compare_scenarios,
    create_from_preset,
    create_scenario,
    delete_scenario,
    get_presets,
    get_scenario,
    list_scenarios,
    run_scenario,
    update_scenario,
)

__all__ = [
    "get_presets",
    "create_scenario",
    "create_from_preset",
    "get_scenario",
    "list_scenarios",
    "update_scenario",
    "delete_scenario",
    "run_scenario",
    "compare_scenarios",
]
