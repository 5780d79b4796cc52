"""Scenario API response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class PresetItem(BaseModel):
    id: str
    name: str
    description: str
    parameters: dict[str, Any]


class ContributionItem(BaseModel):
    factor: str
    original_impact: float
    adjusted_impact: float
    contribution: float


class SensitivityItem(BaseModel):
    parameter: str
    value: float
    probability: float


class ResultsItem(BaseModel):
    """Outcome of running a scenario."""

    original_probability: float
    new_probability: float
    probability_delta: float
    confidence_lower: float
    confidence_upper: float
    factor_contributions: list[ContributionItem]
    sensitivity_analysis: list[SensitivityItem]


class ScenarioItem(BaseModel):
    """Stored scenario."""

    id: str
    name: str
    base_proposition_id: str
    description: str | None
    parameters: dict[str, Any]
    created_at: datetime
    updated_at: datetime
    has_results: bool


class ComparisonResponse(BaseModel):
    scenario_ids: list[str]
    best_case: str | None
    worst_case: str | None
    average_probability: float
    probability_min: float
    probability_max: float
