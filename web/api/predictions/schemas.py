"""Prediction API response schemas."""

from datetime import datetime

from pydantic import BaseModel


class FactorItem(BaseModel):
    """One weighted prediction factor."""

    name: str
    weight: float
    value: float
    impact: str
    description: str
    source: str
    has_real_data: bool


class ComparisonItem(BaseModel):
    """Similar historical proposition."""

    proposition_id: str
    proposition_number: str
    year: int
    similarity: float
    result: str
    yes_percentage: float


class PredictionData(BaseModel):
    """Passage prediction payload."""

    proposition_id: str
    passage_probability: float
    confidence: float
    data_quality: str
    data_sources: list[str]
    factors: list[FactorItem]
    historical_comparison: list[ComparisonItem]
    weights_version: str
    generated_at: datetime
