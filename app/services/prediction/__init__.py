"""Prediction services."""

from app.services.prediction.service import (
    FactorAdjustments,
    PredictionInputs,
    PredictionService,
    calculate_confidence,
    data_quality_for,
)
from app.services.prediction.wording import analyze_ballot_wording

__all__ = [
    "FactorAdjustments",
    "PredictionInputs",
    "PredictionService",
    "analyze_ballot_wording",
    "calculate_confidence",
    "data_quality_for",
]
