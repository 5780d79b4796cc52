"""Prediction domain models."""

from app.models.prediction.entities import (
    ComparisonResult,
    DataQuality,
    FactorName,
    HistoricalComparison,
    ImpactDirection,
    Prediction,
    PredictionFactor,
)
from app.models.prediction.weights import DEFAULT_WEIGHTS, FactorWeights

__all__ = [
    "ComparisonResult",
    "DataQuality",
    "FactorName",
    "HistoricalComparison",
    "ImpactDirection",
    "Prediction",
    "PredictionFactor",
    "FactorWeights",
    "DEFAULT_WEIGHTS",
]
