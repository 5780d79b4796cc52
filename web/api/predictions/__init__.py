"""Prediction API."""

from web.api.predictions.views import get_prediction, get_weights

__all__ = ["get_prediction", "get_weights"]
