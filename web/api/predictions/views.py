"""Prediction API views - thin layer over services."""

from app.container import container
from app.services.prediction import PredictionInputs
from web.api.errors import api_view
from web.api.schemas import ApiResponse

from .schemas import PredictionData


@api_view
def get_prediction(inputs: PredictionInputs, custom_weights: dict[str, float] | None = None) -> ApiResponse:
    """Passage prediction for the proposition in `inputs`."""
    prediction = container.prediction.generate_prediction(
        inputs.proposition,
        finance=inputs.finance,
        historical_pool=inputs.historical_pool,
        demographics=inputs.demographics,
        ballot_analysis=inputs.ballot_analysis,
        custom_weights=custom_weights,
    )
    data = PredictionData.model_validate(prediction.to_dict())
    return ApiResponse.ok(data, real_factors=prediction.real_data_count)


@api_view
def get_weights() -> ApiResponse:
    """Factor weights currently in use."""
    weights = container.prediction.weights
    return ApiResponse.ok(
        {name.value: w for name, w in weights.as_dict().items()},
        version=weights.version,
    )
