"""API errors, result codes and the envelope-producing view decorator."""

import functools
import inspect
from enum import StrEnum

from loguru import logger

from app.errors import InvalidInputError, NotFoundError
from app.services.similarity.matcher import parse_proposition_id
from web.api.schemas import ApiError, ApiResponse


class ErrorCode(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def validate_proposition_id(proposition_id: str) -> None:
    """Validate a "<year>-<number>" proposition id."""
    parse_proposition_id(proposition_id)


def error_response(exc: Exception) -> ApiResponse:
    """Map a service exception to a failed envelope."""
    if isinstance(exc, NotFoundError):
        return ApiResponse.fail(ApiError(code=ErrorCode.NOT_FOUND, message=exc.message))
    if isinstance(exc, InvalidInputError):
        return ApiResponse.fail(ApiError(code=ErrorCode.INVALID_ID, message=exc.message))

    logger.exception("Unexpected error in API view")
    return ApiResponse.fail(ApiError(code=ErrorCode.INTERNAL_ERROR, message="Internal server error"))


def api_view(fn):
    """Wrap a view so that it always returns an envelope, sync or async."""
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args, **kwargs) -> ApiResponse:
            try:
                return await fn(*args, **kwargs)
            except Exception as e:
                return error_response(e)

        return async_wrapper

    @functools.wraps(fn)
    def wrapper(*args, **kwargs) -> ApiResponse:
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            return error_response(e)

    return wrapper


__all__ = [
    "ErrorCode",
    "InvalidInputError",
    "NotFoundError",
    "api_view",
    "error_response",
    "validate_proposition_id",
]
