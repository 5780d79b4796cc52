"""Response envelope shared by all API views."""

from typing import Any

from pydantic import BaseModel


class ApiError(BaseModel):
    """Error payload of a failed response."""

    code: str
    message: str


class ApiResponse(BaseModel):
    """{data, success, error, meta} envelope."""

    data: Any = None
    success: bool
    error: ApiError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def ok(cls, data: Any, **meta: Any) -> "ApiResponse":
        return cls(data=data, success=True, meta=meta or None)

    @classmethod
    def fail(cls, error: ApiError) -> "ApiResponse":
        return cls(data=None, success=False, error=error)
