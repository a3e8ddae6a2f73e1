"""Core schema definitions shared by all routers.

Error bodies produced by :mod:`app.core.exceptions` follow :class:`ErrorResponse`;
routers reference it in their ``responses=`` so the envelope shows up in OpenAPI.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(None, description="Additional error context")


class ErrorResponse(BaseModel):
    """Standard error response format.

    Example:
        {
            "success": false,
            "error": {
                "code": "INVALID_RANGE",
                "message": "startDate must not be after endDate",
                "details": { "field": "startDate" }
            }
        }
    """

    success: bool = False
    error: ErrorDetail


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid date range"},
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    403: {"model": ErrorResponse, "description": "Staff or admin role required"},
    503: {"model": ErrorResponse, "description": "Data store unavailable"},
}
