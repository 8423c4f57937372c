"""Standardized error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    message: str | list[str] = Field(..., description="Human-readable error message(s)")
    code: str = Field(..., description="Machine-readable error code")
