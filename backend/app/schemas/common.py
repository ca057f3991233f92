"""Common Pydantic schemas."""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str
    error_code: Optional[str] = None
    details: Optional[dict[str, Any]] = None


class ProblemDetails(BaseModel):
    """RFC 7807 problem document."""

    type: str = "about:blank"
    title: str
    status: int
    detail: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class HealthResponse(BaseModel):
    """Health check payload."""

    status: str
    app: str
    books: int
