# =============================================================================
# core/models/common.py - Shared Response Schemas
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for rejected requests."""

    error: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional context, e.g. the offending parameter"
    )
