# =============================================================================
# core/models/greeting.py - Greeting Schemas
# =============================================================================
# - GreetRequest: Input for POST /api/greet
# - GreetResponse: Output when the name is valid
#
# The name is validated by GreetingService, not by the schema, so that a
# missing or blank name produces the API's own "Name is required" error.
# =============================================================================

from pydantic import BaseModel, Field


class GreetRequest(BaseModel):
    """
    Schema for a greeting request.

    Example:
        {
            "name": "José María"
        }
    """

    # May be absent, null, empty or whitespace-only; checked by the service
    name: str | None = Field(
        default=None,
        description="Name of the person to greet"
    )


class GreetResponse(BaseModel):
    """
    Schema for a successful greeting.

    Example:
        {
            "message": "Hello, José María!"
        }
    """

    message: str = Field(
        ...,
        description="Greeting in the form 'Hello, {name}!'"
    )
