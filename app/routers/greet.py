# =============================================================================
# app/routers/greet.py - Greeting Endpoint
# =============================================================================

from fastapi import APIRouter

from core.models.common import ErrorResponse
from core.models.greeting import GreetRequest, GreetResponse
from core.services.greeting_service import GreetingService

router = APIRouter()


@router.post(
    "/greet",
    response_model=GreetResponse,
    name="PostGreet",
    responses={
        400: {"model": ErrorResponse, "description": "Name is missing or blank"},
    },
)
async def post_greet(request: GreetRequest):
    """
    Greet a person by name.

    The name must contain at least one non-whitespace character and is
    echoed back unchanged.
    """
    return GreetingService.greet(request)
