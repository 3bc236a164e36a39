# =============================================================================
# app/routers/calculator.py - Integer Sum Endpoint
# =============================================================================
# Operands are taken as lists of raw strings and parsed by CalculatorService so
# that missing, repeated or malformed values are reported as 400.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Query

from core.models.calculator import SumResponse
from core.models.common import ErrorResponse
from core.services.calculator_service import CalculatorService

router = APIRouter()


@router.get(
    "/sum",
    response_model=SumResponse,
    name="GetSum",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or non-integer operand"},
    },
)
async def get_sum(
    a: Annotated[list[str] | None, Query(description="First 32-bit integer operand")] = None,
    b: Annotated[list[str] | None, Query(description="Second 32-bit integer operand")] = None,
):
    """
    Add two integers.

    Both `a` and `b` are required, must be given once each, and must be
    32-bit signed integers.
    The sum wraps around on overflow.
    """
    return CalculatorService.sum(a, b)
