# =============================================================================
# core/models/calculator.py - Calculator Schemas
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class SumResponse(BaseModel):
    """
    Schema for the result of GET /api/sum.

    Example:
        {
            "a": 5,
            "b": 3,
            "sum": 8
        }
    """

    model_config = ConfigDict(frozen=True)

    a: int = Field(..., description="First operand")
    b: int = Field(..., description="Second operand")
    sum: int = Field(..., description="a + b (32-bit signed arithmetic)")
