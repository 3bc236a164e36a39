# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - weather.py: WeatherForecast schema (synthetic daily forecast)
# - calculator.py: SumResponse schema
# - greeting.py: Greet request/response schemas
# - common.py: Error response schema
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Weather Models - Synthetic forecasts
# -----------------------------------------------------------------------------
from .weather import (
    SUMMARIES,
    WeatherForecast,
)

# -----------------------------------------------------------------------------
# Calculator Models - Integer sum
# -----------------------------------------------------------------------------
from .calculator import SumResponse

# -----------------------------------------------------------------------------
# Greeting Models - Name greeting
# -----------------------------------------------------------------------------
from .greeting import (
    GreetRequest,
    GreetResponse,
)

# -----------------------------------------------------------------------------
# Common Models - Shared response shapes
# -----------------------------------------------------------------------------
from .common import ErrorResponse

__all__ = [
    "SUMMARIES",
    "WeatherForecast",
    "SumResponse",
    "GreetRequest",
    "GreetResponse",
    "ErrorResponse",
]
