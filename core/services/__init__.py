# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .forecast_service import ForecastService
from .calculator_service import CalculatorService
from .greeting_service import GreetingService

__all__ = [
    "ForecastService",
    "CalculatorService",
    "GreetingService",
]
