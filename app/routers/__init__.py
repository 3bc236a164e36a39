# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - weather.py: Synthetic weather forecast endpoint
# - calculator.py: Integer sum endpoint
# - greet.py: Name greeting endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import weather
from . import calculator
from . import greet

__all__ = [
    "health",
    "weather",
    "calculator",
    "greet",
]
