# =============================================================================
# app/routers/weather.py - Weather Forecast Endpoint
# =============================================================================

from fastapi import APIRouter

from app.dependencies import RandomDep
from core.models.weather import WeatherForecast
from core.services.forecast_service import ForecastService

router = APIRouter()


@router.get(
    "/weatherforecast",
    response_model=list[WeatherForecast],
    name="GetWeatherForecast",
)
async def get_weather_forecast(rng: RandomDep):
    """
    Get a five-day synthetic weather forecast.

    Every call returns a freshly randomized forecast for the next five days.
    """
    return ForecastService.generate(rng)
