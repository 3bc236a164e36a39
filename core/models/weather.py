# =============================================================================
# core/models/weather.py - Weather Forecast Schemas
# =============================================================================
# A forecast is a synthetic single-day weather record:
# - date: the forecast day (always in the future)
# - temperatureC: temperature in Celsius
# - temperatureF: derived Fahrenheit value
# - summary: one descriptive word from SUMMARIES
#
# JSON keys are camelCase to match the public API contract.
# =============================================================================

import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Descriptive words a forecast summary is drawn from
SUMMARIES: tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

# Inclusive lower / exclusive upper bound for generated Celsius values
MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55

# Approximate Celsius-per-Fahrenheit-degree divisor used by the conversion
_FAHRENHEIT_DIVISOR = 0.5556


def celsius_to_fahrenheit(celsius: int) -> int:
    """
    Convert Celsius to Fahrenheit the way the forecast API reports it.

    Uses 32 + trunc(C / 0.5556) rather than the exact C * 9/5 + 32, so a few
    values differ by one degree from the precise conversion.

    Example:
        celsius_to_fahrenheit(-20) -> -3
        celsius_to_fahrenheit(25)  -> 76
    """
    return 32 + int(celsius / _FAHRENHEIT_DIVISOR)


class WeatherForecast(BaseModel):
    """
    Schema for one day of the weather forecast.

    Returned (as a list of five) by GET /weatherforecast.

    Example:
        {
            "date": "2024-01-16",
            "temperatureC": 25,
            "temperatureF": 76,
            "summary": "Warm"
        }
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # The day this forecast is for
    date: datetime.date = Field(
        ...,
        description="Forecast date (ISO 8601, YYYY-MM-DD)"
    )

    temperature_c: int = Field(
        ...,
        alias="temperatureC",
        ge=MIN_TEMPERATURE_C,
        lt=MAX_TEMPERATURE_C,
        description="Temperature in degrees Celsius"
    )

    summary: str = Field(
        ...,
        description="One-word description of the weather"
    )

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        """Temperature in degrees Fahrenheit, derived from temperature_c."""
        return celsius_to_fahrenheit(self.temperature_c)
