# =============================================================================
# core/services/forecast_service.py - Weather Forecast Generation
# =============================================================================
# Generates a fresh set of synthetic forecasts on every call.
# Nothing is cached or persisted.
# =============================================================================

import datetime
import logging
import random

from core.models.weather import (
    MAX_TEMPERATURE_C,
    MIN_TEMPERATURE_C,
    SUMMARIES,
    WeatherForecast,
)

logger = logging.getLogger(__name__)

# Number of days covered by one forecast request
FORECAST_DAYS = 5


class ForecastService:
    """
    Service for generating weather forecasts.

    The random source is passed in so callers can share one process-wide
    generator and tests can supply a seeded one.
    """

    @staticmethod
    def generate(
        rng: random.Random,
        today: datetime.date | None = None,
    ) -> list[WeatherForecast]:
        """
        Generate one forecast per day for the next FORECAST_DAYS days.

        Args:
            rng: Random number generator to draw temperatures and summaries from
            today: Reference date (defaults to the server's local date)

        Returns:
            Forecasts for today + 1 through today + FORECAST_DAYS, in order
        """
        if today is None:
            today = datetime.date.today()

        forecasts = [
            WeatherForecast(
                date=today + datetime.timedelta(days=offset),
                temperature_c=rng.randrange(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C),
                summary=rng.choice(SUMMARIES),
            )
            for offset in range(1, FORECAST_DAYS + 1)
        ]

        logger.debug(f"Generated {len(forecasts)} forecasts starting {forecasts[0].date}")
        return forecasts
