# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Web API:
# - test_models.py: Unit tests for Pydantic model validation and serialization
# - test_config.py: Settings parsing
# - test_weather.py / test_sum.py / test_greet.py: Service and endpoint tests
# - test_health.py: Health, liveness and root endpoints
#
# Run tests with: poetry run pytest
# =============================================================================
