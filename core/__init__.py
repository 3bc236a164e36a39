# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for request and response bodies
# - services/: Stateless forecast, calculator and greeting logic
#
# Code in this package should NOT define routes or touch Request objects;
# services signal client errors by raising app.exceptions types.
# =============================================================================
