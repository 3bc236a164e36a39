# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every client-input failure is a 400 with a minimal {"error": ...} body.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class WebApiException(Exception):
    """
    Base exception for the Web API.

    All custom exceptions inherit from this class and carry the HTTP
    status code they should be reported with.
    """

    def __init__(
        self,
        message: str,
        code: str = "WEBAPI_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Calculator Exceptions
# =============================================================================

class MissingParameterError(WebApiException):
    """Raised when a required query parameter is absent."""

    def __init__(self, parameter: str):
        super().__init__(
            message=f"Query parameter '{parameter}' is required",
            code="MISSING_PARAMETER",
            status_code=400,
            details={"parameter": parameter}
        )


class InvalidIntegerError(WebApiException):
    """Raised when a query parameter is not a 32-bit signed integer."""

    def __init__(self, parameter: str, value: str):
        super().__init__(
            message=f"Query parameter '{parameter}' must be an integer",
            code="INVALID_INTEGER",
            status_code=400,
            details={"parameter": parameter, "value": value}
        )


# =============================================================================
# Greeting Exceptions
# =============================================================================

class NameRequiredError(WebApiException):
    """Raised when the greet request has no usable name."""

    def __init__(self):
        super().__init__(
            message="Name is required",
            code="NAME_REQUIRED",
            status_code=400,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def webapi_exception_handler(
    request: Request,
    exc: WebApiException
) -> JSONResponse:
    """
    Convert WebApiException to JSON response.

    Returns:
    - error: Human-readable message
    - details: Additional context (if any)
    """
    logger.info(f"{request.method} {request.url.path} rejected: {exc.code}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors raised by FastAPI.

    Malformed JSON bodies and wrongly typed fields are client errors,
    reported as 400 rather than FastAPI's default 422.
    """
    logger.info(f"{request.method} {request.url.path} failed validation")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request",
            "details": {"errors": jsonable_encoder(exc.errors())},
        }
    )
