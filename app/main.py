# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Web API example service.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    WebApiException,
    validation_exception_handler,
    webapi_exception_handler,
)
from app.routers import calculator, greet, health, weather

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The service holds no connections or background tasks, so this only
    logs startup and shutdown.
    """
    logger.info(f"Starting Web API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Web API")


# Interactive docs are only served in development
_docs_url = "/docs" if settings.is_development else None

# Create FastAPI application
app = FastAPI(
    title="Web API Example",
    description="""
## Example Web API

A small stateless service with three endpoints:

| Method | Path | Description |
|--------|------|-------------|
| GET | `/weatherforecast` | Five-day synthetic weather forecast |
| GET | `/api/sum?a=&b=` | Sum of two 32-bit integers |
| POST | `/api/greet` | Greeting for a non-blank name |

Invalid input is rejected with HTTP 400 and an `{"error": ...}` body.
""",
    version=settings.APP_VERSION,
    docs_url=_docs_url,
    redoc_url=None,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Weather",
            "description": "Synthetic weather forecasts",
        },
        {
            "name": "Calculator",
            "description": "Integer arithmetic",
        },
        {
            "name": "Greet",
            "description": "Name greetings",
        },
        {
            "name": "Health",
            "description": "API health and liveness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(WebApiException)
async def handle_webapi_exception(request: Request, exc: WebApiException):
    """Handle custom Web API exceptions."""
    return await webapi_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"}
    )


# =============================================================================
# Routers
# =============================================================================

# Weather forecast endpoint (served at the root, not under /api)
app.include_router(
    weather.router,
    tags=["Weather"]
)

# Calculator endpoints
app.include_router(
    calculator.router,
    prefix="/api",
    tags=["Calculator"]
)

# Greeting endpoints
app.include_router(
    greet.router,
    prefix="/api",
    tags=["Greet"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Web API Example",
        "version": settings.APP_VERSION,
        "docs": _docs_url,
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
