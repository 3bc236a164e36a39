# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides an HTTP test client and a seeded random generator
# =============================================================================

import os
import random

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_random
from app.main import app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def seed():
    """Seed shared by the seeded generator fixtures."""
    return 20240115


@pytest.fixture
def client():
    """HTTP client bound to the FastAPI app (runs the lifespan handler)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(seed):
    """HTTP client whose forecast endpoint draws from a freshly seeded generator."""
    app.dependency_overrides[get_random] = lambda: random.Random(seed)
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_random, None)


@pytest.fixture
def rng(seed):
    """Seeded random generator for service-level tests."""
    return random.Random(seed)
