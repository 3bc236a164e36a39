# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

import random
from typing import Annotated

from fastapi import Depends

# Process-wide random source for forecast generation.
# random.Random methods are safe to call from concurrent requests.
_random = random.Random()


def get_random() -> random.Random:
    """
    Get the shared random number generator.

    Tests override this dependency with a seeded generator.
    """
    return _random


# Type alias for dependency injection
RandomDep = Annotated[random.Random, Depends(get_random)]
