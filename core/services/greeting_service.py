# =============================================================================
# core/services/greeting_service.py - Name Greeting
# =============================================================================

import logging

from core.models.greeting import GreetRequest, GreetResponse
from app.exceptions import NameRequiredError

logger = logging.getLogger(__name__)

# Code points with the Unicode White_Space property. str.isspace() also
# accepts U+001C..U+001F, which are not whitespace here.
UNICODE_WHITESPACE = frozenset(
    "\t\n\v\f\r "
    "\u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class GreetingService:
    """Service for greeting a named person."""

    @staticmethod
    def is_blank(name: str | None) -> bool:
        """True if name is None, empty, or only Unicode White_Space characters."""
        return not name or all(ch in UNICODE_WHITESPACE for ch in name)

    @staticmethod
    def greet(request: GreetRequest) -> GreetResponse:
        """
        Build the greeting for a request.

        The name is echoed exactly as given (no trimming).

        Raises:
            NameRequiredError: If the name is missing or blank
        """
        if GreetingService.is_blank(request.name):
            raise NameRequiredError()

        return GreetResponse(message=f"Hello, {request.name}!")
