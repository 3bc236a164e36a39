# =============================================================================
# core/services/calculator_service.py - Integer Sum
# =============================================================================
# Parses query-string operands as 32-bit signed integers and adds them with
# two's-complement wraparound.
# =============================================================================

import logging
import re

from core.models.calculator import SumResponse
from app.exceptions import InvalidIntegerError, MissingParameterError

logger = logging.getLogger(__name__)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# Optional sign followed by ASCII digits only (no underscores, no decimals)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Whitespace trimmed around an operand (ASCII only)
_ASCII_WHITESPACE = " \t\n\v\f\r"


class CalculatorService:
    """Service for the integer-sum calculator."""

    @staticmethod
    def single_value(parameter: str, values: list[str] | None) -> str:
        """
        Pick the one raw value supplied for a query parameter.

        Args:
            parameter: Parameter name (used in error details)
            values: Every value given for the parameter, or None if absent

        Raises:
            MissingParameterError: If no value was given
            InvalidIntegerError: If the parameter was repeated
        """
        if not values:
            raise MissingParameterError(parameter)
        if len(values) > 1:
            raise InvalidIntegerError(parameter, ",".join(values))
        return values[0]

    @staticmethod
    def parse_int32(parameter: str, raw: str | None) -> int:
        """
        Parse a query parameter value as a 32-bit signed integer.

        Surrounding ASCII whitespace is ignored.

        Args:
            parameter: Parameter name (used in error details)
            raw: Raw query-string value, or None if absent

        Returns:
            The parsed integer

        Raises:
            MissingParameterError: If the value is absent
            InvalidIntegerError: If the value is not an integer in int32 range
        """
        if raw is None:
            raise MissingParameterError(parameter)

        text = raw.strip(_ASCII_WHITESPACE)
        if not _INTEGER_PATTERN.fullmatch(text):
            raise InvalidIntegerError(parameter, raw)

        value = int(text)
        if not INT32_MIN <= value <= INT32_MAX:
            raise InvalidIntegerError(parameter, raw)

        return value

    @staticmethod
    def add(a: int, b: int) -> int:
        """
        Add two int32 values, wrapping on overflow.

        Example:
            add(2147483647, 1) -> -2147483648
        """
        return (a + b - INT32_MIN) % 2 ** 32 + INT32_MIN

    @staticmethod
    def sum(raw_a: list[str] | None, raw_b: list[str] | None) -> SumResponse:
        """
        Validate both operands and compute their sum.

        Args:
            raw_a: Every query-string value given for `a`
            raw_b: Every query-string value given for `b`

        Raises:
            MissingParameterError / InvalidIntegerError: If either operand is unusable
        """
        a = CalculatorService.parse_int32("a", CalculatorService.single_value("a", raw_a))
        b = CalculatorService.parse_int32("b", CalculatorService.single_value("b", raw_b))

        result = SumResponse(a=a, b=b, sum=CalculatorService.add(a, b))
        logger.debug(f"Computed sum {a} + {b} = {result.sum}")
        return result
