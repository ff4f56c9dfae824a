"""Validation helpers and number rendering."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real

from timesmith._errors import (
    ERR_MSG_NEGATIVE_VALUE,
    ERR_MSG_NON_FINITE_VALUE,
    ERR_MSG_NON_POSITIVE_VALUE,
    ERR_MSG_NOT_A_NUMBER,
    InvalidValueError,
    NonFiniteValueError,
)


def _is_finite(value: Real) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large to represent as a float
        return False


def validate_amount(value: object, field: str) -> None:
    """Validate a non-negative, finite numeric input.

    Raises:
        InvalidValueError: If the value is not a number or is negative.
        NonFiniteValueError: If the value is NaN or infinite.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidValueError(
            f"invalid {field} value {value!r}: {ERR_MSG_NOT_A_NUMBER}",
            f"{field} received {type(value).__name__} {value!r}",
        )
    if value < 0:
        raise InvalidValueError(f"invalid {field} value {value!r}: {ERR_MSG_NEGATIVE_VALUE}")
    if not _is_finite(value):
        raise NonFiniteValueError(f"invalid {field} value {value!r}: {ERR_MSG_NON_FINITE_VALUE}")


def validate_divisor(value: object, field: str) -> None:
    """Validate a strictly positive, finite numeric input."""
    validate_amount(value, field)
    if value == 0:
        raise InvalidValueError(f"invalid {field} value {value!r}: {ERR_MSG_NON_POSITIVE_VALUE}")


def format_number(value: float) -> str:
    """Render a number in plain decimal digits, without exponent or trailing zeros."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
