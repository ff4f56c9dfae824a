"""Immutable duration value and its builder-style API."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Protocol, runtime_checkable

from timesmith._constants import (
    DAY_IN_MS,
    DEFAULT_BUILD_UNIT,
    DEFAULT_HUMAN_STYLE,
    DEFAULT_ISO8601_STYLE,
    DEFAULT_SEPARATOR,
    HOUR_IN_MS,
    MINUTE_IN_MS,
    SECOND_IN_MS,
    WEEK_IN_MS,
)
from timesmith._units import convert_to_unit, decompose, unit_size
from timesmith._utils import validate_amount, validate_divisor
from timesmith.formats.human import HumanFormat
from timesmith.formats.iso8601 import ISO8601Format
from timesmith.translations import Translation


@runtime_checkable
class SupportsMilliseconds(Protocol):
    """Anything that can report its length in milliseconds."""

    def to_milliseconds(self) -> float: ...


@dataclass(frozen=True, order=True)
class Duration:
    """An elapsed span of time stored as non-negative milliseconds.

    Every operation returns a new Duration; instances are never mutated.
    Two durations are equal when their millisecond totals are equal.
    """

    ms: float = 0

    def __post_init__(self) -> None:
        validate_amount(self.ms, "ms")

    # --- Unit additions ---

    def _plus(self, amount: float, field: str, size: int) -> Duration:
        validate_amount(amount, field)
        return Duration(self.ms + amount * size)

    def week(self, weeks: float = 1) -> Duration:
        return self._plus(weeks, "weeks", WEEK_IN_MS)

    def day(self, days: float = 1) -> Duration:
        return self._plus(days, "days", DAY_IN_MS)

    def hour(self, hours: float = 1) -> Duration:
        return self._plus(hours, "hours", HOUR_IN_MS)

    def minute(self, minutes: float = 1) -> Duration:
        return self._plus(minutes, "minutes", MINUTE_IN_MS)

    def second(self, seconds: float = 1) -> Duration:
        return self._plus(seconds, "seconds", SECOND_IN_MS)

    def millisecond(self, milliseconds: float = 1) -> Duration:
        return self._plus(milliseconds, "milliseconds", 1)

    add_weeks = week
    add_days = day
    add_hours = hour
    add_minutes = minute
    add_seconds = second
    add_milliseconds = millisecond

    # --- Arithmetic ---

    def add(self, other: SupportsMilliseconds) -> Duration:
        return Duration(self.ms + other.to_milliseconds())

    def subtract(self, other: SupportsMilliseconds) -> Duration:
        """Subtract ``other``, clamping the result at zero."""
        return Duration(max(0, self.ms - other.to_milliseconds()))

    def multiply(self, factor: float) -> Duration:
        validate_amount(factor, "factor")
        return Duration(self.ms * factor)

    def divide(self, divisor: float) -> Duration:
        validate_divisor(divisor, "divisor")
        return Duration(self.ms / divisor)

    def round(self, unit: str = DEFAULT_BUILD_UNIT) -> Duration:
        """Snap to the nearest multiple of ``unit``, halves rounding up."""
        size = unit_size(unit)
        whole, remainder = divmod(self.ms, size)
        if remainder * 2 >= size:
            whole += 1
        return Duration(int(whole) * size)

    def floor(self, unit: str = DEFAULT_BUILD_UNIT) -> Duration:
        size = unit_size(unit)
        return Duration(math.floor(self.ms / size) * size)

    def ceil(self, unit: str = DEFAULT_BUILD_UNIT) -> Duration:
        size = unit_size(unit)
        return Duration(math.ceil(self.ms / size) * size)

    def clone(self) -> Duration:
        return Duration(self.ms)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, SupportsMilliseconds):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, SupportsMilliseconds):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: float) -> Duration:
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Duration:
        return self.divide(divisor)

    def __bool__(self) -> bool:
        return self.ms > 0

    # --- Comparisons ---

    def equals(self, other: SupportsMilliseconds) -> bool:
        return self.ms == other.to_milliseconds()

    def is_less_than(self, other: SupportsMilliseconds) -> bool:
        return self.ms < other.to_milliseconds()

    def is_less_than_or_equal(self, other: SupportsMilliseconds) -> bool:
        return self.ms <= other.to_milliseconds()

    def is_greater_than(self, other: SupportsMilliseconds) -> bool:
        return self.ms > other.to_milliseconds()

    def is_greater_than_or_equal(self, other: SupportsMilliseconds) -> bool:
        return self.ms >= other.to_milliseconds()

    def is_between(self, minimum: SupportsMilliseconds, maximum: SupportsMilliseconds) -> bool:
        """Inclusive range test. Bounds are used as given, never swapped."""
        return minimum.to_milliseconds() <= self.ms <= maximum.to_milliseconds()

    # --- Totals ---

    def build(self, unit: str = DEFAULT_BUILD_UNIT) -> float:
        """Return the total duration in ``unit`` (seconds by default)."""
        return convert_to_unit(self.ms, unit)

    def to_weeks(self) -> float:
        return self.ms / WEEK_IN_MS

    def to_days(self) -> float:
        return self.ms / DAY_IN_MS

    def to_hours(self) -> float:
        return self.ms / HOUR_IN_MS

    def to_minutes(self) -> float:
        return self.ms / MINUTE_IN_MS

    def to_seconds(self) -> float:
        return self.ms / SECOND_IN_MS

    def to_milliseconds(self) -> float:
        return self.ms

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.ms)

    # --- Components ---

    def get_weeks(self) -> int:
        return decompose(self.ms)["week"]

    def get_days(self) -> int:
        return decompose(self.ms)["day"]

    def get_hours(self) -> int:
        return decompose(self.ms)["hour"]

    def get_minutes(self) -> int:
        return decompose(self.ms)["minute"]

    def get_seconds(self) -> int:
        return decompose(self.ms)["second"]

    def get_milliseconds(self) -> float:
        return decompose(self.ms)["millisecond"]

    # --- Text ---

    def to_string(
        self,
        *,
        format: str = DEFAULT_HUMAN_STYLE,
        separator: str = DEFAULT_SEPARATOR,
        translations: Mapping[str, Translation | Mapping[str, Any]] | None = None,
    ) -> str:
        """Render as ``"1 day, 2 hours"`` (long) or ``"1d, 2h"`` (short).

        Zero-valued units are left out, so a zero duration renders as ``""``.
        Units missing from ``translations`` use the default English names.
        """
        return HumanFormat(format, separator, translations).format(self.ms)

    def to_iso8601_string(self, *, format: str = DEFAULT_ISO8601_STYLE) -> str:
        """Render as ISO 8601, e.g. ``"P0Y0M0W1DT2H0M0S"`` (long) or ``"P1DT2H"`` (short)."""
        return ISO8601Format(format).format(self.ms)

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_string(cls, text: str) -> Duration:
        """Parse ``"1d 2h 30m"``-style text.

        Raises:
            ParseError: If any token is not ``<digits><unit>``.
        """
        return cls(HumanFormat().parse(text))

    @classmethod
    def from_iso8601_string(cls, text: str) -> Duration:
        """Parse an ISO 8601 duration such as ``"P1DT2H30M"``.

        Raises:
            FormatError: If the text does not start with ``P``.
        """
        return cls(ISO8601Format().parse(text))

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        return cls(value / timedelta(milliseconds=1))


def time(
    ms: float = 0,
    *,
    weeks: float = 0,
    days: float = 0,
    hours: float = 0,
    minutes: float = 0,
    seconds: float = 0,
    milliseconds: float = 0,
) -> Duration:
    """Create a duration from an initial amount of each unit.

    Args:
        ms: Initial time in milliseconds.
        weeks: Weeks to add.
        days: Days to add.
        hours: Hours to add.
        minutes: Minutes to add.
        seconds: Seconds to add.
        milliseconds: Milliseconds to add, on top of ``ms``.

    Returns:
        A Duration to chain unit additions on.

    Raises:
        InvalidValueError: If any amount is negative or not a number.
        NonFiniteValueError: If any amount is NaN or infinite.

    Example:
        >>> time().day(1).hour(2).minute(30).build()
        95400.0
        >>> time(hours=1).build("ms")
        3600000
    """
    return (
        Duration(ms)
        .week(weeks)
        .day(days)
        .hour(hours)
        .minute(minutes)
        .second(seconds)
        .millisecond(milliseconds)
    )
