"""Time unit identifiers and millisecond conversion tables."""

from __future__ import annotations

import enum

from timesmith._constants import (
    DAY_IN_MS,
    HOUR_IN_MS,
    MINUTE_IN_MS,
    SECOND_IN_MS,
    WEEK_IN_MS,
)


class TimeUnit(enum.StrEnum):
    """Unit codes accepted by ``build()`` and the snapping operations."""

    WEEK = "w"
    DAY = "d"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "ms"


UNIT_SIZES: dict[TimeUnit, int] = {
    TimeUnit.WEEK: WEEK_IN_MS,
    TimeUnit.DAY: DAY_IN_MS,
    TimeUnit.HOUR: HOUR_IN_MS,
    TimeUnit.MINUTE: MINUTE_IN_MS,
    TimeUnit.SECOND: SECOND_IN_MS,
    TimeUnit.MILLISECOND: 1,
}

# Translation key -> size, largest first
NAMED_UNITS: tuple[tuple[str, int], ...] = (
    ("week", WEEK_IN_MS),
    ("day", DAY_IN_MS),
    ("hour", HOUR_IN_MS),
    ("minute", MINUTE_IN_MS),
    ("second", SECOND_IN_MS),
    ("millisecond", 1),
)


def resolve_unit(unit: str) -> TimeUnit:
    """Get a TimeUnit by code.

    Args:
        unit: Unit code (``"w"``, ``"d"``, ``"h"``, ``"m"``, ``"s"``, ``"ms"``).

    Returns:
        The matching TimeUnit.

    Raises:
        ValueError: If the unit code is unknown.
    """
    try:
        return TimeUnit(unit)
    except ValueError:
        raise ValueError(
            f"unknown time unit: {unit!r}. "
            f"Available: {', '.join(u.value for u in TimeUnit)}"
        ) from None


def unit_size(unit: str) -> int:
    return UNIT_SIZES[resolve_unit(unit)]


def convert_to_unit(ms: float, unit: str) -> float:
    """Express a millisecond total in the given unit."""
    size = unit_size(unit)
    if size == 1:
        return ms
    return ms / size


def decompose(ms: float) -> dict[str, float]:
    """Split a millisecond total into clock-style components.

    Every component except ``millisecond`` is a whole number; ``week`` is
    unbounded. The millisecond component keeps any fractional remainder so
    the components always sum back to ``ms``.
    """
    components: dict[str, float] = {}
    remaining = ms
    for name, size in NAMED_UNITS[:-1]:
        amount = int(remaining // size)
        components[name] = amount
        remaining %= size
    components["millisecond"] = remaining
    return components
