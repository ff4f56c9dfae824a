"""ISO 8601 duration format (``P1DT2H30M``).

Years and months use fixed sizes of 365 and 30 days. Fractions are accepted
on every component when parsing and emitted only on seconds when formatting.
"""

from __future__ import annotations

import re

from timesmith._constants import (
    DAY_IN_MS,
    DEFAULT_ISO8601_STYLE,
    HOUR_IN_MS,
    MINUTE_IN_MS,
    MONTH_IN_MS,
    SECOND_IN_MS,
    WEEK_IN_MS,
    YEAR_IN_MS,
)
from timesmith._errors import ERR_MSG_INVALID_ISO8601, FormatError
from timesmith._utils import format_number, validate_amount
from timesmith.formats._base import DurationFormat, FormatName, Style, resolve_style

# Designator -> size, in emission order
_DATE_UNITS: dict[str, int] = {
    "Y": YEAR_IN_MS,
    "M": MONTH_IN_MS,
    "W": WEEK_IN_MS,
    "D": DAY_IN_MS,
}
_CLOCK_UNITS: dict[str, int] = {
    "H": HOUR_IN_MS,
    "M": MINUTE_IN_MS,
}
_TIME_UNITS: dict[str, int] = {**_CLOCK_UNITS, "S": SECOND_IN_MS}

# Unanchored: text between matches is skipped, not rejected.
_DATE_RE = re.compile(r"(\d+(?:\.\d+)?)([YMWD])", re.ASCII)
_TIME_RE = re.compile(r"(\d+(?:\.\d+)?)([HMS])", re.ASCII)


class ISO8601Format(DurationFormat):
    """ISO 8601 ``P[nY][nM][nW][nD]T[nH][nM][nS]`` format.

    The long style writes every designator, zeros included; the short style
    writes only non-zero ones. ``T`` is always written so the output parses.
    """

    name = FormatName.ISO8601

    def __init__(self, style: str = DEFAULT_ISO8601_STYLE) -> None:
        self.style = resolve_style(style)

    def format(self, ms: float) -> str:
        long = self.style == Style.LONG
        parts = ["P"]
        remaining = ms

        for designator, size in _DATE_UNITS.items():
            amount = int(remaining // size)
            if amount > 0 or long:
                parts.append(f"{amount}{designator}")
            remaining %= size

        parts.append("T")

        for designator, size in _CLOCK_UNITS.items():
            amount = int(remaining // size)
            if amount > 0 or long:
                parts.append(f"{amount}{designator}")
            remaining %= size

        # Seconds keep the fractional remainder
        seconds = remaining / SECOND_IN_MS
        if seconds > 0 or long:
            parts.append(f"{format_number(seconds)}S")

        return "".join(parts)

    def parse(self, text: str) -> float:
        """Parse an ISO 8601 duration into milliseconds.

        Raises:
            FormatError: If the text does not start with ``P``.
            NonFiniteValueError: If a component is too large to represent.
        """
        if not text.startswith("P"):
            raise FormatError(
                ERR_MSG_INVALID_ISO8601,
                f"cannot parse ISO 8601 duration: {text!r}",
            )

        date_part, _, time_part = text[1:].partition("T")
        return _scan(date_part, _DATE_RE, _DATE_UNITS) + _scan(time_part, _TIME_RE, _TIME_UNITS)


def _scan(part: str, pattern: re.Pattern[str], sizes: dict[str, int]) -> float:
    total = 0.0
    for match in pattern.finditer(part):
        value = float(match.group(1))
        designator = match.group(2)
        validate_amount(value, f"ISO 8601 {designator}")
        total += value * sizes[designator]
    return total
