"""Unit sizes and option defaults for duration arithmetic."""

SECOND_IN_MS = 1000
"""Milliseconds in one second."""

MINUTE_IN_MS = 60 * SECOND_IN_MS
HOUR_IN_MS = 60 * MINUTE_IN_MS
DAY_IN_MS = 24 * HOUR_IN_MS
WEEK_IN_MS = 7 * DAY_IN_MS

MONTH_IN_MS = 30 * DAY_IN_MS
"""Calendar-naive month used only by the ISO 8601 format."""

YEAR_IN_MS = 365 * DAY_IN_MS
"""Calendar-naive year used only by the ISO 8601 format."""

DEFAULT_SEPARATOR = ", "
"""Separator placed between human-readable tokens."""

DEFAULT_HUMAN_STYLE = "long"
DEFAULT_ISO8601_STYLE = "long"

DEFAULT_BUILD_UNIT = "s"
"""Unit returned by ``Duration.build()`` when none is given."""
