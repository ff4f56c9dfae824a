"""timesmith - Fluent duration arithmetic with human-readable and ISO 8601 text forms."""

from __future__ import annotations

from typing import Any

from timesmith._duration import Duration, SupportsMilliseconds, time
from timesmith._errors import (
    DurationError,
    FormatError,
    InvalidValueError,
    NonFiniteValueError,
    ParseError,
)
from timesmith._units import TimeUnit
from timesmith._version import __version__
from timesmith.formats import DurationFormat, FormatName, get_format
from timesmith.translations import DEFAULT_TRANSLATIONS, Translation, UnitForms

__all__ = [
    "time",
    "format_duration",
    "parse_duration",
    "get_format",
    "Duration",
    "SupportsMilliseconds",
    "TimeUnit",
    "DurationFormat",
    "FormatName",
    "Translation",
    "UnitForms",
    "DEFAULT_TRANSLATIONS",
    "DurationError",
    "InvalidValueError",
    "NonFiniteValueError",
    "ParseError",
    "FormatError",
    "__version__",
]


def format_duration(
    duration: SupportsMilliseconds,
    *,
    format: str = FormatName.HUMAN,
    **options: Any,
) -> str:
    """Render a duration in the named text format.

    Args:
        duration: The duration to render.
        format: Format name, ``"human"`` (default) or ``"iso8601"``.
        **options: Format options such as ``style``, ``separator`` or
            ``translations``.

    Returns:
        The rendered text.

    Raises:
        ValueError: If the format name or style is unknown.
    """
    return get_format(format, **options).format(duration.to_milliseconds())


def parse_duration(text: str, *, format: str = FormatName.HUMAN) -> Duration:
    """Parse text in the named format into a Duration.

    Args:
        text: The text to parse.
        format: Format name, ``"human"`` (default) or ``"iso8601"``.

    Returns:
        The parsed Duration.

    Raises:
        ParseError: If human-readable text contains a malformed token.
        FormatError: If ISO 8601 text does not start with ``P``.
        ValueError: If the format name is unknown.
    """
    return Duration(get_format(format).parse(text))
