"""Textual duration formats."""

from typing import Any

from timesmith.formats._base import DurationFormat, FormatName, Style
from timesmith.formats.human import HumanFormat
from timesmith.formats.iso8601 import ISO8601Format

__all__ = [
    "DurationFormat",
    "FormatName",
    "Style",
    "HumanFormat",
    "ISO8601Format",
    "get_format",
]

_REGISTRY: dict[str, type[DurationFormat]] = {
    FormatName.HUMAN: HumanFormat,
    FormatName.ISO8601: ISO8601Format,
}


def get_format(name: str, **options: Any) -> DurationFormat:
    """Get a format instance by name.

    Args:
        name: Format name (``"human"`` or ``"iso8601"``).
        **options: Forwarded to the format's constructor (e.g. ``style``,
            ``separator``, ``translations`` for the human format).

    Returns:
        A DurationFormat instance.

    Raises:
        ValueError: If the format name or style is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown format: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls(**options)
