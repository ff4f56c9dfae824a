"""Abstract base class for textual duration formats."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod


class FormatName(enum.StrEnum):
    HUMAN = "human"
    ISO8601 = "iso8601"


class Style(enum.StrEnum):
    """Verbosity of a rendered duration."""

    LONG = "long"
    SHORT = "short"


def resolve_style(style: str) -> Style:
    """Get a Style by name.

    Raises:
        ValueError: If the style name is unknown.
    """
    try:
        return Style(style)
    except ValueError:
        raise ValueError(
            f"unknown format style: {style!r}. "
            f"Available: {', '.join(s.value for s in Style)}"
        ) from None


class DurationFormat(ABC):
    """Abstract base class defining a textual duration format.

    A format renders a millisecond total to text and reads text back into a
    millisecond total. Formats hold only their rendering options and are
    safe to share.
    """

    name: FormatName

    @abstractmethod
    def format(self, ms: float) -> str: ...

    @abstractmethod
    def parse(self, text: str) -> float: ...
