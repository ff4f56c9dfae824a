"""Human-readable duration format (``1 day, 2 hours`` / ``1d 2h``)."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from lark import Lark, Transformer
from lark.exceptions import LarkError

from timesmith._constants import (
    DAY_IN_MS,
    DEFAULT_HUMAN_STYLE,
    DEFAULT_SEPARATOR,
    HOUR_IN_MS,
    MINUTE_IN_MS,
    SECOND_IN_MS,
    WEEK_IN_MS,
)
from timesmith._errors import (
    ERR_MSG_INVALID_TOKEN,
    ERR_MSG_NON_FINITE_VALUE,
    NonFiniteValueError,
    ParseError,
)
from timesmith._units import NAMED_UNITS
from timesmith._utils import validate_amount
from timesmith.formats._base import DurationFormat, FormatName, Style, resolve_style
from timesmith.translations import Translation, resolve_translations

# One whitespace-free token: digits immediately followed by a unit code.
_TOKEN_GRAMMAR = r"""
start: AMOUNT UNIT

AMOUNT: /[0-9]+/
UNIT: /(?:milliseconds?|ms|weeks?|days?|hours?|minutes?|seconds?|[wdhms])/i
"""

_UNIT_SIZES: dict[str, int] = {
    "w": WEEK_IN_MS, "week": WEEK_IN_MS, "weeks": WEEK_IN_MS,
    "d": DAY_IN_MS, "day": DAY_IN_MS, "days": DAY_IN_MS,
    "h": HOUR_IN_MS, "hour": HOUR_IN_MS, "hours": HOUR_IN_MS,
    "m": MINUTE_IN_MS, "minute": MINUTE_IN_MS, "minutes": MINUTE_IN_MS,
    "s": SECOND_IN_MS, "second": SECOND_IN_MS, "seconds": SECOND_IN_MS,
    "ms": 1, "millisecond": 1, "milliseconds": 1,
}

_WHITESPACE_RE = re.compile(r"\s+")


class _TokenTransformer(Transformer):
    """Turn a parsed token into ``(amount, unit_code)``."""

    def start(self, children: list[Any]) -> tuple[str, str]:
        amount, unit = children
        return str(amount), str(unit).lower()


_parser = Lark(_TOKEN_GRAMMAR, parser="lalr", transformer=_TokenTransformer())


class HumanFormat(DurationFormat):
    """Human-readable format with pluralization and translatable unit names."""

    name = FormatName.HUMAN

    def __init__(
        self,
        style: str = DEFAULT_HUMAN_STYLE,
        separator: str = DEFAULT_SEPARATOR,
        translations: Mapping[str, Translation | Mapping[str, Any]] | None = None,
    ) -> None:
        self.style = resolve_style(style)
        self.separator = separator
        self._translations = resolve_translations(translations)

    def format(self, ms: float) -> str:
        short = self.style == Style.SHORT
        parts: list[str] = []
        remaining = ms
        for name, size in NAMED_UNITS:
            value = int(remaining // size)
            if value > 0:
                word = self._translations[name].forms(self.style).pick(value)
                parts.append(f"{value}{word}" if short else f"{value} {word}")
                remaining %= size
        return self.separator.join(parts)

    def parse(self, text: str) -> float:
        """Parse whitespace-separated ``<digits><unit>`` tokens.

        Raises:
            ParseError: If any token is malformed. Nothing is returned for
                the tokens that parsed before it.
            NonFiniteValueError: If an amount is too large to represent.
        """
        total = 0
        for token in _WHITESPACE_RE.split(text.strip()):
            digits, unit = self._parse_token(token)
            amount = _to_int(digits, unit)
            validate_amount(amount, unit)
            total += amount * _UNIT_SIZES[unit]
        return total

    @staticmethod
    def _parse_token(token: str) -> tuple[str, str]:
        try:
            return _parser.parse(token)
        except LarkError as e:
            raise ParseError(
                f"{ERR_MSG_INVALID_TOKEN}: {token!r}",
                f"cannot parse token {token!r}: {e}",
                wrapped=e,
            ) from e


def _to_int(digits: str, unit: str) -> int:
    try:
        return int(digits)
    except ValueError as e:
        # past the interpreter's int conversion digit limit
        raise NonFiniteValueError(
            f"invalid {unit} value {digits[:20]}...: {ERR_MSG_NON_FINITE_VALUE}",
            f"{len(digits)}-digit {unit} amount cannot be represented",
            wrapped=e,
        ) from e
