"""Unit name tables for human-readable formatting."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

UNIT_NAMES = ("week", "day", "hour", "minute", "second", "millisecond")


@dataclass(frozen=True)
class UnitForms:
    """Singular and plural spelling of one unit."""

    singular: str
    plural: str

    def pick(self, value: int) -> str:
        return self.singular if value == 1 else self.plural


@dataclass(frozen=True)
class Translation:
    """Long and short spellings of one unit."""

    long: UnitForms
    short: UnitForms

    def forms(self, style: str) -> UnitForms:
        return self.short if style == "short" else self.long


DEFAULT_TRANSLATIONS: Mapping[str, Translation] = MappingProxyType({
    "week": Translation(UnitForms("week", "weeks"), UnitForms("w", "w")),
    "day": Translation(UnitForms("day", "days"), UnitForms("d", "d")),
    "hour": Translation(UnitForms("hour", "hours"), UnitForms("h", "h")),
    "minute": Translation(UnitForms("minute", "minutes"), UnitForms("m", "m")),
    "second": Translation(UnitForms("second", "seconds"), UnitForms("s", "s")),
    "millisecond": Translation(
        UnitForms("millisecond", "milliseconds"), UnitForms("ms", "ms")
    ),
})


def _coerce_forms(value: UnitForms | Mapping[str, str]) -> UnitForms:
    if isinstance(value, UnitForms):
        return value
    return UnitForms(singular=value["singular"], plural=value["plural"])


def coerce_translation(value: Translation | Mapping[str, Any]) -> Translation:
    """Accept a Translation or its plain-dict spelling."""
    if isinstance(value, Translation):
        return value
    return Translation(
        long=_coerce_forms(value["long"]),
        short=_coerce_forms(value["short"]),
    )


def resolve_translations(
    translations: Mapping[str, Translation | Mapping[str, Any]] | None,
) -> dict[str, Translation]:
    """Merge a caller's table over the defaults, unit by unit.

    A unit absent from ``translations`` keeps its default entry.
    """
    resolved = dict(DEFAULT_TRANSLATIONS)
    if translations:
        for name in UNIT_NAMES:
            entry = translations.get(name)
            if entry is not None:
                resolved[name] = coerce_translation(entry)
    return resolved
