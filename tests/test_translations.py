"""Translation table tests."""

import pytest

from timesmith import time
from timesmith.translations import (
    DEFAULT_TRANSLATIONS,
    Translation,
    UnitForms,
    coerce_translation,
    resolve_translations,
)

SPANISH = {
    "week": {"long": {"singular": "semana", "plural": "semanas"}, "short": {"singular": "sem", "plural": "sem"}},
    "day": {"long": {"singular": "día", "plural": "días"}, "short": {"singular": "d", "plural": "d"}},
    "hour": {"long": {"singular": "hora", "plural": "horas"}, "short": {"singular": "h", "plural": "h"}},
    "minute": {"long": {"singular": "minuto", "plural": "minutos"}, "short": {"singular": "m", "plural": "m"}},
    "second": {"long": {"singular": "segundo", "plural": "segundos"}, "short": {"singular": "s", "plural": "s"}},
}

HUNGARIAN = {
    "hour": Translation(UnitForms("óra", "óra"), UnitForms("óra", "óra")),
    "minute": Translation(UnitForms("perc", "perc"), UnitForms("perc", "perc")),
}


class TestCustomTranslations:
    def test_translated_units(self):
        result = time().hour(1).minute(30).to_string(translations=HUNGARIAN)
        assert result == "1 óra, 30 perc"

    def test_plural_forms(self):
        assert time().hour(2).to_string(translations=SPANISH) == "2 horas"

    def test_singular_forms(self):
        assert time().hour(1).minute(30).to_string(translations=SPANISH) == "1 hora, 30 minutos"

    def test_missing_unit_falls_back_to_default(self):
        result = time().day(1).hour(2).to_string(translations=HUNGARIAN)
        assert result == "1 day, 2 óra"

    def test_short_forms_pluralize(self):
        table = {"hour": {"long": {"singular": "hour", "plural": "hours"},
                          "short": {"singular": "hr", "plural": "hrs"}}}
        assert time().hour(1).to_string(format="short", translations=table) == "1hr"
        assert time().hour(3).to_string(format="short", translations=table) == "3hrs"


class TestDefaultTranslations:
    def test_covers_all_units(self):
        assert set(DEFAULT_TRANSLATIONS) == {"week", "day", "hour", "minute", "second", "millisecond"}

    def test_short_forms_do_not_pluralize(self):
        for entry in DEFAULT_TRANSLATIONS.values():
            assert entry.short.singular == entry.short.plural

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_TRANSLATIONS["week"] = DEFAULT_TRANSLATIONS["day"]

    def test_millisecond_short_plural(self):
        assert time().millisecond(5).to_string(format="short") == "5ms"


class TestResolve:
    def test_none_gives_defaults(self):
        assert resolve_translations(None) == dict(DEFAULT_TRANSLATIONS)

    def test_does_not_mutate_defaults(self):
        resolve_translations(HUNGARIAN)
        assert DEFAULT_TRANSLATIONS["hour"].long.singular == "hour"

    def test_coerce_plain_dict(self):
        entry = coerce_translation(SPANISH["day"])
        assert entry == Translation(UnitForms("día", "días"), UnitForms("d", "d"))

    def test_coerce_passes_through(self):
        entry = HUNGARIAN["hour"]
        assert coerce_translation(entry) is entry
