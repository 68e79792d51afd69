import threading

import pytest
from pydantic import BaseModel

from core.presets import EXPECTED_TRANSLATIONS
from paysbench import strategies
from paysbench.models import Country, translatable
from paysbench.strategies import (
    STRATEGIES,
    TranslatableFieldError,
    UnknownStrategyError,
    cached_translatable_fields,
    clear_field_cache,
    get_strategy,
    translatable_fields,
    translate_cached,
    translate_direct,
    translate_reflective,
)

FR = Country(code="FR", label="Pays_libelle_1", description="Pays_description_1")
US = Country(code="US", label="Pays_libelle_2", description="Pays_description_2")
COUNTRIES = {"FR": FR, "US": US}


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_field_cache()
    yield
    clear_field_cache()


@pytest.mark.parametrize("name", list(STRATEGIES))
@pytest.mark.parametrize("key, expected", list(EXPECTED_TRANSLATIONS.items()))
def test_expected_translations(name, key, expected):
    code, locale = key
    out = STRATEGIES[name](COUNTRIES[code], locale)
    assert (out.label, out.description) == expected
    assert out.code == code


@pytest.mark.parametrize("locale", ["fr-FR", "fr", "en-US", "de-DE", ""])
@pytest.mark.parametrize("country", [FR, US, Country(code="XX", label="k1", description="k2")])
def test_strategies_agree(locale, country):
    results = {name: fn(country, locale) for name, fn in STRATEGIES.items()}
    assert results["reflective"] == results["cached"] == results["direct"]


@pytest.mark.parametrize("name", list(STRATEGIES))
def test_input_not_mutated(name):
    before = FR.model_dump()
    out = STRATEGIES[name](FR, "fr-FR")
    assert out is not FR
    assert FR.model_dump() == before


def test_unknown_locale_gives_missing_locale_marker():
    out = translate_direct(FR, "de-DE")
    assert out.description.startswith("Locale manquante")
    assert "de-DE" in out.description
    assert out.code == "FR"


def test_translation_depends_only_on_source():
    once = translate_reflective(FR, "en-US")
    again = translate_reflective(FR, "en-US")
    assert once == again
    # translating a translated copy looks up the display text as a key
    assert translate_reflective(once, "en-US").label == "Missing translation : France"


def test_translatable_fields_in_declaration_order():
    assert translatable_fields(Country) == ["label", "description"]


def test_cache_discovers_once(monkeypatch):
    calls = []
    real = strategies.translatable_fields

    def counting(model):
        calls.append(model)
        return real(model)

    monkeypatch.setattr(strategies, "translatable_fields", counting)
    translate_cached(FR, "fr-FR")
    translate_cached(US, "en-US")
    translate_cached(FR, "de-DE")
    assert calls == [Country]
    assert cached_translatable_fields(Country) == ("label", "description")


def test_cache_populated_once_across_threads(monkeypatch):
    calls = []
    real = strategies.translatable_fields
    barrier = threading.Barrier(8)

    def counting(model):
        calls.append(model)
        return real(model)

    monkeypatch.setattr(strategies, "translatable_fields", counting)

    def worker():
        barrier.wait()
        translate_cached(FR, "fr-FR")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()
    assert calls == [Country]


def test_non_text_translatable_field_fails_at_discovery():
    class Bad(BaseModel):
        code: str
        population: int = translatable(0)

    with pytest.raises(TranslatableFieldError, match="Bad.population"):
        translatable_fields(Bad)
    with pytest.raises(TranslatableFieldError):
        translate_cached(Bad(code="X"), "fr")


def test_unreadable_value_fails_hard():
    class Loose(BaseModel):
        code: str
        label: str = translatable()

    entity = Loose.model_construct(code="X", label=42)
    with pytest.raises(TranslatableFieldError, match="holds int"):
        translate_reflective(entity, "fr")


def test_get_strategy():
    assert get_strategy("direct") is translate_direct
    assert get_strategy() is translate_direct
    with pytest.raises(UnknownStrategyError):
        get_strategy("magic")
