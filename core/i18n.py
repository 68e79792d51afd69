"""Translation table lookup for the country fixtures."""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Literal

from pydantic import BaseModel

from core.presets import LOCALE_TABLES, MISSING_LOCALE_MARKER, MISSING_TRANSLATION_MARKERS

_LOGGER = logging.getLogger(__name__)

TRANSLATIONS_DIR = Path(__file__).resolve().parent / "translations"


class TranslationResult(BaseModel):
    """Outcome of a lookup.

    ``text`` always holds something displayable: the translation, or the
    diagnostic placeholder when ``status`` is not ``"translated"``.
    """

    key: str
    locale: str
    status: Literal["translated", "missing_key", "missing_locale"]
    text: str

    @property
    def found(self) -> bool:
        return self.status == "translated"


@lru_cache()
def load_translations(table: str) -> Dict[str, str]:
    """Load the translation mapping stored in ``translations/<table>.json``."""
    path = TRANSLATIONS_DIR / f"{table}.json"
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return {}


def supported_locales() -> List[str]:
    return list(LOCALE_TABLES)


def lookup(key: str, locale: str) -> TranslationResult:
    """Look ``key`` up for ``locale`` without ever raising on unknown input."""
    table = LOCALE_TABLES.get(locale)
    if table is None:
        _LOGGER.debug("No translation table for locale %s", locale)
        return TranslationResult(
            key=key,
            locale=locale,
            status="missing_locale",
            text=f"{MISSING_LOCALE_MARKER} : {locale}",
        )
    text = load_translations(table).get(key)
    if text is None:
        _LOGGER.debug("Missing %s translation for %s", locale, key)
        return TranslationResult(
            key=key,
            locale=locale,
            status="missing_key",
            text=f"{MISSING_TRANSLATION_MARKERS[table]} : {key}",
        )
    return TranslationResult(key=key, locale=locale, status="translated", text=text)


def t(key: str, locale: str) -> str:
    """Translate ``key`` using the specified locale."""
    return lookup(key, locale).text


translate = t
