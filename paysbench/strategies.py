"""Ways of producing a translated copy of a model.

Three strategies are provided and must agree on every input:

``translate_reflective``
    Inspects the model's field metadata on every call to find the fields
    declared with :func:`paysbench.models.translatable`.
``translate_cached``
    Same discovery, but done once per model type and memoized for the life of
    the process.
``translate_direct``
    Knows the country fields by name and skips discovery entirely.

None of them mutate their input; each returns a new instance.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Iterable, List, Tuple, Type

from pydantic import BaseModel

from core.i18n import translate
from core.presets import DEFAULT_STRATEGY
from paysbench.models import Country, is_translatable

_LOGGER = logging.getLogger(__name__)

Strategy = Callable[[BaseModel, str], BaseModel]


class TranslatableFieldError(TypeError):
    """A field marked translatable cannot be read or does not hold text."""

    def __init__(self, model: type, field: str, reason: str) -> None:
        super().__init__(f"Translatable field {model.__name__}.{field} {reason}")
        self.model = model
        self.field = field


class UnknownStrategyError(KeyError):
    pass


def translatable_fields(model: Type[BaseModel]) -> List[str]:
    """Return the names of ``model``'s translatable fields in declaration order.

    Raises :class:`TranslatableFieldError` when a marked field is not declared
    as ``str``.
    """

    names: List[str] = []
    for name, field in model.model_fields.items():
        if not is_translatable(field):
            continue
        if field.annotation is not str:
            raise TranslatableFieldError(model, name, f"is declared as {field.annotation!r}, not str")
        names.append(name)
    return names


def _read_source(entity: BaseModel, name: str) -> str:
    try:
        value = getattr(entity, name)
    except AttributeError as exc:
        raise TranslatableFieldError(type(entity), name, "is not accessible") from exc
    if not isinstance(value, str):
        raise TranslatableFieldError(type(entity), name, f"holds {type(value).__name__}, not str")
    return value


def _apply(entity: BaseModel, names: Iterable[str], locale: str) -> BaseModel:
    updates = {name: translate(_read_source(entity, name), locale) for name in names}
    return entity.model_copy(update=updates)


def translate_reflective(entity: BaseModel, locale: str) -> BaseModel:
    return _apply(entity, translatable_fields(type(entity)), locale)


_field_cache: Dict[type, Tuple[str, ...]] = {}
_field_cache_lock = threading.Lock()


def cached_translatable_fields(model: Type[BaseModel]) -> Tuple[str, ...]:
    """Memoized :func:`translatable_fields`; discovery runs at most once per type."""
    names = _field_cache.get(model)
    if names is not None:
        return names
    with _field_cache_lock:
        names = _field_cache.get(model)
        if names is None:
            names = tuple(translatable_fields(model))
            _field_cache[model] = names
            _LOGGER.info("Cached translatable fields for %s: %s", model.__name__, ", ".join(names))
    return names


def clear_field_cache() -> None:
    with _field_cache_lock:
        _field_cache.clear()


def translate_cached(entity: BaseModel, locale: str) -> BaseModel:
    return _apply(entity, cached_translatable_fields(type(entity)), locale)


def translate_direct(entity: Country, locale: str) -> Country:
    return Country(
        code=entity.code,
        label=translate(entity.label, locale),
        description=translate(entity.description, locale),
    )


STRATEGIES: Dict[str, Strategy] = {
    "reflective": translate_reflective,
    "cached": translate_cached,
    "direct": translate_direct,
}


def get_strategy(name: str = DEFAULT_STRATEGY) -> Strategy:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(f"Unknown translation strategy: {name}") from None
