from __future__ import annotations

from typing import Any, Callable, Dict

Getter = Callable[[Any, Any], Any]
Setter = Callable[[Any, Any, str], Any]


class Mutators:
    """Per-field read/write transforms for translatable values.

    Register them in the model body::

        translation_mutators = Mutators()

        @translation_mutators.setter("title")
        def _clean_title(self, value, locale):
            return value.strip()
    """

    def __init__(self) -> None:
        self._getters: Dict[str, Getter] = {}
        self._setters: Dict[str, Setter] = {}

    def getter(self, field: str) -> Callable[[Getter], Getter]:
        def decorator(fn: Getter) -> Getter:
            self._getters[field] = fn
            return fn
        return decorator

    def setter(self, field: str) -> Callable[[Setter], Setter]:
        def decorator(fn: Setter) -> Setter:
            self._setters[field] = fn
            return fn
        return decorator

    def has_getter(self, field: str) -> bool:
        return field in self._getters

    def has_setter(self, field: str) -> bool:
        return field in self._setters

    def get(self, record: Any, field: str, value: Any) -> Any:
        return self._getters[field](record, value)

    def set(self, record: Any, field: str, value: Any, locale: str) -> Any:
        return self._setters[field](record, value, locale)
