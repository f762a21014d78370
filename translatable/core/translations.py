from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from sqlalchemy import inspect as sa_inspect

from .codec import decode_translations, encode_translations
from .config import TranslationConfig, default_translation_config
from .errors import ReservedAttributeError, TranslatableDeclarationError
from .i18n import normalize_locale

log = logging.getLogger(__name__)


class HasTranslations:
    """Mixin for declarative models whose columns hold ``{locale: value}`` JSON.

    Declare the locale-mapped columns on the model::

        class Article(HasTranslations, Base):
            __tablename__ = "articles"
            __translatable__ = ("title",)
            title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    ``get``/``set`` route translatable fields through the active locale and
    everything else straight to the column. Every read re-decodes the column.

    Not thread-safe; callers must serialize access to a single record instance.
    """

    __translatable__ = ()

    # Per-record locale override, never persisted
    translation_locale = None
    # TranslationConfig; None means the environment defaults
    translation_config = None
    # Mutators registry; None means no transforms
    translation_mutators = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        declared = cls.__dict__.get("__translatable__")
        if declared is not None:
            if isinstance(declared, (str, bytes)) or not all(isinstance(f, str) for f in declared):
                raise TranslatableDeclarationError(cls.__name__, declared)
            cls.__translatable__ = tuple(declared)
        super().__init_subclass__(**kwargs)

    @classmethod
    def using_locale(cls, locale: str):
        return cls().set_locale(locale)

    # Raw column access

    @classmethod
    def get_column_keys(cls) -> FrozenSet[str]:
        mapper = sa_inspect(cls, raiseerr=False)
        if mapper is None:
            return frozenset()
        return frozenset(attr.key for attr in mapper.column_attrs)

    def get_raw_attribute(self, key: str) -> Any:
        if key in self.get_column_keys():
            return getattr(self, key)
        # Plain instance values only; methods and properties never leak out
        return vars(self).get(key)

    def set_raw_attribute(self, key: str, value: Any) -> None:
        if key not in self.get_column_keys() and hasattr(type(self), key):
            raise ReservedAttributeError(type(self).__name__, key)
        setattr(self, key, value)

    def get_attributes(self) -> Dict[str, Any]:
        mapper = sa_inspect(self).mapper
        return {attr.key: getattr(self, attr.key) for attr in mapper.column_attrs}

    # Attribute dispatch

    def get(self, key: str) -> Any:
        if not self.is_translatable_attribute(key):
            return self.get_raw_attribute(key)

        return self.get_translation(key, self.get_locale())

    def set(self, key: str, value: Any):
        # None wipes the whole column, not just the active locale
        if value is None:
            self.set_raw_attribute(key, None)
            return self

        if self.is_translatable_attribute(key) and isinstance(value, Mapping):
            return self.set_translations(key, value)

        if not self.is_translatable_attribute(key) or isinstance(value, Mapping):
            self.set_raw_attribute(key, value)
            return self

        return self.set_translation(key, self.get_locale(), value)

    def fill(self, **values: Any):
        for key, value in values.items():
            self.set(key, value)
        return self

    # Reads

    def translate(self, key: str, locale: Optional[str] = None, use_fallback: bool = True) -> Any:
        return self.get_translation(key, locale, use_fallback)

    def get_translation(self, key: str, locale: Optional[str] = None, use_fallback: bool = True) -> Any:
        if locale is None:
            locale = self.get_locale()
        translations = self.get_translations(key)
        locale = normalize_locale(translations, locale, use_fallback, self.get_translation_config())

        translation = translations.get(locale)

        mutators = self.translation_mutators
        if mutators is not None and mutators.has_getter(key):
            return mutators.get(self, key, translation)

        return translation

    def get_translation_with_fallback(self, key: str, locale: Optional[str]) -> Any:
        return self.get_translation(key, locale, True)

    def get_translation_without_fallback(self, key: str, locale: Optional[str]) -> Any:
        return self.get_translation(key, locale, False)

    def get_translations(self, key: Optional[str] = None) -> Dict[str, Any]:
        if key is not None:
            return decode_translations(self.get_raw_attribute(key))

        return {field: self.get_translations(field) for field in self.get_translatable_attributes()}

    @property
    def translations(self) -> Dict[str, Dict[str, Any]]:
        return self.get_translations()

    def get_translated_locales(self, key: str) -> List[str]:
        return list(self.get_translations(key))

    def has_translation(self, key: str, locale: Optional[str] = None) -> bool:
        locale = locale or self.get_locale()
        return locale in self.get_translations(key)

    # Writes

    def set_translation(self, key: str, locale: str, value: Any):
        translations = self.get_translations(key)

        mutators = self.translation_mutators
        if mutators is not None and mutators.has_setter(key):
            value = mutators.set(self, key, value, locale)

        translations[locale] = value
        self.set_raw_attribute(key, encode_translations(translations))
        return self

    def set_translations(self, key: str, translations: Mapping[str, Any]):
        for locale, translation in translations.items():
            self.set_translation(key, locale, translation)
        return self

    def forget_translation(self, key: str, locale: str):
        translations = self.get_translations(key)
        translations.pop(locale, None)

        # Rewrite from the stored (already transformed) values
        self.set_raw_attribute(key, encode_translations(translations) if translations else None)
        return self

    def forget_all_translations(self, locale: str):
        for field in self.get_translatable_attributes():
            self.forget_translation(field, locale)
        return self

    def replace_translations(self, key: str, translations: Mapping[str, Any]):
        for locale in self.get_translated_locales(key):
            self.forget_translation(key, locale)

        return self.set_translations(key, translations)

    # Locale and declaration

    def set_locale(self, locale: Optional[str]):
        self.translation_locale = locale
        return self

    def get_locale(self) -> str:
        return self.translation_locale or self.get_translation_config().get("app.locale")

    def get_translation_config(self) -> TranslationConfig:
        return self.translation_config or default_translation_config()

    @classmethod
    def get_translatable_attributes(cls) -> Tuple[str, ...]:
        return tuple(cls.__translatable__)

    @classmethod
    def is_translatable_attribute(cls, key: str) -> bool:
        return key in cls.__translatable__
