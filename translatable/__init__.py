"""Locale-mapped attributes for SQLAlchemy models.

A translatable column stores one JSON object per row, keyed by locale code.
"""

from .core.config import TranslationConfig
from .core.errors import ReservedAttributeError, TranslatableDeclarationError, TranslatableError
from .core.mutators import Mutators
from .core.translations import HasTranslations

__all__ = [
    "HasTranslations",
    "Mutators",
    "ReservedAttributeError",
    "TranslatableDeclarationError",
    "TranslatableError",
    "TranslationConfig",
]
