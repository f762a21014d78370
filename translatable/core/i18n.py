from __future__ import annotations

import logging
from typing import Iterable, Optional

from .config import TranslationConfig

log = logging.getLogger(__name__)


def normalize_locale(
    translated_locales: Iterable[str],
    locale: Optional[str],
    use_fallback: bool,
    config: TranslationConfig,
) -> Optional[str]:
    """Pick the single locale whose value a read should return.

    The requested locale wins when it holds a value. Otherwise, if fallback is
    allowed, the library fallback is tried before the application fallback.
    """
    if locale in set(translated_locales):
        return locale

    if not use_fallback:
        return locale

    fallback = config.get("translatable.fallback_locale")
    if fallback is not None:
        log.debug("No %r translation, using translatable fallback %r", locale, fallback)
        return fallback

    fallback = config.get("app.fallback_locale")
    if fallback is not None:
        log.debug("No %r translation, using app fallback %r", locale, fallback)
        return fallback

    return locale
