"""JSON (de)serialization of a translatable column."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict

log = logging.getLogger(__name__)


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def decode_translations(raw: Any) -> Dict[str, Any]:
    """Decode a raw cell into ``{locale: value}``.

    Absent, blank, malformed or non-object content decodes as ``{}``.
    Null and empty-string values are dropped.
    """
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        data: Any = raw
    else:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8", errors="replace")
        text = str(raw)
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as e:
            log.debug("Ignoring malformed translations payload: %s", type(e).__name__)
            return {}
    if not isinstance(data, Mapping):
        log.debug("Ignoring non-object translations payload of type %s", type(data).__name__)
        return {}
    return {str(locale): value for locale, value in data.items() if _is_present(value)}


def encode_translations(translations: Mapping[str, Any]) -> str:
    # Whole mapping, blanks included; readers filter them
    return json.dumps(dict(translations), ensure_ascii=False, separators=(",", ":"))
