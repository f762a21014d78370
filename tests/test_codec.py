from __future__ import annotations

import json

import pytest

from translatable.core.codec import decode_translations, encode_translations


@pytest.mark.parametrize("raw", [None, "", "   ", "not json", "[1, 2]", '"hello"', b"", "{broken"])
def test_decode_degrades_to_empty(raw) -> None:
    assert decode_translations(raw) == {}


def test_decode_filters_null_and_empty_values() -> None:
    raw = '{"en": "Hello", "fr": "", "de": null, "pt-BR": "Olá"}'
    assert decode_translations(raw) == {"en": "Hello", "pt-BR": "Olá"}


def test_decode_keeps_document_order() -> None:
    assert list(decode_translations('{"pt": "a", "en": "b", "de": "c"}')) == ["pt", "en", "de"]


def test_decode_accepts_bytes_and_mappings() -> None:
    assert decode_translations(b'{"en": "Hi"}') == {"en": "Hi"}
    assert decode_translations({"en": "Hi", "fr": None}) == {"en": "Hi"}


def test_decode_keeps_falsy_non_string_values() -> None:
    assert decode_translations('{"en": 0, "fr": false}') == {"en": 0, "fr": False}


def test_encode_is_compact_and_keeps_non_ascii() -> None:
    assert encode_translations({"en": "Hello", "pt-BR": "Olá"}) == '{"en":"Hello","pt-BR":"Olá"}'


def test_encode_keeps_blank_entries() -> None:
    assert json.loads(encode_translations({"en": "Hi", "fr": ""})) == {"en": "Hi", "fr": ""}


def test_decode_survives_deeply_nested_payload() -> None:
    assert decode_translations("[" * 100000) == {}
    assert decode_translations('{"en": ' + "[" * 100000) == {}

