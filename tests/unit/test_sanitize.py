"""Input sanitization."""

from __future__ import annotations

from travel_companion.security.sanitize import DEFAULT_MAX_LENGTH, sanitize


def test_removes_control_and_format_characters():
    assert sanitize("Ro\x00ma\u200b") == "Roma"


def test_whitespace_controls_become_spaces():
    assert sanitize("cena\nottima\tsul porto") == "cena ottima sul porto"


def test_trims_surrounding_whitespace():
    assert sanitize("   Lisbona \r\n") == "Lisbona"


def test_truncates_to_max_length():
    result = sanitize("a" * (DEFAULT_MAX_LENGTH + 500))
    assert len(result) == DEFAULT_MAX_LENGTH


def test_custom_max_length():
    assert sanitize("Barcellona", max_length=5) == "Barce"


def test_whitespace_only_is_empty():
    assert sanitize(" \n\t ") == ""


def test_none_is_empty():
    assert sanitize(None) == ""


def test_keeps_accents_and_emoji():
    assert sanitize("Caffè a Città 🍝") == "Caffè a Città 🍝"


def test_never_longer_than_limit_after_trim():
    result = sanitize(" " + "b" * 10, max_length=4)
    assert len(result) <= 4
