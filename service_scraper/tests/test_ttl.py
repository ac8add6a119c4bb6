"""
Tests for the cache TTL policy.
"""

from datetime import timedelta

import pytest

from service_scraper.app.cache import resolve_ttl
from service_scraper.app.cache.ttl import CHARACTER_TTL_ENV


@pytest.mark.parametrize("category, expected", [
    ("world", timedelta(seconds=10)),
    ("guild", timedelta(seconds=10)),
    ("highscores", timedelta(seconds=60)),
    ("character", timedelta(seconds=60)),
    ("unknown-category", timedelta(seconds=60)),
    ("", timedelta(seconds=60)),
])
def test_default_table(category, expected):
    assert resolve_ttl(category) == expected


def test_character_override(monkeypatch):
    monkeypatch.setenv(CHARACTER_TTL_ENV, "120")

    assert resolve_ttl("character") == timedelta(seconds=120)


@pytest.mark.parametrize("value", ["-5", "0", "abc", "1.5", "", "   ", "+", "1_000", "\u0661\u0662\u0660", "12abc"])
def test_invalid_character_override_uses_default(monkeypatch, value):
    monkeypatch.setenv(CHARACTER_TTL_ENV, value)

    assert resolve_ttl("character") == timedelta(seconds=60)


def test_override_only_applies_to_character(monkeypatch):
    monkeypatch.setenv(CHARACTER_TTL_ENV, "120")

    assert resolve_ttl("world") == timedelta(seconds=10)
    assert resolve_ttl("unknown-category") == timedelta(seconds=60)


def test_override_is_read_on_every_call(monkeypatch):
    assert resolve_ttl("character") == timedelta(seconds=60)

    monkeypatch.setenv(CHARACTER_TTL_ENV, "300")
    assert resolve_ttl("character") == timedelta(seconds=300)

    monkeypatch.setenv(CHARACTER_TTL_ENV, "15")
    assert resolve_ttl("character") == timedelta(seconds=15)

    monkeypatch.delenv(CHARACTER_TTL_ENV)
    assert resolve_ttl("character") == timedelta(seconds=60)


def test_character_override_with_plus_sign(monkeypatch):
    monkeypatch.setenv(CHARACTER_TTL_ENV, "+90")

    assert resolve_ttl("character") == timedelta(seconds=90)
