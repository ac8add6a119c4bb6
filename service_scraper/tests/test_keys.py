"""
Tests for cache key construction.
"""

import pytest

from service_scraper.app.cache import make_key


def test_same_request_same_key():
    assert make_key("character", "Bubble") == make_key("character", "Bubble")


def test_key_is_normalised():
    assert make_key("Character", " Bubble ") == "character:bubble"


def test_parts_are_joined_in_order():
    assert make_key("highscores", "Antica", "experience", 1) == "highscores:antica:experience:1"


def test_category_only():
    assert make_key("worlds") == "worlds"


def test_empty_category_rejected():
    with pytest.raises(ValueError):
        make_key("  ", "Bubble")
