"""
Cache key construction.
"""

from typing import Any


def make_key(category: str, *parts: Any) -> str:
    """Generate the cache key for one logical request.

    ``make_key("character", "Bubble ")`` -> ``"character:bubble"``. Parts are
    normalised so equivalent requests share a key.
    """
    prefix = category.strip().lower()
    if not prefix:
        raise ValueError("Cache key category must not be empty")

    key_parts = [prefix] + [str(part).strip().lower() for part in parts]
    return ":".join(key_parts)
