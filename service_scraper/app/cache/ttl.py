"""
Cache TTL policy per data category.
"""

import os
from datetime import timedelta
from typing import Dict, Optional

from shared.logging import get_logger

CHARACTER_TTL_ENV = "CACHE_TTL_CHARACTER"

DEFAULT_TTL = timedelta(seconds=60)

TTL_TABLE: Dict[str, timedelta] = {
    "world": timedelta(seconds=10),
    "guild": timedelta(seconds=10),
    "highscores": timedelta(minutes=1),
    "character": timedelta(seconds=60),
}

logger = get_logger("scraper.cache.ttl")


def resolve_ttl(category: str) -> timedelta:
    """Return how long results of ``category`` stay cached.

    The character TTL can be overridden with ``CACHE_TTL_CHARACTER`` (whole
    seconds). The variable is read on every call so it can be changed on a
    running process; zero, negative or non-numeric values are ignored.
    """
    if category == "character":
        override = _env_seconds(CHARACTER_TTL_ENV)
        if override is not None:
            return override

    return TTL_TABLE.get(category, DEFAULT_TTL)


def _env_seconds(name: str) -> Optional[timedelta]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None

    # Plain ASCII digits only; int() would also take "1_000" and non-ASCII digits
    digits = raw[1:] if raw[0] in "+-" else raw
    if digits.isascii() and digits.isdigit():
        seconds = int(raw)
    else:
        seconds = 0

    if seconds <= 0:
        logger.debug("Ignoring invalid TTL override", variable=name, value=raw)
        return None
    return timedelta(seconds=seconds)
