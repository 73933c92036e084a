"""In-memory TTL cache for per-country news results."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from cachetools import TTLCache

from country_explorer.config import NEWS_CACHE_TTL_SECONDS
from country_explorer.models import Article

_MAX_ENTRIES = 512  # Comfortably above the number of country codes


@dataclass(frozen=True)
class CacheEntry:
    """Articles cached for one country code."""

    articles: tuple[Article, ...]
    timestamp: float  # Seconds, from the cache clock


class NewsCache:
    """Process-local news cache keyed by lowercased country code.

    Entries are valid while ``now - timestamp < ttl``; expired entries read as
    a miss and are superseded by the next ``put`` for the same code.
    """

    def __init__(
        self,
        ttl_seconds: float = NEWS_CACHE_TTL_SECONDS,
        clock: Callable[[], float] | None = None,
        maxsize: int = _MAX_ENTRIES,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock or time.monotonic
        self._entries: TTLCache = TTLCache(
            maxsize=maxsize, ttl=ttl_seconds, timer=self._clock
        )

    @staticmethod
    def _key(code: str) -> str:
        return code.strip().lower()

    @property
    def ttl(self) -> float:
        return self._ttl

    def now(self) -> float:
        """Current time according to the cache clock."""
        return self._clock()

    def entry(self, code: str) -> CacheEntry | None:
        """Return the live entry for a code, or None if missing or expired."""
        return self._entries.get(self._key(code))

    def get(self, code: str) -> list[Article] | None:
        """Return cached articles for a code, or None if missing or stale."""
        entry = self.entry(code)
        if entry is None:
            return None
        return list(entry.articles)

    def put(self, code: str, articles: list[Article]) -> None:
        """Store articles for a code, replacing any previous entry."""
        self._entries[self._key(code)] = CacheEntry(
            articles=tuple(articles), timestamp=self.now()
        )

    def __len__(self) -> int:
        return len(self._entries)
