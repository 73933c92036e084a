"""Per-country news lookup with caching and keyword-search fallback."""

from __future__ import annotations

import logging

from country_explorer.config import Settings
from country_explorer.models import Article
from country_explorer.news.cache import NewsCache
from country_explorer.news.gnews_client import GNewsClient, RateLimitError
from country_explorer.news.result import LookupStatus, NewsLookupResult

logger = logging.getLogger(__name__)


class NewsService:
    """Looks up news for a country, serving repeats from a TTL cache.

    A lookup first asks the provider for the country's top headlines and, if
    that fails or comes back empty, runs one keyword search for the country
    name (or the code when no name is given). Whatever the outcome, the result
    is cached under the code so a provider without coverage is not hammered.
    """

    def __init__(
        self,
        client: GNewsClient | None = None,
        cache: NewsCache | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or Settings.from_env()
        self._cache = (
            cache if cache is not None else NewsCache(ttl_seconds=settings.news_cache_ttl)
        )
        self._owns_client = client is None
        if client is None and settings.gnews_api_key:
            client = GNewsClient(
                api_key=settings.gnews_api_key,
                base_url=settings.gnews_base_url,
                max_articles=settings.news_max_articles,
            )
        self._client = client

    @property
    def cache(self) -> NewsCache:
        return self._cache

    def get_news(self, code: str, name: str | None = None) -> list[Article]:
        """Return articles for a country; empty on any upstream problem.

        Args:
            code: Country code (normalized to lowercase)
            name: Optional country name, used only for the fallback search

        Returns:
            List of Article objects, possibly empty
        """
        return self.lookup(code, name).articles

    def lookup(self, code: str, name: str | None = None) -> NewsLookupResult:
        """Look up news for a country and report how it was resolved.

        Raises:
            ValueError: If code is empty
        """
        key = code.strip().lower()
        if not key:
            raise ValueError("Country code is required")

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("News cache hit for %s (%d articles)", key, len(cached))
            return NewsLookupResult(code=key, status=LookupStatus.CACHED, articles=cached)

        if self._client is None:
            logger.warning("GNEWS_API_KEY is not configured; returning no news for %s", key)
            return NewsLookupResult(code=key, status=LookupStatus.MISSING_API_KEY)

        result = NewsLookupResult(code=key, status=LookupStatus.EMPTY)

        articles = self._attempt(result, "headlines", key)
        if articles:
            result.status = LookupStatus.HEADLINES
        else:
            term = (name or "").strip() or key
            logger.info("No headlines for %s, falling back to search for %r", key, term)
            articles = self._attempt(result, "search", term)
            if articles:
                result.status = LookupStatus.SEARCH
            elif articles is None:
                result.status = (
                    LookupStatus.RATE_LIMITED if result.rate_limited else LookupStatus.ERROR
                )

        result.articles = articles or []
        self._cache.put(key, result.articles)
        return result

    def _attempt(
        self, result: NewsLookupResult, kind: str, term: str
    ) -> list[Article] | None:
        """Run one upstream query; None means it failed (recorded on the result)."""
        result.attempts.append(kind)
        try:
            if kind == "headlines":
                return self._client.top_headlines(term)
            return self._client.search(term)
        except RateLimitError as e:
            logger.warning("GNews rate limited during %s for %s: %s", kind, result.code, e)
            result.error_message = str(e)
            result.rate_limited = True
        except Exception as e:
            logger.warning("GNews %s failed for %s: %s", kind, result.code, e)
            result.error_message = str(e)
            result.rate_limited = False
        return None

    def close(self) -> None:
        """Close the news client if this service created it."""
        if self._owns_client and self._client is not None:
            self._client.close()

    def __enter__(self) -> NewsService:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
