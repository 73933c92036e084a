"""Environment-driven settings for the Country Explorer service."""

from __future__ import annotations

import os
from dataclasses import dataclass

_DEFAULT_REST_COUNTRIES_URL = "https://restcountries.com/v3.1"
_DEFAULT_GNEWS_URL = "https://gnews.io/api/v4"
_DEFAULT_LOCAL_URL = "http://localhost:8000"

NEWS_CACHE_TTL_SECONDS = 30 * 60  # 30 minutes
NEWS_MAX_ARTICLES = 10


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, normally built from the environment."""

    gnews_api_key: str | None = None
    news_cache_ttl: float = NEWS_CACHE_TTL_SECONDS
    news_max_articles: int = NEWS_MAX_ARTICLES
    rest_countries_url: str = _DEFAULT_REST_COUNTRIES_URL
    gnews_base_url: str = _DEFAULT_GNEWS_URL
    site_url: str | None = None
    vercel_url: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables."""
        return cls(
            gnews_api_key=os.environ.get("GNEWS_API_KEY") or None,
            news_cache_ttl=float(
                os.environ.get("NEWS_CACHE_TTL_SECONDS", str(NEWS_CACHE_TTL_SECONDS))
            ),
            news_max_articles=int(
                os.environ.get("NEWS_MAX_ARTICLES", str(NEWS_MAX_ARTICLES))
            ),
            rest_countries_url=os.environ.get(
                "REST_COUNTRIES_URL", _DEFAULT_REST_COUNTRIES_URL
            ),
            gnews_base_url=os.environ.get("GNEWS_BASE_URL", _DEFAULT_GNEWS_URL),
            site_url=(
                os.environ.get("NEXT_PUBLIC_SITE_URL")
                or os.environ.get("SITE_URL")
                or None
            ),
            vercel_url=os.environ.get("VERCEL_URL") or None,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    def get_base_url(self, host: str | None = None) -> str:
        """Resolve the public base URL used to build absolute links.

        Args:
            host: Host header of the current request, if any

        Returns:
            Base URL without a trailing slash
        """
        if self.site_url:
            return self.site_url.rstrip("/")
        if self.vercel_url:
            return f"https://{self.vercel_url}".rstrip("/")
        if host:
            protocol = "http" if "localhost" in host or host.startswith("127.") else "https"
            return f"{protocol}://{host}".rstrip("/")
        return _DEFAULT_LOCAL_URL
