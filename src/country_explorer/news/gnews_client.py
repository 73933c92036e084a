"""GNews.io client for country headlines and keyword search."""

from __future__ import annotations

import logging
import os

import httpx
from pydantic import ValidationError

from country_explorer.models import Article
from country_explorer.news.schemas import GNewsArticle, GNewsResponse

logger = logging.getLogger(__name__)

_BASE_URL = "https://gnews.io/api/v4"
_DEFAULT_LANGUAGE = "en"
_DEFAULT_MAX_ARTICLES = 10


class GNewsError(Exception):
    """Error from GNews."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(GNewsError):
    """Request quota exceeded."""

    pass


class GNewsClient:
    """Client for the GNews v4 API."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        max_articles: int = _DEFAULT_MAX_ARTICLES,
        language: str = _DEFAULT_LANGUAGE,
    ) -> None:
        self._api_key = api_key or os.environ.get("GNEWS_API_KEY")
        if not self._api_key:
            raise ValueError("GNEWS_API_KEY environment variable or api_key parameter required")
        self._base_url = (base_url or os.environ.get("GNEWS_BASE_URL", _BASE_URL)).rstrip("/")
        self._max_articles = max_articles
        self._language = language
        self._client = httpx.Client(timeout=30.0)

    def _get(self, endpoint: str, params: dict) -> GNewsResponse:
        """GET a GNews endpoint and validate the response envelope."""
        url = f"{self._base_url}/{endpoint}"
        query = {
            **params,
            "lang": self._language,
            "max": self._max_articles,
            "token": self._api_key,
        }
        try:
            resp = self._client.get(url, params=query)
        except httpx.HTTPError as e:
            raise GNewsError(f"Network error calling GNews {endpoint}: {e}") from e

        if resp.status_code in (403, 429):
            raise RateLimitError(
                f"GNews quota exceeded (HTTP {resp.status_code})",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise GNewsError(
                f"GNews {endpoint} returned invalid JSON", status_code=resp.status_code
            ) from e

        if resp.is_error or (isinstance(data, dict) and data.get("errors")):
            errors = data.get("errors") if isinstance(data, dict) else None
            raise GNewsError(
                f"GNews {endpoint} failed (HTTP {resp.status_code}): {errors}",
                status_code=resp.status_code,
            )

        try:
            payload = GNewsResponse.model_validate(data)
        except ValidationError as e:
            raise GNewsError(f"Unexpected GNews {endpoint} payload: {e}") from e

        logger.debug("GNews %s returned %d articles", endpoint, len(payload.articles))
        return payload

    @staticmethod
    def _to_articles(payload: GNewsResponse) -> list[Article]:
        articles: list[Article] = []
        for raw in payload.articles:
            try:
                item = GNewsArticle.model_validate(raw)
            except ValidationError as e:
                logger.warning("Skipping invalid GNews article: %s", e)
                continue
            # Skip articles without essential fields
            if not item.url or not item.title or item.title == "[Removed]":
                continue
            articles.append(item.to_article())
        return articles

    def top_headlines(self, country: str) -> list[Article]:
        """Fetch top headlines for a country code.

        Args:
            country: Country code as GNews expects it (e.g., 'us')

        Returns:
            List of Article objects
        """
        payload = self._get("top-headlines", {"country": country.lower()})
        return self._to_articles(payload)

    def search(self, query: str) -> list[Article]:
        """Search articles by keyword.

        Args:
            query: Search term (e.g., 'United States')

        Returns:
            List of Article objects
        """
        payload = self._get("search", {"q": query})
        return self._to_articles(payload)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> GNewsClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
