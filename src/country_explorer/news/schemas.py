"""Pydantic schemas for GNews v4 payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from country_explorer.models import Article


class GNewsSource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    url: str | None = None


class GNewsArticle(BaseModel):
    """A single article from ``/top-headlines`` or ``/search``."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    url: str = ""
    description: str | None = None
    content: str | None = None
    image: str | None = None
    publishedAt: str | None = None
    source: GNewsSource | None = None

    def to_article(self) -> Article:
        """Map to the internal Article record."""
        return Article(
            title=self.title,
            url=self.url,
            description=self.description,
            content=self.content,
            image=self.image,
            published_at=self.publishedAt,
            source_name=self.source.name if self.source else None,
            source_url=self.source.url if self.source else None,
        )


class GNewsResponse(BaseModel):
    """Envelope returned by GNews on success.

    Articles are kept raw here and validated one by one, so a single
    malformed item does not discard the whole response.
    """

    model_config = ConfigDict(extra="ignore")

    totalArticles: int = 0
    articles: list[Any]
