"""Data classes for news lookup results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from country_explorer.models import Article


class LookupStatus(Enum):
    """How a news lookup was resolved."""

    CACHED = "cached"
    HEADLINES = "headlines"
    SEARCH = "search"
    EMPTY = "empty"
    MISSING_API_KEY = "missing_api_key"
    RATE_LIMITED = "rate_limited"
    ERROR = "error"


@dataclass
class NewsLookupResult:
    """Result of looking up news for one country.

    Attributes:
        code: Lowercased country code the lookup was keyed on.
        status: How the articles were obtained, or why there are none.
        articles: Articles to show (empty on any failure).
        error_message: Last upstream failure, if one occurred.
        attempts: Upstream queries issued, in order ('headlines', 'search').
        rate_limited: Whether the last upstream failure was a quota rejection.
    """

    code: str
    status: LookupStatus
    articles: list[Article] = field(default_factory=list)
    error_message: str | None = None
    attempts: list[str] = field(default_factory=list)
    rate_limited: bool = False

    @property
    def is_success(self) -> bool:
        """Check if the lookup produced articles."""
        return bool(self.articles)

    @property
    def from_cache(self) -> bool:
        """Check if the lookup was served without calling upstream."""
        return self.status == LookupStatus.CACHED

    @property
    def is_error(self) -> bool:
        """Check if the lookup ended on an upstream failure."""
        return self.status in (LookupStatus.ERROR, LookupStatus.RATE_LIMITED)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "status": self.status.value,
            "article_count": len(self.articles),
            "articles": [a.to_dict() for a in self.articles],
            "error_message": self.error_message,
            "attempts": list(self.attempts),
            "rate_limited": self.rate_limited,
        }
