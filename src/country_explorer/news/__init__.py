"""News fetching and caching components."""

from country_explorer.news.cache import NewsCache
from country_explorer.news.gnews_client import GNewsClient
from country_explorer.news.service import NewsService

__all__ = ["GNewsClient", "NewsCache", "NewsService"]
