"""Country Explorer - Browse world countries and their latest news headlines."""

from country_explorer.models import Article, Country, Currency

__all__ = ["Article", "Country", "Currency"]
