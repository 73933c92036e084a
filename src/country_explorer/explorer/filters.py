"""Search, filtering and pagination over an in-memory country list."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Iterable, Sequence, TypeVar

from country_explorer.models import Country

REGIONS = (
    "Africa",
    "Americas",
    "Asia",
    "Europe",
    "Oceania",
    "Antarctic",
    "Polar",
)
ALL_REGIONS = "All"
PAGE_SIZE = 40

T = TypeVar("T")


@dataclass
class CountryFilter:
    """Composable predicate over Country records.

    Attributes:
        search: Case-insensitive substring of the country name.
        region: Exact (case-sensitive) region; None or 'All' matches any.
        min_population: Inclusive lower bound.
        max_population: Inclusive upper bound.
        languages: Match countries speaking any of these language names.
        currencies: Match countries using any of these currency codes.
    """

    search: str | None = None
    region: str | None = None
    min_population: int | None = None
    max_population: int | None = None
    languages: list[str] = field(default_factory=list)
    currencies: list[str] = field(default_factory=list)

    def matches(self, country: Country) -> bool:
        """Check whether a country passes every active predicate."""
        if self.search and self.search.strip().lower() not in country.name.lower():
            return False
        if self.region and self.region != ALL_REGIONS and country.region != self.region:
            return False
        if self.min_population is not None and country.population < self.min_population:
            return False
        if self.max_population is not None and country.population > self.max_population:
            return False
        if self.languages:
            spoken = set(country.languages.values())
            if not any(lang in spoken for lang in self.languages):
                return False
        if self.currencies:
            if not any(code in country.currencies for code in self.currencies):
                return False
        return True

    def apply(self, countries: Iterable[Country]) -> list[Country]:
        """Return the countries that match, preserving order."""
        return [c for c in countries if self.matches(c)]


@dataclass
class Page(Generic[T]):
    """One page of a paginated sequence."""

    items: list[T]
    page: int
    total_pages: int
    total_items: int
    page_size: int

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def paginate(items: Sequence[T], page: int = 1, page_size: int = PAGE_SIZE) -> Page[T]:
    """Slice a sequence into fixed-size pages.

    The page count is ``ceil(len(items) / page_size)`` with a minimum of one,
    and ``page`` is clamped into ``[1, total_pages]``.

    Raises:
        ValueError: If page_size is not positive
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")

    total_items = len(items)
    total_pages = max(1, math.ceil(total_items / page_size))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start : start + page_size]),
        page=page,
        total_pages=total_pages,
        total_items=total_items,
        page_size=page_size,
    )


def available_languages(countries: Iterable[Country]) -> list[str]:
    """Sorted unique language names across the countries."""
    return sorted({lang for c in countries for lang in c.languages.values()})


def available_currencies(countries: Iterable[Country]) -> list[str]:
    """Sorted unique currency codes across the countries."""
    return sorted({code for c in countries for code in c.currencies})
