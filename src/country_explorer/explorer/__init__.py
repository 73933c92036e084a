"""View-level filtering and pagination."""

from country_explorer.explorer.filters import (
    PAGE_SIZE,
    REGIONS,
    CountryFilter,
    Page,
    paginate,
)

__all__ = ["CountryFilter", "Page", "PAGE_SIZE", "REGIONS", "paginate"]
