"""FastAPI server for the Country Explorer."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

from fastapi import FastAPI, HTTPException, Query, Request
from pydantic import BaseModel

from country_explorer.config import Settings
from country_explorer.countries.client import CountryAPIError, RestCountriesClient
from country_explorer.explorer.filters import (
    REGIONS,
    CountryFilter,
    available_currencies,
    available_languages,
    paginate,
)
from country_explorer.models import Country
from country_explorer.news.service import NewsService

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Country Explorer API",
    description="Browse world countries and read cached news headlines per country",
    version="0.1.0",
)

# Process-wide instances; the news cache lives as long as the process
_settings: Settings | None = None
_country_client: RestCountriesClient | None = None
_news_service: NewsService | None = None


def get_settings() -> Settings:
    """Get or create the global settings."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_country_client() -> RestCountriesClient:
    """Get or create the global REST Countries client."""
    global _country_client
    if _country_client is None:
        _country_client = RestCountriesClient(base_url=get_settings().rest_countries_url)
    return _country_client


def get_news_service() -> NewsService:
    """Get or create the global news service."""
    global _news_service
    if _news_service is None:
        _news_service = NewsService(settings=get_settings())
    return _news_service


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    service: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", service="country-explorer")


@app.get("/api/countries")
def list_countries() -> list[dict[str, Any]]:
    """List all countries with the lightweight field set."""
    try:
        countries = get_country_client().list_countries()
    except CountryAPIError as e:
        logger.error("Failed to list countries: %s", e)
        raise HTTPException(status_code=500, detail=f"Failed to fetch countries: {e}")
    return [c.to_dict() for c in countries]


@app.get("/api/countries/code/{code}")
def get_country_by_code(code: str) -> dict[str, Any]:
    """Full country record by alpha-3 code."""
    return _require_country(code, by="code").to_dict()


@app.get("/api/countries/code/{code}/deep")
def get_country_deep_dive(code: str) -> dict[str, Any]:
    """Full country record plus its latest news headlines."""
    country = _require_country(code, by="code")
    news_code = country.alpha2 or country.code
    articles = get_news_service().get_news(news_code.lower(), country.name)
    return {
        "country": country.to_dict(),
        "news": [a.to_dict() for a in articles],
    }


@app.get("/api/countries/{name}")
def get_country_by_name(name: str) -> dict[str, Any]:
    """Full country record by exact common or official name."""
    return _require_country(name, by="name").to_dict()


@app.get("/api/news")
def get_news(code: str | None = None, name: str | None = None) -> list[dict[str, Any]]:
    """News articles for a country.

    ``code`` is required; ``name`` is only used for the keyword fallback.
    Upstream problems yield an empty list rather than an error.
    """
    if not code or not code.strip():
        raise HTTPException(status_code=400, detail="Missing `code` query parameter")

    try:
        articles = get_news_service().get_news(code.strip().lower(), name or None)
    except Exception as e:
        logger.exception("Unexpected error fetching news for %s", code)
        raise HTTPException(status_code=500, detail="Internal error fetching news") from e

    return [a.to_dict() for a in articles]


@app.get("/api/explore")
def explore_countries(
    request: Request,
    search: str | None = None,
    region: str | None = None,
    min_population: int | None = Query(None, ge=0),
    max_population: int | None = Query(None, ge=0),
    language: list[str] = Query(default=[]),
    currency: list[str] = Query(default=[]),
    page: int = Query(1, ge=1),
) -> dict[str, Any]:
    """Filter the country list, then return one page of the result."""
    try:
        countries = get_country_client().list_countries()
    except CountryAPIError as e:
        logger.error("Failed to list countries for explore: %s", e)
        raise HTTPException(status_code=500, detail=f"Failed to fetch countries: {e}")

    country_filter = CountryFilter(
        search=search,
        region=region,
        min_population=min_population,
        max_population=max_population,
        languages=language,
        currencies=currency,
    )
    result = paginate(country_filter.apply(countries), page=page)

    return {
        "items": [c.to_dict() for c in result.items],
        "page": result.page,
        "total_pages": result.total_pages,
        "total_items": result.total_items,
        "page_size": result.page_size,
        "next": _page_url(request, result.page + 1) if result.has_next else None,
        "previous": _page_url(request, result.page - 1) if result.has_previous else None,
        # Choices for the filter controls, drawn from the unfiltered list
        "filters": {
            "regions": list(REGIONS),
            "languages": available_languages(countries),
            "currencies": available_currencies(countries),
        },
    }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_country(key: str, by: str) -> Country:
    """Look up a country or raise the matching HTTPException."""
    client = get_country_client()
    try:
        if by == "code":
            country = client.get_country_by_code(key)
        else:
            country = client.get_country_by_name(key)
    except CountryAPIError as e:
        logger.error("Country lookup by %s %r failed: %s", by, key, e)
        raise HTTPException(status_code=e.status_code, detail="Failed to fetch country")

    if country is None:
        raise HTTPException(status_code=404, detail="Country not found")
    return country


def _page_url(request: Request, page: int) -> str:
    """Absolute URL of another page of the same explore query."""
    host = request.headers.get("x-forwarded-host") or request.headers.get("host")
    base_url = get_settings().get_base_url(host)
    params = [(k, v) for k, v in request.query_params.multi_items() if k != "page"]
    params.append(("page", str(page)))
    return f"{base_url}{request.url.path}?{urlencode(params)}"
