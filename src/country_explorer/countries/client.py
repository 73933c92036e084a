"""REST Countries API client."""

from __future__ import annotations

import logging
import os
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from country_explorer.countries.schemas import RestCountry
from country_explorer.models import Country

logger = logging.getLogger(__name__)

_BASE_URL = "https://restcountries.com/v3.1"

# REST Countries rejects /all requests asking for more than 10 fields
LIST_FIELDS = (
    "name",
    "cca3",
    "flags",
    "capital",
    "population",
    "region",
    "languages",
    "subregion",
    "currencies",
)

# Statuses that mean "no such country" for single-record lookups
_NOT_FOUND_STATUSES = (400, 404)


class CountryAPIError(Exception):
    """Error from the REST Countries API."""

    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message)
        self.status_code = status_code


class RestCountriesClient:
    """Client for the REST Countries v3.1 API.

    Upstream failures raise ``CountryAPIError``; no fallback data is ever
    substituted.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self._base_url = (
            base_url or os.environ.get("REST_COUNTRIES_URL", _BASE_URL)
        ).rstrip("/")
        self._client = httpx.Client(
            headers={"Accept": "application/json"},
            follow_redirects=True,
            timeout=30.0,
        )

    def _get(
        self, path: str, params: dict | None = None, allow_missing: bool = False
    ) -> list | dict | None:
        """GET a REST Countries path and decode the JSON body.

        Returns None when ``allow_missing`` is set and the upstream reports
        the resource as missing.
        """
        url = f"{self._base_url}/{path}"
        try:
            resp = self._client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning("REST Countries request to %s failed: %s", url, e)
            raise CountryAPIError(f"Failed to reach REST Countries: {e}") from e

        if allow_missing and resp.status_code in _NOT_FOUND_STATUSES:
            return None

        if resp.is_error:
            logger.warning(
                "REST Countries returned %d for %s: %s",
                resp.status_code,
                url,
                resp.text[:200],
            )
            raise CountryAPIError(
                f"REST Countries returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise CountryAPIError("REST Countries returned invalid JSON") from e

    def _single(self, data: list | dict | None, fallback_code: str) -> Country | None:
        """Map a single-record response (a one-element list) to a Country."""
        if not data:
            return None
        item = data[0] if isinstance(data, list) else data
        try:
            record = RestCountry.model_validate(item)
        except ValidationError as e:
            raise CountryAPIError(f"Unexpected REST Countries payload: {e}") from e
        return record.to_country(fallback_code=fallback_code, full=True)

    # -- public API ------------------------------------------------------

    def list_countries(self) -> list[Country]:
        """Fetch all countries with the lightweight field set."""
        data = self._get("all", params={"fields": ",".join(LIST_FIELDS)})
        if not isinstance(data, list):
            raise CountryAPIError("Unexpected REST Countries payload: expected a list")

        countries: list[Country] = []
        for item in data:
            try:
                record = RestCountry.model_validate(item)
            except ValidationError as e:
                logger.warning("Skipping invalid country record: %s", e)
                continue
            countries.append(record.to_country())

        logger.debug("Fetched %d countries", len(countries))
        return countries

    def get_country_by_code(self, code: str) -> Country | None:
        """Fetch the full record for an alpha-3 (or alpha-2) code."""
        code_upper = code.strip().upper()
        if not code_upper:
            return None
        data = self._get(f"alpha/{quote(code_upper)}", allow_missing=True)
        return self._single(data, fallback_code=code_upper)

    def get_country_by_name(self, name: str) -> Country | None:
        """Fetch the full record for an exact common or official name."""
        name = name.strip()
        if not name:
            return None
        data = self._get(
            f"name/{quote(name)}", params={"fullText": "true"}, allow_missing=True
        )
        return self._single(data, fallback_code="N/A")

    def find_country_by_name(self, name: str) -> Country | None:
        """Case-insensitive exact match against the lightweight country list."""
        wanted = name.strip().lower()
        for country in self.list_countries():
            if country.name.lower() == wanted:
                return country
        return None

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> RestCountriesClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
