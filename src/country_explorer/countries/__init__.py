"""Country data gateway components."""

from country_explorer.countries.client import CountryAPIError, RestCountriesClient

__all__ = ["CountryAPIError", "RestCountriesClient"]
