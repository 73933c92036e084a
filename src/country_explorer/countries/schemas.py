"""Pydantic schemas for REST Countries v3.1 payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from country_explorer.models import Country, Currency


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CountryName(_Upstream):
    common: str = "Unknown"
    official: str | None = None


class Flags(_Upstream):
    svg: str | None = None
    png: str | None = None


class CurrencyInfo(_Upstream):
    name: str = ""
    symbol: str = ""


class Car(_Upstream):
    side: str | None = None


class Demonym(_Upstream):
    m: str = ""
    f: str = ""


class RestCountry(_Upstream):
    """A single country as returned by REST Countries.

    Every field is optional because the ``fields`` query parameter trims the
    payload to the requested subset.
    """

    name: CountryName = Field(default_factory=CountryName)
    cca3: str | None = None
    cca2: str | None = None
    flags: Flags = Field(default_factory=Flags)
    capital: list[str] = Field(default_factory=list)
    population: int = Field(default=0, ge=0)
    region: str | None = None
    subregion: str | None = None
    languages: dict[str, str] = Field(default_factory=dict)
    currencies: dict[str, CurrencyInfo] = Field(default_factory=dict)
    borders: list[str] = Field(default_factory=list)
    area: float | None = None
    timezones: list[str] = Field(default_factory=list)
    tld: list[str] = Field(default_factory=list)
    independent: bool | None = None
    unMember: bool | None = None
    car: Car | None = None
    demonyms: dict[str, Demonym] = Field(default_factory=dict)

    def to_country(self, fallback_code: str = "N/A", full: bool = False) -> Country:
        """Map to the internal Country record.

        Args:
            fallback_code: Code to use when the payload has no ``cca3``
            full: Include the deep-dive fields (borders, area, etc.)

        Returns:
            Country record
        """
        base = {
            "name": self.name.common,
            "code": self.cca3 or fallback_code,
            "flag": self.flags.svg or self.flags.png or "",
            "capital": self.capital[0] if self.capital else "N/A",
            "population": self.population,
            "region": self.region or "Unknown",
            "subregion": self.subregion,
            "languages": dict(self.languages),
            "currencies": {
                code: Currency(name=info.name, symbol=info.symbol)
                for code, info in self.currencies.items()
            },
        }
        if not full:
            return Country(**base)

        eng = self.demonyms.get("eng")
        return Country(
            **base,
            alpha2=self.cca2,
            borders=tuple(self.borders),
            area=self.area,
            timezones=tuple(self.timezones),
            tld=tuple(self.tld),
            independent=self.independent,
            un_member=self.unMember,
            car_side=self.car.side if self.car else None,
            demonym=f"{eng.m} / {eng.f}" if eng else None,
        )
