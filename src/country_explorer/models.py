"""Data models for the Country Explorer."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Currency:
    """A currency used by a country."""

    name: str
    symbol: str = ""

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {"name": self.name, "symbol": self.symbol}


@dataclass(frozen=True)
class Country:
    """A country record normalized from the REST Countries API."""

    name: str
    code: str  # Alpha-3 code (cca3), used as the identifier
    flag: str  # SVG or PNG URL
    capital: str = "N/A"
    population: int = 0
    region: str = "Unknown"

    subregion: str | None = None
    languages: Mapping[str, str] = field(default_factory=dict)  # {"eng": "English"}
    currencies: Mapping[str, Currency] = field(default_factory=dict)

    # Full-record extras
    alpha2: str | None = None
    borders: tuple[str, ...] = ()
    area: float | None = None  # km²
    timezones: tuple[str, ...] = ()
    tld: tuple[str, ...] = ()
    independent: bool | None = None
    un_member: bool | None = None
    car_side: str | None = None  # "left" | "right"
    demonym: str | None = None  # "Canadian / Canadian"

    def __post_init__(self) -> None:
        # Records are shared with callers; store read-only containers
        object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))
        object.__setattr__(self, "currencies", MappingProxyType(dict(self.currencies)))
        for name in ("borders", "timezones", "tld"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict, omitting unset optional fields."""
        data: dict = {
            "name": self.name,
            "code": self.code,
            "flag": self.flag,
            "capital": self.capital,
            "population": self.population,
            "region": self.region,
            "languages": dict(self.languages),
            "currencies": {k: v.to_dict() for k, v in self.currencies.items()},
        }
        optional = {
            "subregion": self.subregion,
            "alpha2": self.alpha2,
            "area": self.area,
            "independent": self.independent,
            "unMember": self.un_member,
            "carSide": self.car_side,
            "demonym": self.demonym,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        for key, values in (
            ("borders", self.borders),
            ("timezones", self.timezones),
            ("tld", self.tld),
        ):
            if values:
                data[key] = list(values)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> Country:
        """Deserialize from a dict produced by ``to_dict``."""
        return cls(
            name=data["name"],
            code=data["code"],
            flag=data.get("flag", ""),
            capital=data.get("capital", "N/A"),
            population=data.get("population", 0),
            region=data.get("region", "Unknown"),
            subregion=data.get("subregion"),
            languages=dict(data.get("languages") or {}),
            currencies={
                k: Currency(name=v.get("name", ""), symbol=v.get("symbol", ""))
                for k, v in (data.get("currencies") or {}).items()
            },
            alpha2=data.get("alpha2"),
            borders=tuple(data.get("borders") or ()),
            area=data.get("area"),
            timezones=tuple(data.get("timezones") or ()),
            tld=tuple(data.get("tld") or ()),
            independent=data.get("independent"),
            un_member=data.get("unMember"),
            car_side=data.get("carSide"),
            demonym=data.get("demonym"),
        )


@dataclass(frozen=True)
class Article:
    """A single news article returned by the news provider."""

    title: str
    url: str
    description: str | None = None
    content: str | None = None
    image: str | None = None
    published_at: str | None = None  # ISO-8601 as provided upstream
    source_name: str | None = None  # "Reuters", "BBC News", etc.
    source_url: str | None = None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "title": self.title,
            "url": self.url,
            "description": self.description,
            "content": self.content,
            "image": self.image,
            "publishedAt": self.published_at,
            "source": {"name": self.source_name, "url": self.source_url},
        }

    @classmethod
    def from_dict(cls, data: dict) -> Article:
        """Deserialize from a dict."""
        source = data.get("source") or {}
        return cls(
            title=data["title"],
            url=data["url"],
            description=data.get("description"),
            content=data.get("content"),
            image=data.get("image"),
            published_at=data.get("publishedAt"),
            source_name=source.get("name"),
            source_url=source.get("url"),
        )
