"""Tests for country_explorer data models."""

import pytest

from country_explorer.models import Article, Country, Currency


class TestCountry:
    """Tests for Country model."""

    def test_to_dict_omits_unset_optionals(self) -> None:
        country = Country(name="Canada", code="CAN", flag="ca.svg")

        data = country.to_dict()

        assert data == {
            "name": "Canada",
            "code": "CAN",
            "flag": "ca.svg",
            "capital": "N/A",
            "population": 0,
            "region": "Unknown",
            "languages": {},
            "currencies": {},
        }

    def test_to_dict_full_record(self) -> None:
        country = Country(
            name="France",
            code="FRA",
            flag="fr.svg",
            capital="Paris",
            population=67391582,
            region="Europe",
            subregion="Western Europe",
            languages={"fra": "French"},
            currencies={"EUR": Currency("Euro", "€")},
            borders=["BEL", "DEU"],
            un_member=True,
            independent=False,
            car_side="right",
        )

        data = country.to_dict()

        assert data["currencies"] == {"EUR": {"name": "Euro", "symbol": "€"}}
        assert data["borders"] == ["BEL", "DEU"]
        assert data["unMember"] is True
        assert data["independent"] is False
        assert data["carSide"] == "right"
        assert "area" not in data

    def test_from_dict_restores_fields(self) -> None:
        country = Country(
            name="Japan",
            code="JPN",
            flag="jp.svg",
            currencies={"JPY": Currency("Japanese yen", "¥")},
            timezones=["UTC+09:00"],
            un_member=True,
        )

        restored = Country.from_dict(country.to_dict())

        assert restored == country

    def test_containers_are_read_only(self) -> None:
        borders = ["BEL", "DEU"]
        languages = {"fra": "French"}
        country = Country(
            name="France",
            code="FRA",
            flag="fr.svg",
            languages=languages,
            borders=borders,
        )

        borders.append("ESP")
        languages["bre"] = "Breton"

        assert country.borders == ("BEL", "DEU")
        assert dict(country.languages) == {"fra": "French"}
        with pytest.raises(TypeError):
            country.languages["eng"] = "English"  # type: ignore[index]
        with pytest.raises(TypeError):
            country.currencies["EUR"] = Currency("Euro", "€")  # type: ignore[index]


class TestArticle:
    """Tests for Article model."""

    def test_to_dict_uses_upstream_shape(self) -> None:
        article = Article(
            title="Title",
            url="https://example.com/a",
            published_at="2025-01-02T10:00:00Z",
            source_name="Example",
            source_url="https://example.com",
        )

        data = article.to_dict()

        assert data["publishedAt"] == "2025-01-02T10:00:00Z"
        assert data["source"] == {"name": "Example", "url": "https://example.com"}
        assert data["description"] is None

    def test_from_dict_without_source(self) -> None:
        article = Article.from_dict({"title": "T", "url": "https://example.com"})
        assert article.source_name is None
        assert article.published_at is None
