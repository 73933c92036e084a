"""Tests for the CLI interface."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from country_explorer.cli.main import cli
from country_explorer.countries.client import CountryAPIError
from country_explorer.models import Article, Country, Currency
from country_explorer.news.result import LookupStatus, NewsLookupResult

FRANCE = Country(
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
)
JAPAN = Country(name="Japan", code="JPN", flag="jp.svg", population=125836021, region="Asia")


def _client_mock(mock_cls: MagicMock) -> MagicMock:
    """Wire a mocked RestCountriesClient class used as a context manager."""
    mock_client = MagicMock()
    mock_cls.return_value.__enter__.return_value = mock_client
    return mock_client


class TestCountriesCommand:
    @patch("country_explorer.cli.main.RestCountriesClient")
    def test_lists_countries(self, mock_cls: MagicMock) -> None:
        _client_mock(mock_cls).list_countries.return_value = [FRANCE, JAPAN]

        result = CliRunner().invoke(cli, ["countries"])

        assert result.exit_code == 0
        assert "FRA  France (Europe, pop. 67,391,582)" in result.output
        assert "2 countries" in result.output

    @patch("country_explorer.cli.main.RestCountriesClient")
    def test_region_filter_json(self, mock_cls: MagicMock) -> None:
        _client_mock(mock_cls).list_countries.return_value = [FRANCE, JAPAN]

        result = CliRunner().invoke(cli, ["countries", "--region", "Asia", "-j"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [c["code"] for c in data] == ["JPN"]

    @patch("country_explorer.cli.main.RestCountriesClient")
    def test_upstream_error(self, mock_cls: MagicMock) -> None:
        _client_mock(mock_cls).list_countries.side_effect = CountryAPIError("down")

        result = CliRunner().invoke(cli, ["countries"])

        assert result.exit_code == 1
        assert "Error: down" in result.output


class TestCountryCommand:
    @patch("country_explorer.cli.main.RestCountriesClient")
    def test_shows_details(self, mock_cls: MagicMock) -> None:
        _client_mock(mock_cls).get_country_by_code.return_value = FRANCE

        result = CliRunner().invoke(cli, ["country", "fra"])

        assert result.exit_code == 0
        assert "France (FRA)" in result.output
        assert "Currencies: Euro (€)" in result.output
        assert "Borders: BEL, DEU" in result.output
        assert "UN member: Yes" in result.output

    @patch("country_explorer.cli.main.RestCountriesClient")
    def test_not_found(self, mock_cls: MagicMock) -> None:
        _client_mock(mock_cls).get_country_by_code.return_value = None

        result = CliRunner().invoke(cli, ["country", "zzz"])

        assert result.exit_code == 1
        assert "Country 'ZZZ' not found" in result.output


class TestNewsCommand:
    @patch("country_explorer.cli.main.NewsService")
    def test_prints_articles(self, mock_cls: MagicMock) -> None:
        service = mock_cls.return_value.__enter__.return_value
        service.lookup.return_value = NewsLookupResult(
            code="us",
            status=LookupStatus.SEARCH,
            articles=[
                Article(
                    title="Election results",
                    url="https://news.example.com/election",
                    source_name="Example News",
                    published_at="2025-01-02T10:00:00Z",
                )
            ],
        )

        result = CliRunner().invoke(cli, ["news", "us", "--name", "United States"])

        assert result.exit_code == 0
        service.lookup.assert_called_once_with("us", "United States")
        assert "1 articles (search)" in result.output
        assert "Election results" in result.output

    @patch("country_explorer.cli.main.NewsService")
    def test_no_articles(self, mock_cls: MagicMock) -> None:
        service = mock_cls.return_value.__enter__.return_value
        service.lookup.return_value = NewsLookupResult(
            code="aq", status=LookupStatus.MISSING_API_KEY
        )

        result = CliRunner().invoke(cli, ["news", "aq"])

        assert result.exit_code == 0
        assert "No articles found for AQ" in result.output

    def test_blank_code_is_an_error(self) -> None:
        with patch.dict("os.environ", {"GNEWS_API_KEY": ""}):
            result = CliRunner().invoke(cli, ["news", " "])

        assert result.exit_code == 1
        assert "Error: Country code is required" in result.output


class TestExploreCommand:
    @patch("country_explorer.cli.main.RestCountriesClient")
    def test_filters_and_paginates(self, mock_cls: MagicMock) -> None:
        _client_mock(mock_cls).list_countries.return_value = [FRANCE, JAPAN]

        result = CliRunner().invoke(
            cli, ["explore", "--min-population", "100000000", "--json-output"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [c["code"] for c in data["items"]] == ["JPN"]
        assert data["total_pages"] == 1

    @patch("country_explorer.cli.main.RestCountriesClient")
    def test_text_output(self, mock_cls: MagicMock) -> None:
        _client_mock(mock_cls).list_countries.return_value = [FRANCE, JAPAN]

        result = CliRunner().invoke(cli, ["explore", "--currency", "EUR"])

        assert result.exit_code == 0
        assert "FRA  France" in result.output
        assert "Page 1 of 1 (1 countries)" in result.output

    @patch("country_explorer.cli.main.RestCountriesClient")
    def test_show_filters(self, mock_cls: MagicMock) -> None:
        _client_mock(mock_cls).list_countries.return_value = [FRANCE, JAPAN]

        result = CliRunner().invoke(cli, ["explore", "--region", "Asia", "--show-filters"])

        assert result.exit_code == 0
        assert "JPN  Japan" in result.output
        assert "Languages: French" in result.output
        assert "Currencies: EUR" in result.output

    @patch("country_explorer.cli.main.RestCountriesClient")
    def test_json_includes_filters(self, mock_cls: MagicMock) -> None:
        _client_mock(mock_cls).list_countries.return_value = [FRANCE, JAPAN]

        result = CliRunner().invoke(cli, ["explore", "-j"])

        data = json.loads(result.output)
        assert data["filters"]["languages"] == ["French"]
        assert data["filters"]["currencies"] == ["EUR"]
        assert "Asia" in data["filters"]["regions"]


class TestServeCommand:
    @patch("uvicorn.run")
    def test_runs_uvicorn(self, mock_run: MagicMock) -> None:
        result = CliRunner().invoke(cli, ["serve", "--port", "9000"])

        assert result.exit_code == 0
        args, kwargs = mock_run.call_args
        assert args[0] == "country_explorer.api.server:app"
        assert kwargs["port"] == 9000
