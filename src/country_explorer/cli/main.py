"""CLI commands for the Country Explorer."""

from __future__ import annotations

import json
import logging

import click

from country_explorer.config import Settings
from country_explorer.countries.client import CountryAPIError, RestCountriesClient
from country_explorer.explorer.filters import (
    REGIONS,
    CountryFilter,
    available_currencies,
    available_languages,
    paginate,
)
from country_explorer.models import Article, Country
from country_explorer.news.service import NewsService


@click.group()
def cli() -> None:
    """Country Explorer - Browse countries and their latest news."""
    logging.basicConfig(
        level=Settings.from_env().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--region", "-r", type=click.Choice(REGIONS), help="Only this region")
@click.option("--search", "-s", help="Case-insensitive name substring")
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def countries(region: str | None, search: str | None, json_output: bool) -> None:
    """List countries.

    Example: country-explorer countries --region Europe
    """
    with RestCountriesClient() as client:
        try:
            all_countries = client.list_countries()
        except CountryAPIError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)

    matched = CountryFilter(search=search, region=region).apply(all_countries)

    if json_output:
        click.echo(json.dumps([c.to_dict() for c in matched], indent=2))
        return

    for c in matched:
        click.echo(f"{c.code}  {c.name} ({c.region}, pop. {c.population:,})")
    click.echo(f"\n{len(matched)} countries")


@cli.command()
@click.argument("code")
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def country(code: str, json_output: bool) -> None:
    """Show the full record for a country.

    Example: country-explorer country CAN
    """
    with RestCountriesClient() as client:
        try:
            record = client.get_country_by_code(code)
        except CountryAPIError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)

    if record is None:
        click.echo(f"Country '{code.upper()}' not found", err=True)
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps(record.to_dict(), indent=2))
    else:
        _print_country(record)


@cli.command()
@click.argument("code")
@click.option("--name", "-n", help="Country name used for the fallback search")
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def news(code: str, name: str | None, json_output: bool) -> None:
    """Show news headlines for a country.

    Example: country-explorer news us --name "United States"
    """
    with NewsService() as service:
        try:
            result = service.lookup(code, name)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)

    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if not result.articles:
        click.echo(f"No articles found for {result.code.upper()}")
        return

    click.echo(f"{len(result.articles)} articles ({result.status.value}):\n")
    for article in result.articles:
        _print_article(article)


@cli.command()
@click.option("--search", "-s", help="Case-insensitive name substring")
@click.option("--region", "-r", type=click.Choice(REGIONS), help="Only this region")
@click.option("--min-population", type=int, help="Inclusive lower bound")
@click.option("--max-population", type=int, help="Inclusive upper bound")
@click.option("--language", "-l", multiple=True, help="Language name (repeatable)")
@click.option("--currency", "-c", multiple=True, help="Currency code (repeatable)")
@click.option("--page", "-p", default=1, help="Page number (default: 1)")
@click.option("--show-filters", is_flag=True, help="List the available filter values")
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def explore(
    search: str | None,
    region: str | None,
    min_population: int | None,
    max_population: int | None,
    language: tuple[str, ...],
    currency: tuple[str, ...],
    page: int,
    show_filters: bool,
    json_output: bool,
) -> None:
    """Filter countries and show one page of results.

    Example: country-explorer explore --region Asia --min-population 50000000
    """
    with RestCountriesClient() as client:
        try:
            all_countries = client.list_countries()
        except CountryAPIError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)

    country_filter = CountryFilter(
        search=search,
        region=region,
        min_population=min_population,
        max_population=max_population,
        languages=list(language),
        currencies=list(currency),
    )
    result = paginate(country_filter.apply(all_countries), page=page)

    if json_output:
        click.echo(
            json.dumps(
                {
                    "items": [c.to_dict() for c in result.items],
                    "page": result.page,
                    "total_pages": result.total_pages,
                    "total_items": result.total_items,
                    "filters": {
                        "regions": list(REGIONS),
                        "languages": available_languages(all_countries),
                        "currencies": available_currencies(all_countries),
                    },
                },
                indent=2,
            )
        )
        return

    for c in result.items:
        click.echo(f"{c.code}  {c.name} ({c.region}, pop. {c.population:,})")
    click.echo(
        f"\nPage {result.page} of {result.total_pages} ({result.total_items} countries)"
    )

    if show_filters:
        click.echo(f"\nRegions: {', '.join(REGIONS)}")
        click.echo(f"Languages: {', '.join(available_languages(all_countries))}")
        click.echo(f"Currencies: {', '.join(available_currencies(all_countries))}")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address")
@click.option("--port", default=8000, help="Bind port")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "country_explorer.api.server:app",
        host=host,
        port=port,
        reload=reload,
        log_level=Settings.from_env().log_level.lower(),
    )


def _print_country(c: Country) -> None:
    """Pretty-print a full country record."""
    click.echo("\n" + "=" * 60)
    click.secho(f"{c.name} ({c.code})", bold=True)
    click.echo("=" * 60)

    click.echo(f"Capital: {c.capital}")
    click.echo(f"Region: {c.region}" + (f" / {c.subregion}" if c.subregion else ""))
    click.echo(f"Population: {c.population:,}")
    if c.area:
        click.echo(f"Area: {c.area:,.0f} km²")

    if c.languages:
        click.echo(f"Languages: {', '.join(c.languages.values())}")
    if c.currencies:
        currencies = ", ".join(f"{cur.name} ({cur.symbol})" for cur in c.currencies.values())
        click.echo(f"Currencies: {currencies}")
    if c.timezones:
        click.echo(f"Time zones: {', '.join(c.timezones)}")
    if c.tld:
        click.echo(f"Top-level domains: {', '.join(c.tld)}")
    if c.car_side:
        click.echo(f"Drives on: {c.car_side}")
    if c.independent is not None:
        click.echo(f"Independent: {'Yes' if c.independent else 'No'}")
    if c.un_member is not None:
        click.echo(f"UN member: {'Yes' if c.un_member else 'No'}")
    if c.demonym:
        click.echo(f"Demonyms: {c.demonym}")
    click.echo(f"Borders: {', '.join(c.borders) if c.borders else '-'}")

    click.echo("\n" + "=" * 60)


def _print_article(article: Article) -> None:
    """Pretty-print one article."""
    click.secho(f"• {article.title}", bold=True)
    meta = " - ".join(p for p in (article.source_name, article.published_at) if p)
    if meta:
        click.echo(f"  {meta}")
    click.echo(f"  {article.url}\n")


if __name__ == "__main__":
    cli()
