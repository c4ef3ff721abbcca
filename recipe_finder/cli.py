"""Recipe Finder - command line entry point."""

import asyncio
import logging

import click

from .core.config import FinderConfig
from .core.mealdb import MealDBClient
from .core.messages import message
from .core.selection import SelectionStore
from .core.session import ResultsView, SearchSession
from .utils.display import format_details, format_results

VERSION = "0.1.0"

FORMAT_OPTION = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)


def _run_session(operation, select_id: str | None = None) -> tuple[ResultsView, bool]:
    """Run one session operation against a fresh session and client."""
    config = FinderConfig.from_env()
    view = ResultsView(default_message=message("no_recipes", config.locale))

    async def runner() -> tuple[ResultsView, bool]:
        async with MealDBClient.from_config(config) as client:
            session = SearchSession(client, sink=view, store=SelectionStore(), config=config)
            session.load_local()
            await operation(session)
            selected = bool(select_id) and session.select(select_id) is not None
            return view, selected

    return asyncio.run(runner())


def _echo_view(view: ResultsView, output_format: str) -> None:
    if output_format == "table" and view.title and view.recipes:
        click.echo(view.title)
    click.echo(format_results(view.recipes, output_format, view.message))


@click.group()
@click.version_option(version=VERSION)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Search TheMealDB and the bundled recipes from the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.argument("query")
@FORMAT_OPTION
@click.option("--select", "select_id", default=None, help="Save the result with this id for `details`")
def search(query: str, output_format: str, select_id: str | None):
    """Search recipe names and ingredients for QUERY."""
    view, selected = _run_session(lambda s: s.perform_search(query), select_id)
    _echo_view(view, output_format)
    if select_id and not selected:
        raise click.ClickException(f"Recipe {select_id} is not in the results")


@cli.command()
@click.argument("name")
@FORMAT_OPTION
def category(name: str, output_format: str):
    """List recipes from a TheMealDB category such as Vegetarian or Dessert."""
    view, _ = _run_session(lambda s: s.search_category(name))
    _echo_view(view, output_format)


@cli.command()
@click.option("--count", "-n", default=None, type=int, help="Number of random recipes")
@FORMAT_OPTION
def random(count: int | None, output_format: str):
    """Show random recipe suggestions."""

    async def operation(session: SearchSession) -> None:
        if count is not None:
            session.config.random_count = count
        await session.show_random()

    view, _ = _run_session(operation)
    _echo_view(view, output_format)


@cli.command()
def details():
    """Show the saved recipe."""
    recipe = SelectionStore().load()
    if recipe is None:
        click.echo("No recipe selected. Run `recipe-finder search QUERY --select ID` first.", err=True)
        raise SystemExit(1)
    click.echo(format_details(recipe))


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=9877, type=int, help="Port to run the server on")
def serve(host: str, port: int):
    """Run the HTTP API."""
    from .api.server import run

    click.echo(f"Starting Recipe Finder backend on {host}:{port}")
    run(host, port)


if __name__ == "__main__":
    cli()
