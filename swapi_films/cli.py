"""CLI entry point for browsing the Star Wars films."""

import asyncio
import sys

import click

from .constants.config import SWAPI_BASE_URL
from .utils.log import configure_logging


def build_film_loader(mock: bool, base_url: str = SWAPI_BASE_URL):
    """Network loader by default, or a MockFilmLoader filled with sample films."""
    if mock:
        from .testing.factories import mocked_films
        from .testing.mock_loader import MockFilmLoader
        return MockFilmLoader(mocked_films())

    from .loaders.network import NetworkFilmLoader
    return NetworkFilmLoader(base_url=base_url)


def load_films_view(mock: bool, base_url: str):
    from .views.films_list import FilmsListView

    view = FilmsListView(build_film_loader(mock, base_url))
    asyncio.run(view.load())
    return view


mock_option = click.option(
    "--mock",
    is_flag=True,
    help="Use canned sample films instead of the network"
)
base_url_option = click.option(
    "--base-url",
    default=SWAPI_BASE_URL,
    show_default=True,
    help="Base URL of the Star Wars API"
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool):
    """SWAPI Films - browse the Star Wars films and their opening crawls."""
    configure_logging(verbose)


@cli.command("list")
@mock_option
@base_url_option
def list_films(mock: bool, base_url: str):
    """List episodes 1-6 with their release dates.

    Examples:

        swfilms list

        swfilms list --mock
    """
    from .views.load_state import Failed

    view = load_films_view(mock, base_url)
    click.echo(view.render(), err=isinstance(view.state, Failed))
    if isinstance(view.state, Failed):
        sys.exit(1)


@cli.command("crawl")
@click.argument("episode", type=int)
@mock_option
@base_url_option
def crawl(episode: int, mock: bool, base_url: str):
    """Print the opening crawl of an episode.

    Examples:

        swfilms crawl 4

        swfilms crawl 1 --mock
    """
    from .views.load_state import Failed

    view = load_films_view(mock, base_url)
    if isinstance(view.state, Failed):
        click.echo(view.render(), err=True)
        sys.exit(1)

    try:
        detail = view.select(str(episode))
    except KeyError:
        click.echo(f"Error: Episode {episode} is not in the films list", err=True)
        sys.exit(1)

    click.echo(detail.render())


@cli.command("serve")
@click.option(
    "--port",
    default=3000,
    type=int,
    help="Port to run the server on (default: 3000)"
)
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to (default: 127.0.0.1)"
)
@mock_option
@base_url_option
def serve(port: int, host: str, mock: bool, base_url: str):
    """Start the films web viewer.

    Examples:

        swfilms serve

        swfilms serve --port 8080 --mock
    """
    from .server import run_server
    run_server(host=host, port=port, film_loader=build_film_loader(mock, base_url))


if __name__ == "__main__":
    cli()
