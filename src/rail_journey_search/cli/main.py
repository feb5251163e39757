"""CLI main entry point for railway journey search."""

import logging
import sys

import click
from rich.console import Console

from ..core import (
    DataFormatError,
    NetworkFileError,
    Settings,
    StationNotFoundError,
    ValidationError,
    build_network,
    find_best_journeys,
    load_network_data,
)
from .formatters import (
    format_journeys_detailed,
    format_journeys_json,
    format_journeys_table,
    format_journeys_text,
)
from .network_commands import network

console = Console()
error_console = Console(stderr=True)


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """Railway Journey Search - Find the best journeys across a railway network."""
    pass


@cli.command()
@click.argument("network_file", type=click.Path(dir_okay=False))
@click.argument("origin")
@click.argument("destination")
@click.argument("max_results", type=click.IntRange(min=0))
@click.option(
    "--max-transfers",
    "-m",
    type=click.IntRange(min=0),
    default=None,
    help="Skip journeys with more changes than this (default: RAIL_JOURNEY_MAX_TRANSFERS, else no limit)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "table", "detailed", "json"]),
    default=None,
    help="Output format (default: RAIL_JOURNEY_OUTPUT_FORMAT, else text)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed information")
def journeys(
    network_file: str,
    origin: str,
    destination: str,
    max_results: int,
    max_transfers: int | None,
    output_format: str | None,
    verbose: bool,
) -> None:
    """Find the best journeys between two stations.

    Journeys are ranked by number of changes, then by distance.

    Examples:
        rail-journey journeys network.json "Central" "Harbour" 5
        rail-journey journeys network.json "Central" "Harbour" 3 --max-transfers 1
        rail-journey journeys network.json "Central" "Harbour" 5 --format json
    """
    if verbose:
        logging.basicConfig(level=logging.INFO)

    try:
        settings = Settings.from_env()
        if max_transfers is None:
            max_transfers = settings.max_transfers
        if output_format is None:
            output_format = settings.output_format

        data = load_network_data(network_file)
        graph = build_network(data)
        results = find_best_journeys(
            graph,
            origin,
            destination,
            max_results,
            max_transfers=max_transfers,
        )

        if output_format == "json":
            click.echo(format_journeys_json(results))
        elif output_format == "table":
            format_journeys_table(results, verbose=verbose)
        elif output_format == "detailed":
            format_journeys_detailed(results)
        else:
            click.echo(format_journeys_text(results))

    except StationNotFoundError as e:
        error_console.print(
            "[red]Error:[/red] One or more station cannot be found on this network"
        )
        if verbose:
            error_console.print(f"Unknown: {', '.join(e.station_names)}")
        error_console.print("\nRoutes found: 0")
        sys.exit(1)
    except NetworkFileError as e:
        error_console.print(f"[red]File error:[/red] {e}")
        sys.exit(1)
    except DataFormatError as e:
        error_console.print(f"[red]Data error:[/red] {e}")
        sys.exit(1)
    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            error_console.print_exception()
        sys.exit(1)


# Add the imported network command group to the main CLI
cli.add_command(network)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
def show_config() -> None:
    """Show current configuration.

    Values come from RAIL_JOURNEY_* environment variables, e.g.
    RAIL_JOURNEY_NETWORK_FILE or RAIL_JOURNEY_MAX_RESULTS.
    """
    try:
        settings = Settings.from_env()
    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    max_transfers = (
        "no limit" if settings.max_transfers is None else settings.max_transfers
    )
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• Network file: {settings.network_file}")
    console.print(f"• Default max results: {settings.max_results}")
    console.print(f"• Default max transfers: {max_transfers}")
    console.print(f"• Default format: {settings.output_format}")


if __name__ == "__main__":
    cli()
