"""CLI commands for inspecting a railway network file."""

import sys

import click
from rich.console import Console

from ..core import (
    DataFormatError,
    NetworkFileError,
    RailwayData,
    build_network,
    load_network_data,
)
from ..core.railway import (
    find_longest_route,
    find_route,
    format_distance,
    get_network_name,
    get_route,
    route_distance,
    route_names_to_string,
    route_summary,
    route_to_string,
    sort_routes_by_length,
    sort_routes_by_name,
    total_stations,
)
from .formatters import format_network_graph, format_routes_table

console = Console()
error_console = Console(stderr=True)

network_file_argument = click.argument(
    "network_file", type=click.Path(dir_okay=False)
)


def _load(network_file: str) -> RailwayData:
    """Load a network file, exiting with a message on failure."""
    try:
        return load_network_data(network_file)
    except NetworkFileError as e:
        error_console.print(f"[red]File error:[/red] {e}")
        sys.exit(1)
    except DataFormatError as e:
        error_console.print(f"[red]Data error:[/red] {e}")
        sys.exit(1)


@click.group()
def network() -> None:
    """Railway network inspection commands."""
    pass


@network.command("info")
@network_file_argument
def network_info(network_file: str) -> None:
    """Show the network name, its routes and unique station count."""
    data = _load(network_file)
    console.print(f"[bold]Network:[/bold] {get_network_name(data) or 'N/A'}")
    console.print(f"[bold]Routes:[/bold] {len(data.routes)}")
    click.echo(route_names_to_string(data))
    console.print(f"[bold]Unique stations:[/bold] {total_stations(data)}")


@network.command("summary")
@network_file_argument
def network_summary(network_file: str) -> None:
    """Show one line per route with its end stations and length."""
    data = _load(network_file)
    click.echo(route_summary(data))


@network.command("routes")
@network_file_argument
@click.option(
    "--sort",
    "-s",
    "sort_by",
    type=click.Choice(["file", "name", "length"]),
    default="file",
    help="Route ordering",
)
@click.option("--desc", is_flag=True, help="Sort in descending order")
def list_routes(network_file: str, sort_by: str, desc: bool) -> None:
    """List the routes of a network.

    Examples:
        rail-journey network routes network.json
        rail-journey network routes network.json --sort length --desc
    """
    data = _load(network_file)
    if sort_by == "name":
        routes = sort_routes_by_name(data, ascending=not desc)
    elif sort_by == "length":
        routes = sort_routes_by_length(data, ascending=not desc)
    else:
        routes = list(reversed(data.routes)) if desc else data.routes
    format_routes_table(routes)


@network.command("route")
@network_file_argument
@click.argument("route_name")
def show_route(network_file: str, route_name: str) -> None:
    """Show the stops of a route with cumulative distances."""
    data = _load(network_file)
    route = get_route(data, route_name)
    if route is None:
        error_console.print(f"[yellow]Route not found:[/yellow] {route_name}")
        sys.exit(1)
    click.echo(route_to_string(route))


@network.command("longest")
@network_file_argument
def longest_route(network_file: str) -> None:
    """Show the longest route of a network."""
    data = _load(network_file)
    route = find_longest_route(data)
    if route is None:
        console.print("[yellow]Network has no routes[/yellow]")
        return
    console.print(
        f"[bold]{route.name}[/bold]: {format_distance(route_distance(route))} miles"
    )


@network.command("find")
@network_file_argument
@click.argument("from_station")
@click.argument("to_station")
def find_direct_route(network_file: str, from_station: str, to_station: str) -> None:
    """Find a single route serving two stations.

    Examples:
        rail-journey network find network.json "Central" "Harbour"
    """
    data = _load(network_file)
    segment = find_route(data, from_station, to_station)
    if segment is None:
        console.print(
            "[yellow]Route not found in this railway network from the two stops[/yellow]"
        )
        return
    click.echo(str(segment))


@network.command("graph")
@network_file_argument
def show_graph(network_file: str) -> None:
    """Print every station of the network with its links."""
    data = _load(network_file)
    format_network_graph(build_network(data))
