"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.models import Journey, Network, RouteRecord
from ..core.railway import format_distance, route_distance

console = Console()


def format_journeys_text(journeys: list[Journey]) -> str:
    """Format journeys as plain text, one route summary per journey."""
    lines = [f"Routes found: {len(journeys)}"]
    for idx, journey in enumerate(journeys, 1):
        lines.append(f"{idx}:")
        lines.append("Route Summary")
        lines.append("==============")
        if journey.text.strip():
            lines.append(journey.text.strip())
        lines.append(f"Arrive at {journey.arrival}")
        lines.append(f"Total distance :{format_distance(journey.distance)}")
        lines.append(f"Changes :{journey.changes}")
        lines.append(f"Passing through: {', '.join(journey.station_names)}")
        lines.append("")
    return "\n".join(lines)


def format_journeys_table(journeys: list[Journey], verbose: bool = False) -> None:
    """Display journeys as a rich table."""
    if not journeys:
        console.print("No journeys found.")
        return

    table = Table(title="Journeys", show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", no_wrap=True)
    table.add_column("Distance", style="green")
    table.add_column("Changes", style="yellow")
    table.add_column("Stations", style="blue")

    for idx, journey in enumerate(journeys, 1):
        table.add_row(
            str(idx),
            format_distance(journey.distance),
            str(journey.changes),
            " → ".join(journey.station_names),
        )

    console.print(table)

    if verbose:
        for idx, journey in enumerate(journeys, 1):
            stop_table = Table(
                title=f"Journey {idx} Stops", show_header=True, header_style="bold blue"
            )
            stop_table.add_column("Station", style="cyan")
            stop_table.add_column("Distance", style="green")
            for stop in journey.stations:
                stop_table.add_row(stop.name, format_distance(stop.distance))
            console.print(stop_table)


def format_journeys_detailed(journeys: list[Journey]) -> None:
    """Display journeys as panels with their narrative."""
    if not journeys:
        console.print("No journeys found.")
        return

    for idx, journey in enumerate(journeys, 1):
        summary_text = journey.text.strip()
        if summary_text:
            summary_text += "\n"
        summary_text += f"""Arrive at {journey.arrival}
[bold]Total distance:[/bold] {format_distance(journey.distance)}
[bold]Changes:[/bold] {journey.changes}
[bold]Passing through:[/bold] {", ".join(journey.station_names)}"""

        console.print(
            Panel(summary_text, title=f"Route Summary {idx}", border_style="blue")
        )


def format_journeys_json(journeys: list[Journey]) -> str:
    """Format journeys as JSON."""
    journeys_data = [
        {
            "stations": [
                {"name": stop.name, "distance": stop.distance}
                for stop in journey.stations
            ],
            "distance": journey.distance,
            "changes": journey.changes,
            "text": journey.text.strip(),
        }
        for journey in journeys
    ]
    return json.dumps(journeys_data, ensure_ascii=False, indent=2)


def format_routes_table(routes: list[RouteRecord], title: str = "Routes") -> None:
    """Display routes with their end stations and length."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Route", style="cyan", no_wrap=True)
    table.add_column("From", style="green")
    table.add_column("To", style="green")
    table.add_column("Stops", style="yellow")
    table.add_column("Distance", style="blue")

    for route in routes:
        table.add_row(
            route.name,
            route.stops[0].station_name if route.stops else "N/A",
            route.stops[-1].station_name if route.stops else "N/A",
            str(len(route.stops)),
            format_distance(route_distance(route)),
        )

    console.print(table)


def format_network_graph(network: Network) -> None:
    """Display every station of the network with its links."""
    console.print("[bold]Railway Network Graph:[/bold]")
    for station in network:
        table = Table(
            title=f"Station: {station.name} (ID: {station.station_id})",
            show_header=True,
            header_style="bold blue",
        )
        table.add_column("To", style="cyan")
        table.add_column("ID", style="dim")
        table.add_column("Distance", style="green")
        table.add_column("Route", style="yellow")
        for link in station.links:
            table.add_row(
                link.station.name,
                str(link.station.station_id),
                format_distance(link.distance),
                link.route_name,
            )
        console.print(table)
