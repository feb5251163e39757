"""Station graph construction from route data."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pydantic

from .exceptions import DataFormatError
from .models import Link, Network, RailwayData, RouteRecord, Station, StopRecord

logger = logging.getLogger(__name__)


def _coerce_route(route: RouteRecord | Mapping[str, Any]) -> RouteRecord:
    """Validate a plain mapping into a RouteRecord."""
    if isinstance(route, RouteRecord):
        return route
    try:
        return RouteRecord.model_validate(route)
    except pydantic.ValidationError as e:
        name = route.get("name", "<unnamed>") if isinstance(route, Mapping) else route
        raise DataFormatError(f"Invalid route {name}: {e}") from e


def _segment_distance(stop: StopRecord) -> float:
    """Distance carried by the links ending at ``stop``."""
    distance = stop.distance_to_prev
    if distance is None or distance < 0:
        return 0
    return distance


class NetworkBuilder:
    """Builds a Network from routes, one route at a time."""

    def __init__(self) -> None:
        self.network = Network()

    def add_route(self, route: RouteRecord | Mapping[str, Any]) -> None:
        """Add the stations of a route and link consecutive stops.

        A station id seen again keeps the name it was first created with.
        """
        route = _coerce_route(route)
        previous: Station | None = None

        for stop in route.stops:
            current = self.network.get_station(stop.station_id)
            if current is None:
                current = self.network.add_station(
                    Station(station_id=stop.station_id, name=stop.station_name)
                )
            elif current.name != stop.station_name:
                logger.debug(
                    f"Station {stop.station_id} listed as '{stop.station_name}' "
                    f"on {route.name}, keeping '{current.name}'"
                )

            if previous is not None:
                distance = _segment_distance(stop)
                previous.add_link(Link(route.name, current, distance))
                current.add_link(Link(route.name, previous, distance))

            previous = current

    def build(self) -> Network:
        return self.network


def build_network(
    routes: RailwayData | Iterable[RouteRecord | Mapping[str, Any]],
) -> Network:
    """Build the station graph for a set of routes.

    Args:
        routes: Parsed railway data, or its routes in input order

    Returns:
        Network holding every station and its links

    Raises:
        DataFormatError: If a route is missing its stop list
    """
    if isinstance(routes, RailwayData):
        routes = routes.routes

    builder = NetworkBuilder()
    route_count = 0
    for route in routes:
        builder.add_route(route)
        route_count += 1

    network = builder.build()
    logger.info(
        f"Built network from {route_count} routes: "
        f"{len(network)} stations, {network.link_count} links"
    )
    return network
