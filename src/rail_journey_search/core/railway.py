"""Queries and descriptions over parsed railway data."""

from .models import RailwayData, RouteRecord, RouteSegment, StopRecord


def format_distance(distance: float) -> str:
    """Format a distance without a trailing '.0' for whole numbers."""
    return f"{distance:g}"


def segment_distance(stops: list[StopRecord], index: int) -> float:
    """Distance between stop ``index`` and the stop after it.

    Uses the later stop's distance to its predecessor, falling back to the
    earlier stop's distance to its successor.
    """
    following = stops[index + 1].distance_to_prev
    if following is not None:
        return following
    return stops[index].distance_to_next or 0


def get_network_name(data: RailwayData | None) -> str | None:
    if data is None:
        return None
    return data.network_name


def get_route_names(data: RailwayData | None) -> list[str]:
    if data is None:
        return []
    return [route.name for route in data.routes]


def route_names_to_string(data: RailwayData | None) -> str:
    return ",\n".join(get_route_names(data))


def get_route(data: RailwayData | None, route_name: str) -> RouteRecord | None:
    """Get a route by name, first match."""
    if data is None:
        return None
    for route in data.routes:
        if route.name == route_name:
            return route
    return None


def route_distance(route: RouteRecord | None) -> float:
    """Total length of a route."""
    if route is None:
        return 0
    return sum(segment_distance(route.stops, i) for i in range(len(route.stops) - 1))


def route_to_string(route: RouteRecord | None) -> str | None:
    """Describe a route with the cumulative distance at each stop."""
    if route is None:
        return None

    lines = [f"ROUTE: {route.name} ({route.color or 'N/A'})", "STATIONS:"]
    distance: float = 0
    for i, stop in enumerate(route.stops):
        if i > 0:
            distance += segment_distance(route.stops, i - 1)
        number = stop.stop if stop.stop is not None else i + 1
        lines.append(f"{number} {stop.station_name} {format_distance(distance)} miles")
    lines.append(f"Total Route Distance: {format_distance(distance)} miles")
    return "\n".join(lines)


def route_summary(data: RailwayData | None) -> str | None:
    """One line per route: name, end stations and length."""
    if data is None:
        return None

    result = "Routes Summary\n==============\n"
    for route in data.routes:
        first_stop = route.stops[0].station_name if route.stops else "N/A"
        last_stop = route.stops[-1].station_name if route.stops else "N/A"
        result += (
            f"{route.name:<25}- {first_stop:<15} to {last_stop:<15} -  "
            f"{format_distance(route_distance(route))} miles\n"
        )
    return result


def sort_routes_by_name(data: RailwayData, ascending: bool = True) -> list[RouteRecord]:
    """Routes ordered by name, ignoring case."""
    return sorted(data.routes, key=lambda r: r.name.upper(), reverse=not ascending)


def sort_routes_by_length(
    data: RailwayData, ascending: bool = True
) -> list[RouteRecord]:
    """Routes ordered by total distance."""
    return sorted(data.routes, key=route_distance, reverse=not ascending)


def find_longest_route(data: RailwayData | None) -> RouteRecord | None:
    """The route with the greatest total distance, first one on ties."""
    if data is None or not data.routes:
        return None
    return max(data.routes, key=route_distance)


def total_stations(data: RailwayData | None) -> int:
    """Number of unique station names across all routes."""
    if data is None:
        return 0
    return len({stop.station_name for route in data.routes for stop in route.stops})


def find_route(
    data: RailwayData | None, origin: str, destination: str
) -> RouteSegment | None:
    """Find a single route serving both stations.

    When several routes serve both, the last one in the data wins.
    """
    if data is None:
        return None

    result = None
    for route in data.routes:
        names = [stop.station_name for stop in route.stops]
        if origin not in names or destination not in names:
            continue

        # Last occurrence of each name on the route
        from_index = len(names) - 1 - names[::-1].index(origin)
        to_index = len(names) - 1 - names[::-1].index(destination)
        start, end = sorted((from_index, to_index))
        result = RouteSegment(
            route_name=route.name,
            from_station=origin,
            to_station=destination,
            stops_count=end - start,
            distance=sum(segment_distance(route.stops, i) for i in range(start, end)),
        )
    return result
