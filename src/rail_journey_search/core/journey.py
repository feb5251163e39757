"""Depth-first journey search over a station network."""

import logging

from .exceptions import StationNotFoundError, ValidationError
from .models import Journey, Link, Network, Station

logger = logging.getLogger(__name__)


class JourneySearch:
    """Enumerates every acyclic journey between two stations and ranks them."""

    def __init__(self, network: Network, max_transfers: int | None = None):
        """Initialize the search.

        Args:
            network: Network to search; it is never modified
            max_transfers: Abandon branches with more changes than this.
                None explores every branch.
        """
        if max_transfers is not None and max_transfers < 0:
            raise ValidationError("Max transfers cannot be negative")
        self.network = network
        self.max_transfers = max_transfers

    def resolve(self, origin_name: str, destination_name: str) -> tuple[Station, Station]:
        """Look up origin and destination by name (first match).

        Raises:
            StationNotFoundError: If either name is not on the network
        """
        origin = self.network.find_station(origin_name)
        destination = self.network.find_station(destination_name)

        if origin is None or destination is None:
            missing = [
                name
                for name, station in (
                    (origin_name, origin),
                    (destination_name, destination),
                )
                if station is None
            ]
            raise StationNotFoundError(missing)
        return origin, destination

    def find_best_journeys(
        self, origin_name: str, destination_name: str, max_results: int
    ) -> list[Journey]:
        """Find the best journeys between two stations.

        Journeys are ordered by number of changes, then by distance.

        Args:
            origin_name: Departure station name
            destination_name: Arrival station name
            max_results: Maximum number of journeys to return

        Returns:
            Up to max_results journeys, empty when no path exists

        Raises:
            StationNotFoundError: If either station is not on the network
            ValidationError: If max_results is not a non-negative integer
        """
        if (
            not isinstance(max_results, int)
            or isinstance(max_results, bool)
            or max_results < 0
        ):
            raise ValidationError(
                f"Max results must be a non-negative integer, got {max_results!r}"
            )

        origin, destination = self.resolve(origin_name, destination_name)

        found: list[Journey] = []
        self._explore(origin, destination, Journey(), found, None)

        found.sort(key=lambda journey: (journey.changes, journey.distance))
        logger.info(
            f"Found {len(found)} journeys from {origin.name} to {destination.name}"
        )
        return found[:max_results]

    def _explore(
        self,
        station: Station,
        destination: Station,
        journey: Journey,
        found: list[Journey],
        route_name: str | None,
    ) -> None:
        if station.name == destination.name:
            if not journey.stations:
                journey.add_stop(station.name, 0)
            journey.success = True
            found.append(journey.clone())
            logger.debug(f"Journey found: {journey}")
            return

        for link in station.links:
            # The origin is not recorded until the first hop is taken
            if link.station.name == station.name or journey.has_visited(
                link.station.name
            ):
                continue

            branch = self._extend(journey, station, link, route_name)
            if branch is None:
                continue
            self._explore(link.station, destination, branch, found, link.route_name)

    def _extend(
        self,
        journey: Journey,
        station: Station,
        link: Link,
        route_name: str | None,
    ) -> Journey | None:
        """Copy the journey and travel one link, or None if over the transfer limit."""
        branch = journey.clone()
        first_hop = not branch.stations

        if first_hop:
            branch.add_stop(station.name, 0)
            branch.text += f"Embark at {station.name} on {link.route_name}.\n"
        elif link.route_name != route_name:
            branch.changes += 1
            if self.max_transfers is not None and branch.changes > self.max_transfers:
                return None
            branch.text += f"At {station.name}, change to {link.route_name}.\n"

        branch.add_stop(link.station.name, link.distance)
        return branch


def find_best_journeys(
    network: Network,
    origin_name: str,
    destination_name: str,
    max_results: int,
    max_transfers: int | None = None,
) -> list[Journey]:
    """Find the best journeys between two named stations.

    See JourneySearch.find_best_journeys.
    """
    search = JourneySearch(network, max_transfers=max_transfers)
    return search.find_best_journeys(origin_name, destination_name, max_results)
