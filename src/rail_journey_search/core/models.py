"""Data models for railway journey search."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import DataFormatError


class StopRecord(BaseModel):
    """A single stop of a route as read from a network file."""

    model_config = ConfigDict(populate_by_name=True)

    stop: int | None = Field(None, description="Position of the stop on its route")
    station_id: int = Field(..., alias="stationID", description="Unique station id")
    station_name: str = Field(..., alias="stationName", description="Station name")
    distance_to_prev: float | None = Field(
        None, alias="distanceToPrev", description="Distance from the previous stop"
    )
    distance_to_next: float | None = Field(
        None, alias="distanceToNext", description="Distance to the next stop"
    )

    def __str__(self) -> str:
        return self.station_name


class RouteRecord(BaseModel):
    """A named, ordered sequence of stops."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Route name")
    color: str | None = Field(None, description="Route colour")
    stops: list[StopRecord] = Field(..., description="Stops in travel order")

    def __str__(self) -> str:
        return self.name


class RailwayData(BaseModel):
    """A parsed railway network description."""

    model_config = ConfigDict(populate_by_name=True)

    network_name: str | None = Field(
        None, alias="networkName", description="Railway network name"
    )
    routes: list[RouteRecord] = Field(default_factory=list, description="Routes")


@dataclass(eq=False)
class Station:
    """A node of the network graph.

    Stations are compared by identity: two stations sharing a name are still
    distinct entities.
    """

    station_id: int
    name: str
    links: list["Link"] = field(default_factory=list, repr=False)

    def add_link(self, link: "Link") -> None:
        """Attach an outgoing link to this station."""
        self.links.append(link)

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class Link:
    """A directed, route-labelled edge towards a neighbouring station."""

    route_name: str
    station: Station = field(repr=False)
    distance: float = 0

    def __str__(self) -> str:
        return f"{self.station.name} ({self.route_name}, {self.distance:g})"


@dataclass
class Network:
    """The station graph built from route data."""

    stations: list[Station] = field(default_factory=list)
    _index: dict[int, Station] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        existing = self.stations
        self.stations = []
        for station in existing:
            self.add_station(station)

    def add_station(self, station: Station) -> Station:
        """Add a station, rejecting duplicate ids."""
        if station.station_id in self._index:
            raise DataFormatError(f"Duplicate station id: {station.station_id}")
        self.stations.append(station)
        self._index[station.station_id] = station
        return station

    def get_station(self, station_id: int) -> Station | None:
        """Get a station by id."""
        return self._index.get(station_id)

    def find_station(self, name: str) -> Station | None:
        """Find a station by name.

        Returns the first station created with that name, or None.
        """
        for station in self.stations:
            if station.name == name:
                return station
        return None

    @property
    def link_count(self) -> int:
        """Total number of directed links in the network."""
        return sum(len(station.links) for station in self.stations)

    def __len__(self) -> int:
        return len(self.stations)

    def __iter__(self) -> Iterator[Station]:
        return iter(self.stations)


class JourneyStop(BaseModel):
    """A visited station and the distance travelled from the previous stop."""

    name: str = Field(..., description="Station name")
    distance: float = Field(0, description="Distance from the previous stop")

    def __str__(self) -> str:
        return self.name


class Journey(BaseModel):
    """A candidate or completed path through the network."""

    stations: list[JourneyStop] = Field(
        default_factory=list, description="Visited stops in order"
    )
    distance: float = Field(0, description="Cumulative distance")
    text: str = Field("", description="Narrative of embarkation and changes")
    success: bool = Field(False, description="Whether the destination was reached")
    changes: int = Field(0, description="Number of route changes")

    def clone(self) -> "Journey":
        """Return an independent copy of this journey."""
        return self.model_copy(deep=True)

    def add_stop(self, name: str, distance: float) -> None:
        """Record the next stop and add its distance to the total."""
        self.stations.append(JourneyStop(name=name, distance=distance))
        self.distance += distance

    def has_visited(self, name: str) -> bool:
        return any(stop.name == name for stop in self.stations)

    @property
    def station_names(self) -> list[str]:
        return [stop.name for stop in self.stations]

    @property
    def hops(self) -> int:
        """Number of links travelled."""
        return max(len(self.stations) - 1, 0)

    @property
    def arrival(self) -> str | None:
        """Name of the last recorded stop."""
        return self.stations[-1].name if self.stations else None

    def __str__(self) -> str:
        return " → ".join(self.station_names)


class RouteSegment(BaseModel):
    """A stretch of a single route between two of its stations."""

    route_name: str = Field(..., description="Route name")
    from_station: str = Field(..., description="Starting station")
    to_station: str = Field(..., description="Ending station")
    stops_count: int = Field(..., description="Number of stops between the two")
    distance: float = Field(..., description="Distance between the two")

    def __str__(self) -> str:
        return (
            f"Found: {self.route_name}: {self.from_station} to {self.to_station}, "
            f"{self.stops_count} stops and {self.distance:g} miles."
        )
