"""Core railway network and journey search functionality."""

from .config import Settings
from .exceptions import (
    DataFormatError,
    JourneySearchError,
    NetworkFileError,
    StationNotFoundError,
    ValidationError,
)
from .journey import JourneySearch, find_best_journeys
from .loader import load_network_data, parse_network_data
from .models import (
    Journey,
    JourneyStop,
    Link,
    Network,
    RailwayData,
    RouteRecord,
    RouteSegment,
    Station,
    StopRecord,
)
from .network import NetworkBuilder, build_network

__all__ = [
    "Journey",
    "JourneySearch",
    "JourneyStop",
    "Link",
    "Network",
    "NetworkBuilder",
    "RailwayData",
    "RouteRecord",
    "RouteSegment",
    "Settings",
    "Station",
    "StopRecord",
    "build_network",
    "find_best_journeys",
    "load_network_data",
    "parse_network_data",
    "JourneySearchError",
    "StationNotFoundError",
    "DataFormatError",
    "NetworkFileError",
    "ValidationError",
]
