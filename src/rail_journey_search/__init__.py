"""Railway Journey Search Package

A Python package for building a station graph from railway route data and
finding the best journeys between two stations, with CLI and MCP server
capabilities.
"""

__version__ = "0.1.0"

from .core.journey import JourneySearch, find_best_journeys
from .core.models import Journey, Link, Network, Station
from .core.network import build_network

__all__ = [
    "Journey",
    "JourneySearch",
    "Link",
    "Network",
    "Station",
    "build_network",
    "find_best_journeys",
]
