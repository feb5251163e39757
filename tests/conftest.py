"""Test configuration and fixtures."""

import json

import pytest

from rail_journey_search.core.models import RailwayData
from rail_journey_search.core.network import build_network

ENV_VARS = [
    "RAIL_JOURNEY_NETWORK_FILE",
    "RAIL_JOURNEY_MAX_RESULTS",
    "RAIL_JOURNEY_MAX_TRANSFERS",
    "RAIL_JOURNEY_OUTPUT_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove RAIL_JOURNEY_* variables from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_stop(station_id, name, distance_to_prev=None, stop=None):
    """Build a stop mapping the way network files spell it."""
    record = {"stationID": station_id, "stationName": name}
    if distance_to_prev is not None:
        record["distanceToPrev"] = distance_to_prev
    if stop is not None:
        record["stop"] = stop
    return record


@pytest.fixture
def sample_network_data():
    """Three routes sharing Central, Market, University and Harbour.

    Red:   Central -5- Market -7- Harbour
    Blue:  University -4- Market -3- Stadium -6- Harbour
    Green: Central -8- University
    """
    return {
        "networkName": "Notional Railway",
        "routes": [
            {
                "name": "Red Line",
                "color": "red",
                "stops": [
                    make_stop(1, "Central", 0, stop=1),
                    make_stop(2, "Market", 5, stop=2),
                    make_stop(3, "Harbour", 7, stop=3),
                ],
            },
            {
                "name": "Blue Line",
                "color": "blue",
                "stops": [
                    make_stop(4, "University", 0, stop=1),
                    make_stop(2, "Market", 4, stop=2),
                    make_stop(5, "Stadium", 3, stop=3),
                    make_stop(3, "Harbour", 6, stop=4),
                ],
            },
            {
                "name": "Green Line",
                "color": "green",
                "stops": [
                    make_stop(1, "Central", 0, stop=1),
                    make_stop(4, "University", 8, stop=2),
                ],
            },
        ],
    }


@pytest.fixture
def railway_data(sample_network_data):
    """Validated sample railway data."""
    return RailwayData.model_validate(sample_network_data)


@pytest.fixture
def sample_network(railway_data):
    """Station graph of the sample railway data."""
    return build_network(railway_data)


@pytest.fixture
def network_file(tmp_path, sample_network_data):
    """Sample railway data written to a JSON file."""
    path = tmp_path / "network.json"
    path.write_text(json.dumps(sample_network_data), encoding="utf-8")
    return path
