"""Shared fixtures: small in-memory networks."""

import pytest

from railnet.config import reset_config
from railnet.network.models import RailwayNetwork, Route, Stop


def make_network(name: str, routes: dict[str, list[tuple]]) -> RailwayNetwork:
    """
    Build a network from ``{route name: [(station id, station name, distance to next), ...]}``.

    The last stop of a route may use None as its distance to next.
    """
    built = []
    for route_name, stops in routes.items():
        previous_distance = 0
        route_stops = []
        for number, (station_id, station_name, distance) in enumerate(stops, start=1):
            route_stops.append(
                Stop(
                    stop=number,
                    station_name=station_name,
                    station_id=station_id,
                    distance_to_next=distance,
                    distance_to_prev=previous_distance,
                )
            )
            previous_distance = distance or 0
        built.append(Route(name=route_name, stops=route_stops))
    return RailwayNetwork(network_name=name, routes=built)


@pytest.fixture
def network_factory():
    return make_network


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def red_blue_network():
    # Red: S1 -10- S2 -5- S3, Blue: S4 -7- S2 -3- S5
    return make_network(
        "Red and Blue",
        {
            "Red": [(1, "S1", 10), (2, "S2", 5), (3, "S3", None)],
            "Blue": [(4, "S4", 7), (2, "S2", 3), (5, "S5", None)],
        },
    )


@pytest.fixture
def grid_network():
    # A -- B -- C -- D
    # |    |    |
    # E -- F -- G
    return make_network(
        "Grid",
        {
            "Top": [(1, "A", 100), (2, "B", 100), (3, "C", 100), (4, "D", None)],
            "Bottom": [(5, "E", 90), (6, "F", 90), (7, "G", None)],
            "West": [(1, "A", 50), (5, "E", None)],
            "Middle": [(2, "B", 40), (6, "F", None)],
            "East": [(3, "C", 30), (7, "G", None)],
        },
    )


@pytest.fixture
def branching_network():
    # Two lines serve B -- C, and Express runs A -- C directly
    return make_network(
        "Branching",
        {
            "Local": [(1, "A", 5), (2, "B", 5), (3, "C", None)],
            "Express": [(1, "A", 20), (3, "C", None)],
            "Shuttle": [(2, "B", 1), (3, "C", None)],
        },
    )
