"""Tests for network module."""

import json

import pytest

from railnet.errors import NetworkLoadError
from railnet.network.loader import load_network
from railnet.network.models import RailwayNetwork, Stop
from railnet.network.summary import (
    find_longest_route,
    format_distance,
    get_network_name,
    get_route,
    get_route_names,
    get_routes,
    route_distance,
    route_names_to_string,
    route_summary,
    route_to_string,
    sort_routes_by_length,
    sort_routes_by_name,
    total_stations,
)

NETWORK_JSON = {
    "networkName": "Two Lines",
    "routes": [
        {
            "name": "Red",
            "stops": [
                {"stop": 1, "stationName": "S1", "stationID": 1, "distanceToNext": 10, "distanceToPrev": 0},
                {"stop": 2, "stationName": "S2", "stationID": 2, "distanceToNext": 5, "distanceToPrev": 10},
                {"stop": 3, "stationName": "S3", "stationID": 3, "distanceToPrev": 5},
            ],
        },
        {
            "name": "Blue",
            "stops": [
                {"stop": 1, "stationName": "S4", "stationID": 4, "distanceToNext": 7, "distanceToPrev": 0},
                {"stop": 2, "stationName": "S2", "stationID": 2, "distanceToNext": 3, "distanceToPrev": 7},
                {"stop": 3, "stationName": "S5", "stationID": 5, "distanceToPrev": 3},
            ],
        },
    ],
}


class TestModels:
    """Tests for the pydantic network models."""

    def test_camel_case_keys(self):
        network = RailwayNetwork.model_validate(NETWORK_JSON)
        assert network.network_name == "Two Lines"
        stop = network.routes[0].stops[0]
        assert (stop.station_id, stop.station_name, stop.distance_to_next) == (1, "S1", 10)

    def test_stop_needs_a_distance(self):
        with pytest.raises(ValueError):
            Stop(stop=1, station_name="A", station_id=1)

    def test_negative_distance_rejected(self):
        with pytest.raises(ValueError):
            Stop(stop=1, station_name="A", station_id=1, distance_to_next=-2)

    def test_last_stop_only_needs_previous_distance(self):
        stop = Stop(stop=3, station_name="C", station_id=3, distance_to_prev=4)
        assert stop.distance_to_next is None


class TestLoader:
    """Tests for load_network."""

    def test_load_valid_file(self, tmp_path):
        path = tmp_path / "network.json"
        path.write_text(json.dumps(NETWORK_JSON), encoding="utf-8")
        network = load_network(path)
        assert get_route_names(network) == ["Red", "Blue"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(NetworkLoadError) as excinfo:
            load_network(tmp_path / "absent.json")
        assert isinstance(excinfo.value.cause, FileNotFoundError)
        assert excinfo.value.file_path.endswith("absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(NetworkLoadError):
            load_network(path)

    def test_missing_fields(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"networkName": "No routes"}), encoding="utf-8")
        with pytest.raises(NetworkLoadError):
            load_network(path)


class TestSummary:
    """Tests for the descriptive helpers."""

    @pytest.fixture
    def network(self):
        return RailwayNetwork.model_validate(NETWORK_JSON)

    def test_names(self, network):
        assert get_network_name(network) == "Two Lines"
        assert len(get_routes(network)) == 2
        assert route_names_to_string(network) == "Red,\nBlue"

    def test_get_route(self, network):
        assert get_route(network, "Blue").name == "Blue"
        assert get_route(network, "Green") is None

    def test_route_distance(self, network):
        assert route_distance(get_route(network, "Red")) == 15

    def test_route_to_string(self, network):
        assert route_to_string(get_route(network, "Red")) == (
            "ROUTE: Red\n"
            "STATIONS:\n"
            "1 S1 0 miles\n"
            "2 S2 10 miles\n"
            "3 S3 15 miles\n"
            "Total Route Distance: 15"
        )

    def test_route_summary_columns(self, network):
        lines = route_summary(network).splitlines()
        assert lines[:2] == ["Routes Summary", "========"]
        row = lines[2]
        assert row.startswith("Red ")
        assert row[25] == "-"
        assert row[35:37] == "S1"
        assert row[50:52] == "to"
        assert row[60:62] == "S3"
        assert row[75] == "-"
        assert row[80:] == "15 miles"

    def test_total_stations_counts_shared_once(self, network):
        assert total_stations(network) == 5

    def test_longest_route(self, network):
        assert find_longest_route(network).name == "Red"

    def test_longest_route_of_empty_network(self):
        with pytest.raises(ValueError):
            find_longest_route(RailwayNetwork(network_name="Empty", routes=[]))

    def test_sort_by_name(self, network):
        assert [r.name for r in sort_routes_by_name(network)] == ["Red", "Blue"]
        assert [r.name for r in sort_routes_by_name(network, ascending=True)] == ["Blue", "Red"]
        # The network itself keeps file order
        assert get_route_names(network) == ["Red", "Blue"]

    def test_sort_by_length(self, network):
        assert [r.name for r in sort_routes_by_length(network)] == ["Red", "Blue"]
        assert [r.name for r in sort_routes_by_length(network, ascending=True)] == ["Blue", "Red"]

    def test_format_distance(self):
        assert format_distance(12.0) == "12"
        assert format_distance(12.5) == "12.5"
