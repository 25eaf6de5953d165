"""Railway graph construction from route data."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import networkx as nx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Station:
    """A station (graph node), shared by every route that calls there."""

    station_id: int
    name: str


@dataclass(frozen=True)
class Link:
    """A directed, route-labeled connection to a neighbouring station."""

    route: str
    station: Station
    station_name: str
    distance: float


class RailwayGraph:
    """
    Graph representation of a railway network.

    Nodes are station ids carrying their Station, edges are directed links
    labeled with the route they belong to and weighted by distance. Every
    connection is stored once in each direction, so the network is
    logically undirected. Parallel edges are kept: two routes serving the
    same pair of stations give two links each way.
    """

    def __init__(self):
        """Initialize empty graph."""
        self.graph = nx.MultiDiGraph()

    def add_station(self, station_id: int, name: str) -> Station:
        """
        Return the station with this id, creating it on first sight.

        The name given on first sight is kept.
        """
        if station_id in self.graph:
            return self.graph.nodes[station_id]["station"]
        station = Station(station_id=station_id, name=name)
        self.graph.add_node(station_id, station=station)
        return station

    def add_connection(
        self, station1: Station, station2: Station, route: str, distance: float
    ) -> None:
        """Link two stations in both directions on the given route."""
        # ``order`` records insertion across neighbours; out_edges groups by neighbour
        order = self.graph.number_of_edges()
        self.graph.add_edge(
            station1.station_id, station2.station_id, route=route, distance=distance, order=order
        )
        self.graph.add_edge(
            station2.station_id, station1.station_id, route=route, distance=distance, order=order + 1
        )

    def load_routes(self, routes: Iterable) -> None:
        """
        Add stations and links for every route.

        Each route needs a ``name`` and ordered ``stops``; each stop needs
        ``station_id``, ``station_name`` and ``distance_to_next``. Adjacent
        stops are linked both ways, weighted by the first stop's distance
        to the next. A missing distance counts as zero.
        """
        for route in routes:
            previous = None
            distance_to_next = None
            for stop in route.stops:
                current = self.add_station(stop.station_id, stop.station_name)
                if previous is not None and current != previous:
                    if distance_to_next is None:
                        logger.warning(
                            "Missing distance, using 0",
                            extra={"route": route.name, "station": previous.name},
                        )
                        distance_to_next = 0.0
                    self.add_connection(previous, current, route.name, distance_to_next)
                previous = current
                distance_to_next = stop.distance_to_next

        logger.debug(
            "Graph built",
            extra={"stations": len(self), "links": self.graph.number_of_edges()},
        )

    @property
    def stations(self) -> list[Station]:
        """All stations, in the order they were first seen."""
        return [data["station"] for _, data in self.graph.nodes(data=True)]

    def get_station(self, station_id: int) -> Station | None:
        """Get a station by id."""
        if station_id not in self.graph:
            return None
        return self.graph.nodes[station_id]["station"]

    def has_station(self, station: Station) -> bool:
        """Check if a station belongs to the graph."""
        return self.get_station(station.station_id) == station

    def find_station(self, name: str) -> Station | None:
        """First station whose display name is exactly ``name``."""
        for station in self.stations:
            if station.name == name:
                return station
        return None

    def links(self, station: Station) -> list[Link]:
        """Outgoing links of a station, in the order they were added."""
        if station.station_id not in self.graph:
            return []
        edges = sorted(
            self.graph.out_edges(station.station_id, data=True),
            key=lambda edge: edge[2]["order"],
        )
        links = []
        for _, target_id, data in edges:
            target = self.graph.nodes[target_id]["station"]
            links.append(
                Link(
                    route=data["route"],
                    station=target,
                    station_name=target.name,
                    distance=data["distance"],
                )
            )
        return links

    def is_reachable(self, origin: Station, destination: Station) -> bool:
        """Check whether any path leads from origin to destination."""
        if origin.station_id not in self.graph or destination.station_id not in self.graph:
            return False
        return nx.has_path(self.graph, origin.station_id, destination.station_id)

    def __len__(self) -> int:
        """Return number of stations."""
        return len(self.graph)


def build_graph(network) -> RailwayGraph:
    """
    Build a railway graph from a network or a sequence of routes.

    Args:
        network: Object with a ``routes`` attribute (e.g. RailwayNetwork),
            or an iterable of routes

    Returns:
        The populated RailwayGraph
    """
    routes = getattr(network, "routes", network)
    graph = RailwayGraph()
    graph.load_routes(routes)
    return graph
