"""Railway journey planner.

Builds a graph from a network of routes and lists every journey between
two stations, ranked by number of route changes and then by distance.
"""

from .errors import NetworkLoadError, RailnetError, StationNotFoundError
from .network import RailwayNetwork, load_network
from .pathfinding import Journey, RailwayGraph, RouteFinder, build_graph, find_routes

__all__ = [
    "RailwayNetwork",
    "RailwayGraph",
    "Journey",
    "RouteFinder",
    "load_network",
    "build_graph",
    "find_routes",
    "RailnetError",
    "NetworkLoadError",
    "StationNotFoundError",
]
