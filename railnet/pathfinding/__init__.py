"""Pathfinding module for enumerating railway journeys."""

from .finder import RouteFinder, find_routes
from .graph import Link, RailwayGraph, Station, build_graph
from .journey import Journey
from .ranking import rank_journeys

__all__ = [
    "RailwayGraph",
    "Station",
    "Link",
    "Journey",
    "RouteFinder",
    "build_graph",
    "find_routes",
    "rank_journeys",
]
