"""Resolve station names typed by a user to graph stations."""

import unicodedata

from rapidfuzz import fuzz, process

from ..errors import StationNotFoundError
from .graph import RailwayGraph, Station


def normalize_station_name(name: str) -> str:
    """
    Normalize a station name for fuzzy matching.

    Lowercases, removes accents, turns hyphens and apostrophes into
    spaces and collapses whitespace.

    Examples:
        "King's Cross" -> "king s cross"
        "Saint-Étienne" -> "saint etienne"
    """
    name = unicodedata.normalize("NFKD", name.lower())
    name = "".join(c for c in name if not unicodedata.combining(c))
    name = name.replace("-", " ").replace("'", " ")
    return " ".join(name.split())


def suggest_stations(
    name: str,
    graph: RailwayGraph,
    threshold: int = 70,
    limit: int = 3,
) -> list[str]:
    """
    Find station names close to ``name``.

    Args:
        name: Name that failed to resolve (possibly misspelt)
        graph: Graph to search
        threshold: Minimum similarity score (0-100)
        limit: Maximum number of suggestions

    Returns:
        Station names, best match first
    """
    if not name:
        return []

    normalized_to_original = {}
    for station in graph.stations:
        normalized_to_original.setdefault(normalize_station_name(station.name), station.name)

    results = process.extract(
        normalize_station_name(name),
        list(normalized_to_original),
        scorer=fuzz.ratio,
        limit=limit,
        score_cutoff=threshold,
    )
    return [normalized_to_original[match] for match, _score, _idx in results]


def resolve_station(graph: RailwayGraph, name: str) -> Station:
    """
    Find the station called ``name``.

    Raises:
        StationNotFoundError: If no station has that exact name
    """
    station = graph.find_station(name)
    if station is None:
        raise StationNotFoundError(
            f"Station not found on this network: {name}",
            station_name=name,
            suggestions=tuple(suggest_stations(name, graph)),
        )
    return station


def resolve_stations(
    graph: RailwayGraph, origin_name: str, destination_name: str
) -> tuple[Station, Station]:
    """
    Resolve origin and destination names.

    Both names are looked up independently, so they may be the same.

    Raises:
        StationNotFoundError: For the first name that does not resolve
    """
    return resolve_station(graph, origin_name), resolve_station(graph, destination_name)
