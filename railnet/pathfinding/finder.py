"""Exhaustive journey search over a railway graph."""

import logging
from collections.abc import Iterator
from itertools import islice

from ..config import SearchConfig, get_config
from ..errors import StationNotFoundError
from .graph import RailwayGraph, Station
from .journey import Journey
from .lookup import resolve_stations
from .ranking import rank_journeys

logger = logging.getLogger(__name__)


def describe_boarding(journey: Journey, station: Station, route: str) -> str:
    """Narrative line for taking ``route`` at ``station``."""
    if journey.text == "":
        return f"Journey Summary\n===============\nEmbark at {station.name} on {route}\n"
    return f"At {station.name} change to {route}\n"


class RouteFinder:
    """
    Find every journey between two stations that never revisits a station.

    Unlike a shortest-path search this enumerates all simple paths, so
    the ranking can weigh route changes against distance. The number of
    paths grows exponentially with the branching of the network; use
    ``SearchConfig.max_depth`` and ``SearchConfig.max_journeys`` to bound
    the search on large, densely connected networks.
    """

    def __init__(self, graph: RailwayGraph, config: SearchConfig | None = None):
        """
        Initialize the finder with a railway graph.

        Args:
            graph: RailwayGraph instance
            config: Search limits (defaults to the application config)
        """
        self.graph = graph
        self.config = config if config is not None else get_config().search

    def _check_station(self, station: Station) -> None:
        if not self.graph.has_station(station):
            raise StationNotFoundError(
                f"Station is not part of this graph: {station.name}",
                station_name=station.name,
            )

    def iter_journeys(self, origin: Station, destination: Station) -> Iterator[Journey]:
        """
        Yield completed journeys from origin to destination, depth first.

        A path stops growing once it reaches the destination or has
        visited every station of the graph. Links are explored in the
        order they were added to each station.

        Raises:
            StationNotFoundError: If origin or destination is not in the graph
        """
        self._check_station(origin)
        self._check_station(destination)

        if not self.graph.is_reachable(origin, destination):
            logger.info(
                "Destination unreachable",
                extra={"origin": origin.name, "destination": destination.name},
            )
            return

        station_count = len(self.graph)
        max_depth = self.config.max_depth

        seed = Journey()
        seed.add_station(origin)

        # (journey, current station, route used to arrive there)
        stack: list[tuple[Journey, Station, str | None]] = [(seed, origin, None)]
        while stack:
            journey, current, arrived_via = stack.pop()

            if current == destination:
                journey.success = True
                journey.text += f"Arrive at {destination.name}\n"
                yield journey

            if journey.success or len(journey) == station_count:
                continue
            if max_depth is not None and len(journey) > max_depth:
                continue

            branches = []
            for link in self.graph.links(current):
                if journey.visits(link.station):
                    continue
                branch = journey.copy()
                branch.add_station(link.station)
                branch.add_distance(link.distance)
                if link.route != arrived_via:
                    branch.text += describe_boarding(branch, current, link.route)
                    branch.changes += 1
                branches.append((branch, link.station, link.route))

            # Reversed so the first link is explored first
            stack.extend(reversed(branches))

    def enumerate_journeys(self, origin: Station, destination: Station) -> list[Journey]:
        """
        Collect every journey from origin to destination.

        Returns an empty list when the destination cannot be reached.
        Stops early, with a warning, once ``max_journeys`` are found.
        """
        journeys = self.iter_journeys(origin, destination)
        max_journeys = self.config.max_journeys
        if max_journeys is None:
            found = list(journeys)
        else:
            # One extra tells a truncated search from one that found exactly max_journeys
            found = list(islice(journeys, max_journeys + 1))
            if len(found) > max_journeys:
                found = found[:max_journeys]
                logger.warning(
                    "Journey search stopped at max_journeys",
                    extra={"max_journeys": max_journeys},
                )

        logger.debug(
            "Journeys enumerated",
            extra={
                "origin": origin.name,
                "destination": destination.name,
                "journeys": len(found),
            },
        )
        return found

    def find_routes(
        self, origin_name: str, destination_name: str, max_results: int | None = None
    ) -> list[Journey]:
        """
        Find the best journeys between two named stations.

        Args:
            origin_name: Display name of the departure station
            destination_name: Display name of the arrival station
            max_results: Number of journeys to keep (default from config)

        Returns:
            Journeys ranked by changes then distance; empty if unreachable

        Raises:
            StationNotFoundError: If either name matches no station
        """
        origin, destination = resolve_stations(self.graph, origin_name, destination_name)
        if max_results is None:
            max_results = self.config.max_results

        journeys = self.enumerate_journeys(origin, destination)
        ranked = rank_journeys(journeys, max_results)

        logger.info(
            "Routes found",
            extra={
                "origin": origin_name,
                "destination": destination_name,
                "found": len(journeys),
                "returned": len(ranked),
            },
        )
        return ranked


def find_routes(
    graph: RailwayGraph,
    origin_name: str,
    destination_name: str,
    max_results: int | None = None,
) -> list[Journey]:
    """Shortcut for ``RouteFinder(graph).find_routes(...)``."""
    return RouteFinder(graph).find_routes(origin_name, destination_name, max_results)
