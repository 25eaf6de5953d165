"""
Railway journey planner - Main entry point.

Usage:
    python -m railnet.main "London Euston" "Glasgow Central"
    python -m railnet.main Origin Destination --network data/network.json --max-results 3
    python -m railnet.main --help
"""

import argparse
import sys
from pathlib import Path

from railnet.config import get_config
from railnet.errors import NetworkLoadError, StationNotFoundError
from railnet.logging_setup import setup_logging
from railnet.network import load_network
from railnet.network.summary import get_network_name, route_summary
from railnet.pathfinding import Journey, RouteFinder, build_graph


def format_journeys(journeys: list[Journey]) -> str:
    """Number each journey and join their reports."""
    blocks = [f"Found {len(journeys)} routes.\n"]
    for i, journey in enumerate(journeys, start=1):
        blocks.append(f"{i}: \n{journey.report()}")
    return "\n".join(blocks)


def build_parser() -> argparse.ArgumentParser:
    config = get_config()
    parser = argparse.ArgumentParser(
        description="List journeys between two stations, fewest changes first"
    )
    parser.add_argument("origin", help="Departure station name")
    parser.add_argument("destination", help="Arrival station name")
    parser.add_argument(
        "--network",
        type=Path,
        default=config.network.path,
        help=f"Path to network JSON (default: {config.network.path})",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=config.search.max_results,
        help=f"Number of journeys to show (default: {config.search.max_results})",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the network's routes before searching",
    )
    parser.add_argument(
        "--log-level",
        default=config.observability.level,
        help=f"Logging level (default: {config.observability.level})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_results < 1:
        parser.error("--max-results must be at least 1")

    try:
        setup_logging(args.log_level, get_config().observability.format)
    except ValueError as e:
        parser.error(str(e))

    try:
        network = load_network(args.network)
    except NetworkLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.summary:
        print(get_network_name(network))
        print(route_summary(network))

    graph = build_graph(network)
    finder = RouteFinder(graph)

    try:
        journeys = finder.find_routes(args.origin, args.destination, args.max_results)
    except StationNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not journeys:
        print(f"No routes found between {args.origin} and {args.destination}.")
        return 0

    print(format_journeys(journeys))
    return 0


if __name__ == "__main__":
    sys.exit(main())
