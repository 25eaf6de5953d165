"""Descriptive helpers over a railway network.

None of these functions modify the network they are given.
"""

from .models import RailwayNetwork, Route


def format_distance(distance: float) -> str:
    """Format a distance without a trailing '.0' for whole numbers."""
    if float(distance).is_integer():
        return str(int(distance))
    return str(round(distance, 2))


def get_network_name(network: RailwayNetwork) -> str:
    """Name of the network."""
    return network.network_name


def get_routes(network: RailwayNetwork) -> list[Route]:
    """Routes of the network, in file order."""
    return list(network.routes)


def get_route_names(network: RailwayNetwork) -> list[str]:
    """Names of all routes, in file order."""
    return [route.name for route in network.routes]


def route_names_to_string(network: RailwayNetwork) -> str:
    """Route names, one per line, comma separated."""
    return ",\n".join(get_route_names(network))


def get_route(network: RailwayNetwork, name: str) -> Route | None:
    """Find a route by exact name, or None."""
    for route in network.routes:
        if route.name == name:
            return route
    return None


def route_distance(route: Route) -> float:
    """Total length of a route (a missing distance counts as zero)."""
    return sum(stop.distance_to_next or 0 for stop in route.stops)


def route_to_string(route: Route) -> str:
    """
    Describe a route stop by stop.

    Example:
        ROUTE: Red
        STATIONS:
        1 Alpha 0 miles
        2 Bravo 10 miles
        Total Route Distance: 10
    """
    lines = [f"ROUTE: {route.name}", "STATIONS:"]
    running = 0.0
    for stop in route.stops:
        lines.append(f"{stop.stop} {stop.station_name} {format_distance(running)} miles")
        running += stop.distance_to_next or 0
    lines.append(f"Total Route Distance: {format_distance(running)}")
    return "\n".join(lines)


def route_summary(network: RailwayNetwork) -> str:
    """One padded row per route: name, end stations and length."""
    text = "Routes Summary\n========\n"
    for route in network.routes:
        row = route.name.ljust(25) + "-"
        row = row.ljust(35) + (route.stops[0].station_name if route.stops else "")
        row = row.ljust(50) + "to"
        row = row.ljust(60) + (route.stops[-1].station_name if route.stops else "")
        row = row.ljust(75) + "-"
        row = row.ljust(80) + f"{format_distance(route_distance(route))} miles\n"
        text += row
    return text


def total_stations(network: RailwayNetwork) -> int:
    """Number of unique stations across all routes."""
    return len({stop.station_id for route in network.routes for stop in route.stops})


def find_longest_route(network: RailwayNetwork) -> Route:
    """
    Route with the greatest total distance.

    Raises:
        ValueError: If the network has no routes
    """
    if not network.routes:
        raise ValueError(f"Network {network.network_name!r} has no routes")
    return max(network.routes, key=route_distance)


def sort_routes_by_name(network: RailwayNetwork, ascending: bool = False) -> list[Route]:
    """Routes sorted by name, Z-A unless ascending is set."""
    return sorted(network.routes, key=lambda route: route.name, reverse=not ascending)


def sort_routes_by_length(network: RailwayNetwork, ascending: bool = False) -> list[Route]:
    """Routes sorted by total distance, longest first unless ascending is set."""
    return sorted(network.routes, key=route_distance, reverse=not ascending)
