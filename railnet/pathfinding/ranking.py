"""Ordering of found journeys."""

from collections.abc import Iterable

from .journey import Journey


def journey_sort_key(journey: Journey) -> tuple[int, float]:
    """Fewest changes first, then shortest distance."""
    return (journey.changes, journey.distance)


def rank_journeys(journeys: Iterable[Journey], limit: int | None = None) -> list[Journey]:
    """
    Sort journeys by changes then distance and keep the best ``limit``.

    Args:
        journeys: Completed journeys
        limit: Maximum number to return (None keeps all)

    Returns:
        Ranked journeys

    Raises:
        ValueError: If limit is negative
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    ranked = sorted(journeys, key=journey_sort_key)
    if limit is None:
        return ranked
    return ranked[:limit]
