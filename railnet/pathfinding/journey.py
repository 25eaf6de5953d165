"""Per-path search state."""

from dataclasses import dataclass, field

from ..network.summary import format_distance
from .graph import Station


@dataclass
class Journey:
    """
    One path through the network, in progress or complete.

    Journeys are copied at every branch of the search, so extending a copy
    never affects the journey it was copied from.

    ``changes`` starts at -1: boarding the first route brings it to 0, and
    every later change of route adds one.
    """

    stations: list[Station] = field(default_factory=list)
    distance: float = 0.0
    text: str = ""
    success: bool = False
    changes: int = -1

    def copy(self) -> "Journey":
        """Independent copy (new station list, same scalar values)."""
        return Journey(
            stations=list(self.stations),
            distance=self.distance,
            text=self.text,
            success=self.success,
            changes=self.changes,
        )

    def add_station(self, station: Station) -> None:
        self.stations.append(station)

    def add_distance(self, amount: float) -> None:
        """
        Add travelled distance.

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Distance must be non-negative, got {amount}")
        self.distance += amount

    def visits(self, station: Station) -> bool:
        """Check whether the journey already passes through a station."""
        return station in self.stations

    @property
    def origin(self) -> Station | None:
        return self.stations[0] if self.stations else None

    @property
    def current(self) -> Station | None:
        """Last station reached."""
        return self.stations[-1] if self.stations else None

    @property
    def station_names(self) -> list[str]:
        return [station.name for station in self.stations]

    def report(self) -> str:
        """Narrative followed by distance, changes and stations passed."""
        return (
            f"{self.text}"
            f"Total distance: {format_distance(self.distance)}\n"
            f"Changes: {self.changes}\n"
            f"Passing through: {', '.join(self.station_names)}\n"
        )

    def __len__(self) -> int:
        """Return number of stations visited."""
        return len(self.stations)
