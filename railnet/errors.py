"""Typed errors for the railway route finder.

Every error carries a human-readable message and, optionally, the
exception that caused it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RailnetError(Exception):
    """Base error for the railnet package.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class StationNotFoundError(RailnetError):
    """A station name does not match any station in the graph.

    Attributes:
        station_name: The name that could not be resolved
        suggestions: Close station names, best match first
    """

    station_name: str = ""
    suggestions: tuple[str, ...] = ()

    def __str__(self) -> str:
        text = super().__str__()
        if self.suggestions:
            text += f" (did you mean: {', '.join(self.suggestions)}?)"
        return text


@dataclass
class NetworkLoadError(RailnetError):
    """The network description could not be read or validated.

    Attributes:
        file_path: Path to the network file
    """

    file_path: Optional[str] = None
