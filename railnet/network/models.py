"""Pydantic models for the JSON network description.

The file uses camelCase keys (``stationName``, ``distanceToNext``); the
models expose them as snake_case attributes and accept either form.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Stop(BaseModel):
    """One stop of a route."""

    model_config = ConfigDict(populate_by_name=True)

    stop: int
    station_name: str = Field(alias="stationName")
    station_id: int = Field(alias="stationID")
    distance_to_next: Optional[float] = Field(default=None, alias="distanceToNext", ge=0)
    distance_to_prev: Optional[float] = Field(default=None, alias="distanceToPrev", ge=0)

    @model_validator(mode="after")
    def check_distance(self) -> "Stop":
        """A stop must know the distance to at least one neighbour."""
        if self.distance_to_next is None and self.distance_to_prev is None:
            raise ValueError(
                f"stop {self.stop} ({self.station_name}) needs distanceToNext "
                "or distanceToPrev"
            )
        return self


class Route(BaseModel):
    """A named, ordered sequence of stops."""

    name: str
    stops: list[Stop]


class RailwayNetwork(BaseModel):
    """A railway network: a name and its routes."""

    model_config = ConfigDict(populate_by_name=True)

    network_name: str = Field(alias="networkName")
    routes: list[Route]
