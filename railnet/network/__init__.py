"""Network description: models, JSON loading and route summaries."""

from .loader import load_network
from .models import RailwayNetwork, Route, Stop

__all__ = ["RailwayNetwork", "Route", "Stop", "load_network"]
