"""Load a railway network description from a JSON file."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..errors import NetworkLoadError
from .models import RailwayNetwork

logger = logging.getLogger(__name__)


def load_network(filepath: str | Path) -> RailwayNetwork:
    """
    Read and validate a network description.

    Args:
        filepath: Path to the JSON file

    Returns:
        The validated RailwayNetwork

    Raises:
        NetworkLoadError: If the file cannot be read, is not valid JSON or
            does not describe a network
    """
    filepath = Path(filepath)
    logger.debug("Loading network", extra={"file_path": str(filepath)})

    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        network = RailwayNetwork.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise NetworkLoadError(
            f"Failed to load network from {filepath}",
            file_path=str(filepath),
            cause=e,
        ) from e

    logger.info(
        "Network loaded",
        extra={"network": network.network_name, "routes": len(network.routes)},
    )
    return network
