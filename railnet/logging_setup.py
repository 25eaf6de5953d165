"""Logging setup for the command line."""

import logging

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING", log_format: str = DEFAULT_FORMAT) -> None:
    """
    Configure the root logger to write to stderr.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...)
        log_format: Format string for log records

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        datefmt=DATE_FORMAT,
        force=True,
    )
