from __future__ import annotations

import logging

from car_queries.infra.config import log_level, parse_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> int:
    """
    Configure root logging for the package (idempotent).

    Args:
        level: Level name; defaults to CAR_QUERIES_LOG_LEVEL (see infra.config)

    Returns:
        The numeric level that was applied

    Raises:
        RuntimeError: If the level is not one of config.VALID_LOG_LEVELS
    """
    name = parse_log_level(level) if level is not None else log_level()
    numeric_level = logging.getLevelNamesMapping()[name]

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("car_queries").setLevel(numeric_level)

    return numeric_level
