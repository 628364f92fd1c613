from __future__ import annotations

import os

LOG_LEVEL_ENV_VAR = "CAR_QUERIES_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_log_level(value: str, source: str = "log level") -> str:
    level = value.strip().upper()

    if level not in VALID_LOG_LEVELS:
        raise RuntimeError(
            f"{source} must be one of {', '.join(VALID_LOG_LEVELS)}, got {level!r}"
        )

    return level


def log_level() -> str:
    return parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL), LOG_LEVEL_ENV_VAR)
