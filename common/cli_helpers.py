"""Shared CLI utilities for consistent logging setup."""

from __future__ import annotations

import logging
import sys

from common.exceptions import ValidationError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def validate_log_level(level: str) -> str:
    """Normalize a log level name.

    Args:
        level: Level name in any case

    Returns:
        Upper-cased level name

    Raises:
        ValidationError: If the name is not one of LOG_LEVELS
    """
    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ValidationError(
            f"Invalid log level '{level}'. Choose from: {', '.join(LOG_LEVELS)}"
        )
    return normalized


def setup_logging(level: str) -> None:
    """Configure logging with consistent format.

    Log records go to stderr; stdout is left for command output.

    Args:
        level: Logging level (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    """
    logging.basicConfig(
        level=getattr(logging, validate_log_level(level)),
        format="%(message)s",
        stream=sys.stderr,
    )
