"""Stdlib logging configuration.

Board code reports through logfire; this module only sets levels for
plain ``logging`` records (mostly from third-party libraries) and
forwards them to logfire so they land next to the spans.
"""

import logging

import logfire

from board.config import Settings

# Libraries that log per statement/command at INFO and below
NOISY_LOGGERS = ("sqlalchemy.engine", "redis", "asyncio", "aiosqlite")


def log_level_for(settings: Settings) -> int:
    """Pick the root log level for an environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into logfire at an environment-dependent level.

    Args:
        settings: Application settings
    """
    level = log_level_for(settings)

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by imported libraries
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
