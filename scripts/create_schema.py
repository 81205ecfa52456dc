#!/usr/bin/env python3
"""Create the board tables with Logfire error tracking."""

import asyncio
import sys

import logfire

from board.config import Settings
from board.persistence.database import create_engine, create_schema
from board.util.logging import setup_logging
from board.util.observability import configure_logfire


async def run(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Create missing tables and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Creating board schema")
        asyncio.run(run(settings))
        logfire.info("Board schema ready")
        return 0

    except Exception as e:
        logfire.error(
            "Schema creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
