"""Logfire setup and instrumentation for the board core.

Every service operation opens a span named ``<component>.<operation>``
(e.g. ``post_service.find_page``) and reports outcomes with
``logfire.info`` / ``logfire.warn``. The helpers below wire the exporters
and the automatic instrumentation of the two stores.
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from board.config import Settings

SERVICE_NAME = "board-core"
SERVICE_VERSION = "0.1.0"


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``OBSERVABILITY__SEND_TO_LOGFIRE`` wins; otherwise sending is
    enabled exactly when a token is configured.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire exporters and console output.

    Args:
        settings: Application settings
    """
    send = should_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="indented" if settings.debug else "simple",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement issued through the relational store engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)


def instrument_redis() -> None:
    """Trace every command sent to the like counter store."""
    logfire.instrument_redis()
    logfire.info("Redis instrumented")
