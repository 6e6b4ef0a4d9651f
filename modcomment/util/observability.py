"""Logfire setup for the comment service.

Every RPC call is traced by the FastAPI instrumentation, every SQL
statement by the SQLAlchemy instrumentation, and each use case adds its own
span and outcome record (see ``BaseUseCase.observe``).
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from modcomment.config import Settings

SERVICE_NAME = "modcomment"

# Load balancer probes would drown out the RPC traces
_UNTRACED_URLS = "/health"


def _send_to_logfire(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is present."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created.

    Console output is always on; records reach Logfire cloud only when
    OBSERVABILITY__LOGFIRE_TOKEN is set or OBSERVABILITY__SEND_TO_LOGFIRE
    is true.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _rpc_attributes(request, attributes):
    """Tag request spans with the RPC method taken from the path."""
    service, _, method = request.url.path.strip("/").partition("/")
    if method:
        return {**attributes, "rpc.service": service, "rpc.method": method}
    return attributes


def instrument_fastapi(app: FastAPI) -> None:
    """Trace RPC calls with their duration, status and method name."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_rpc_attributes,
        excluded_urls=_UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued through the engine's pool."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
