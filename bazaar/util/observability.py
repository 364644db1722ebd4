"""Observability configuration using Logfire.

Domain services open a span around each ledger operation and emit
structured events inside it:

    with logfire.span("vote_service.cast_vote", post_id=str(post_id)):
        logfire.info("Vote recorded", post_id=str(post_id))

This module holds the process-wide setup plus the FastAPI and SQLAlchemy
integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from bazaar.config import ObservabilitySettings, Settings


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """An explicit setting wins; otherwise send only when a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the ledger service.

    Console output is always on. The auth cookie name is scrubbed from
    captured attributes alongside Logfire's default patterns.
    """
    observability = settings.observability
    send_to_logfire = should_send_to_logfire(observability)

    logfire.configure(
        service_name="bazaar-ledger",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(
            extra_patterns=[settings.auth.cookie_name]
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        has_token=observability.logfire_token is not None,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request.

    Spans carry the method, path and client address of the request.
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "path": request.url.path}
        # Only HTTP requests are served; websockets would have no method
        method = getattr(request, "method", None)
        if method:
            result["method"] = method
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement the ledger runs."""
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag SQL with the active span context
    )
    logfire.info("SQLAlchemy instrumented", url=engine.url.render_as_string())
