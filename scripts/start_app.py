#!/usr/bin/env python3
"""Serve the ledger API with uvicorn.

Logging and Logfire are configured before the app module is imported, so
a failure while building the app is reported too.

Usage:
    python scripts/start_app.py [port]
"""

import sys

import logfire
import uvicorn

from bazaar.config import Settings
from bazaar.util.logging import setup_logging
from bazaar.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    port = int(argv[0]) if argv else 8000

    with logfire.span("start_app", environment=settings.environment, port=port):
        try:
            uvicorn.run(
                "bazaar.interface.api.app:app",
                host="0.0.0.0",
                port=port,
                proxy_headers=True,
                log_level="debug" if settings.debug else "info",
            )
        except Exception as e:
            logfire.error(
                "Ledger API failed to start",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
