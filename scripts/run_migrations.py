#!/usr/bin/env python3
"""Apply ledger schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c9a7d2b64
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from bazaar.config import Settings
from bazaar.util.logging import setup_logging
from bazaar.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision (default: head)."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", target=target, environment=settings.environment):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Ledger migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Ledger schema is up to date", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
