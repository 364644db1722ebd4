"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bazaar.config import Settings
from bazaar.domain.value import PostKind
from bazaar.interface.api.errors import register_error_handlers
from bazaar.interface.api.routes import health, notifications
from bazaar.interface.api.routes.comments import build_comments_router
from bazaar.interface.api.routes.votes import build_votes_router
from bazaar.util.di.container import create_container, setup_di
from bazaar.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container; tests pass one built with in-memory
            persistence.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Bazaar Ledger API",
        description="Votes, comments and notifications for trade listings and forum posts",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    for kind in PostKind:
        app_instance.include_router(build_votes_router(kind))
        app_instance.include_router(build_comments_router(kind))
    app_instance.include_router(notifications.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
