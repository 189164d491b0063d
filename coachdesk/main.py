"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, coachdesk.api, coachdesk.observability, coachdesk.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from coachdesk import __version__
from coachdesk.api.error_handling import register_exception_handlers
from coachdesk.api.routers import (
    ai_router,
    clients_router,
    context_documents_router,
    dashboard_router,
    health_router,
    notes_router,
    profile_router,
    sessions_router,
    settings_router,
    tags_router,
    templates_router,
)
from coachdesk.boundary.db import dispose_engine
from coachdesk.boundary.db.seed_tags import run_seed
from coachdesk.configs import get_settings
from coachdesk.observability.logger import configure_logging
from coachdesk.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, seeds the tag vocabulary and disposes the
    database engine on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup", extra={"environment": settings.environment})

    if settings.seed_tags_on_startup:
        try:
            created = await run_seed()
            logger.info("Tag vocabulary ready", extra={"created": created})
        except (SQLAlchemyError, OSError) as e:
            # Tags can be seeded later with `python -m coachdesk.boundary.db.seed_tags`
            logger.exception("Failed to seed tags at startup", extra={"error": str(e)})

    yield

    await dispose_engine()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="CoachDesk API",
        description="Executive coaching practice management with AI session analysis",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Added last = runs first, so request logs carry the correlation id
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    for router in (
        health_router,
        profile_router,
        settings_router,
        templates_router,
        clients_router,
        notes_router,
        sessions_router,
        ai_router,
        tags_router,
        context_documents_router,
        dashboard_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "coachdesk.main:app",
        host="localhost",
        port=8000,
        reload=get_settings().debug,
    )
