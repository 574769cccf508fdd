"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler
from infrastructure.database.session import Database

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database at startup and dispose it at shutdown.

    A database already attached to ``app.state`` (tests, embedding) is used
    as-is and left for its owner to dispose.
    """
    owned: Database | None = None
    if getattr(app.state, "database", None) is None:
        owned = Database(settings.async_database_url, echo=settings.debug)
        app.state.database = owned
        if settings.create_tables_on_startup:
            await owned.create_all()
        logger.info("database_opened", create_tables=settings.create_tables_on_startup)

    try:
        yield
    finally:
        if owned is not None:
            await owned.dispose()
            app.state.database = None


def create_app(database: Database | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Art Gallery & Portfolio API\n\n"
            "MindCanvas lets artists publish artworks and visitors browse, "
            "like and bookmark them.\n\n"
            "### Features\n"
            "- **Likes**: one like per user per artwork, with a live counter\n"
            "- **Favorites**: personal bookmarks with free-form metadata\n"
            "- **Profiles**: name and photo changes propagate to every artwork\n"
            "- **Leaderboard**: top artists by total likes\n\n"
            "### Rate Limits\n"
            "- GET endpoints: 30 requests/minute\n"
            "- Like/favorite checks: 60 requests/minute\n"
            "- POST/PUT/PATCH/DELETE: 10 requests/minute"
        ),
        version="1.0.0",
        debug=settings.debug,
        contact={
            "name": "MindCanvas Support",
        },
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "likes",
                "description": "Artwork likes",
            },
            {
                "name": "favorites",
                "description": "User bookmarks",
            },
            {
                "name": "users",
                "description": "Registration and profile sync",
            },
            {
                "name": "artists",
                "description": "Artist leaderboard",
            },
            {
                "name": "artworks",
                "description": "Artwork management operations",
            },
            {
                "name": "catalog",
                "description": "Categories, search and per-user listings",
            },
        ],
    )
    app.state.database = database

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
