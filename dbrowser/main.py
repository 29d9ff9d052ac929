"""
D's Browser Backend - Main Application
========================================

Persists users, settings, shortcuts and browsing history for the
browser-companion app.

Modules:
- Accounts: Users, settings and firebase_uid resolution
- Browsing: Shortcuts and history

Clean Architecture Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Infrastructure: Database models and repositories
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

# Configuration
from dbrowser.config import Settings, get_settings

# Infrastructure
from dbrowser.infrastructure.database import (
    init_database, close_database, create_tables, get_session, fetch_database_time
)

# Module Routers
from dbrowser.accounts.interfaces import accounts_router
from dbrowser.browsing.interfaces import browsing_router

# Middleware and logging
from dbrowser.shared.api.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    install_exception_handlers
)
from dbrowser.shared.infrastructure.logging import setup_logging, get_logger

logger = get_logger(__name__)

LIVENESS_TEXT = "D’s Browser Backend Running 🚀"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP:
    1. Setup structured logging
    2. Initialize database
    3. Create the tables of the configured schema variant

    SHUTDOWN:
    1. Close database connections
    """
    settings: Settings = app.state.settings

    # === STARTUP ===
    setup_logging(level=settings.log_level, environment=settings.environment)
    logger.info("Starting D's Browser Backend", extra={
        "version": settings.app_version,
        "environment": settings.environment,
        "schema_mode": settings.schema_mode
    })

    init_database(settings)

    if settings.create_tables:
        # If the database is not reachable the server still starts;
        # every database endpoint then answers with a 500 envelope.
        logger.info("Creating database tables")
        try:
            await create_tables(settings.schema_mode)
        except Exception as e:
            logger.warning(f"Database not available - running in degraded mode: {e}")

    logger.info("D's Browser Backend started successfully")

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("Shutting down D's Browser Backend")
    await close_database()
    logger.info("D's Browser Backend shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to run with; defaults to the environment's
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="D's Browser Backend",
        description="""
    ## Browser companion backend

    Stores per-user settings, bookmarked shortcuts and browsing history.

    Users are identified by their Firebase uid. Failures are returned as
    `{"error": "<message>"}`.
    """,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings

    # === CORS Middleware ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added runs first: correlation id is set before logging reads it
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CorrelationIDMiddleware)
    install_exception_handlers(app)

    # === Include Module Routers ===
    app.include_router(accounts_router)
    app.include_router(browsing_router)

    # === Health Check Endpoints ===

    @app.get("/", tags=["Health"], response_class=PlainTextResponse)
    async def root():
        """Liveness probe."""
        return LIVENESS_TEXT

    @app.get("/test-db", tags=["Health"])
    async def test_db(session: AsyncSession = Depends(get_session)):
        """Round trip to the database, returning its clock."""
        now = await fetch_database_time(session)
        return [{"now": now}]

    @app.get("/health", tags=["Health"])
    async def health_check(session: AsyncSession = Depends(get_session)):
        """
        Health check endpoint for load balancers and orchestrators.

        Reports database connectivity and the active schema variant.
        """
        checks = {"database": "connected", "schema_mode": settings.schema_mode}
        status = "healthy"
        try:
            await fetch_database_time(session)
        except Exception as e:
            await session.rollback()
            checks["database"] = f"error: {e}"
            status = "degraded"

        return {
            "status": status,
            "version": settings.app_version,
            "environment": settings.environment,
            "checks": checks
        }

    return app


# Create FastAPI application
app = create_app()


# === Development Entry Point ===

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "dbrowser.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level="info"
    )
