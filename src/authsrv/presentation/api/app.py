"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from authsrv.infrastructure.email import EmailService
from authsrv.infrastructure.persistence.sqlalchemy import Database
from authsrv.infrastructure.persistence.sqlalchemy.init_db import create_tables
from authsrv.infrastructure.storage import FileStorageClient
from authsrv.presentation.api.exception_handlers import setup_exception_handlers
from authsrv.presentation.api.routers import admin_router, auth_router, users_router
from authsrv_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for authsrv modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("authsrv").setLevel(log_level)
    logging.getLogger("authsrv_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Login, password change and password reset.

- Passwords are hashed with bcrypt
- Bearer tokens (JWT, HS256) carry `user_id` and `level_name`
- Reset links are mailed and valid for one hour
""",
    },
    {
        "name": "Users",
        "description": "Registration, lookups, profile data and profile pictures.",
    },
    {
        "name": "Admin",
        "description": "Role management. Requires a token with level `Admin`.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Own the database pool and outbound clients for the app's lifetime."""
    settings: Settings = app.state.settings

    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET_KEY is not set; login will fail until it is configured")

    database = Database.from_settings(settings)
    file_storage = FileStorageClient.from_settings(settings)
    if not file_storage.enabled:
        logger.info("UPLOAD_SERVER_URL not set; profile picture files will not be deleted")

    try:
        await create_tables(database)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        await database.dispose()
        raise SystemExit(1) from None

    app.state.database = database
    app.state.file_storage = file_storage
    app.state.email_service = EmailService(settings)
    yield

    # Shutdown - close outbound client, dispose the engine and its pool
    logger.info("Shutting down %s API...", settings.app_name)
    await file_storage.close()
    await database.dispose()


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(admin_router, prefix="/users", tags=["Admin"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Account management and **bearer token** authentication.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app


# Application instance for uvicorn
app = create_app()
