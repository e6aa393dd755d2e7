"""
FastAPI Application Entry Point

This module builds the FastAPI application and configures:
- API routes (public site + admin dashboard)
- Middleware (logging, CORS)
- Rate limiting and error response shapes
- Storage lifecycle (table creation, default data seeding, shutdown)

Design Decisions:
- create_app() receives its storage backend explicitly; when none is given it
  builds one from settings. One storage instance lives for the whole process
  and is shared through app.state, never through a module global
- Every error body is {"message": ...}, validation errors add "errors"

Run with:
    uvicorn studio.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from studio.api import admin, endpoints
from studio.core.logging_config import setup_logging
from studio.core.rate_limit import configure_rate_limits
from studio.core.setting import EnvSettingsOptions, Settings, settings as default_settings
from studio.middleware.logging import add_logging_middleware
from studio.services.auth_service import AdminAuthService
from studio.storage import Storage, create_storage

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"message": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render request validation failures as 400 with one entry per bad field.

    The "body" prefix FastAPI puts on body field locations is dropped, so a
    missing contact name is reported with path ["name"].
    """
    errors = []
    for error in exc.errors():
        location = list(error.get("loc", ()))
        if location and location[0] in ("body", "query", "path"):
            location = location[1:]
        errors.append({
            "path": location,
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "value_error"),
        })

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "errors": errors},
    )


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[Storage] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to the environment-loaded settings)
        storage: Storage backend to serve from (defaults to create_storage(settings))

    Returns:
        Configured FastAPI instance
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)
    hide_docs = settings.ENV_SETTING == EnvSettingsOptions.production

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Prepare storage and seed the default catalog; release storage on shutdown."""
        await app.state.storage.initialize()
        if settings.SEED_DEFAULT_DATA:
            await app.state.storage.initialize_default_data()
        yield
        await app.state.storage.close()

    app = FastAPI(
        title="Interior Studio API",
        description="Content backend for the studio website and admin dashboard",
        version=API_VERSION,
        docs_url=None if hide_docs else "/docs",
        redoc_url=None if hide_docs else "/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.storage = storage or create_storage(settings)
    app.state.auth_service = AdminAuthService(settings)

    app.state.limiter = configure_rate_limits(settings)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    add_logging_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint for health checks."""
        return {
            "message": "Interior Studio API",
            "version": API_VERSION,
            "docs": app.docs_url,
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy"}

    app.include_router(endpoints.router, tags=["Site"])
    app.include_router(admin.router, tags=["Admin"])

    return app


app = create_app()
