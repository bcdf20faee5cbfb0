# src/authentiwrite/main.py
"""Main entry point for the AuthentiWrite application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from authentiwrite.api.v1 import (
    analytics_router,
    auth_router,
    feed_router,
    users_router,
    writings_router,
)
from authentiwrite.core.settings import settings
from authentiwrite.services import Store, seed_sample_data

logger = logging.getLogger(__name__)


def build_store(*, seed: bool | None = None) -> Store:
    """Create the process-wide store, seeded according to settings."""
    if seed is None:
        seed = settings.seed_sample_data
    store = Store(earnings_per_view=settings.earnings_per_view)
    if seed:
        seed_sample_data(store)
    return store


def create_app(store: Store | None = None) -> FastAPI:
    """Build the FastAPI application around a single store instance."""
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title="AuthentiWrite API",
        description="Publishing platform for verified human writers",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.store = store if store is not None else build_store()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add GZip middleware for compression
    app.add_middleware(GZipMiddleware)

    # Include API routers
    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(writings_router, prefix="/api/v1")
    app.include_router(feed_router, prefix="/api/v1")
    app.include_router(analytics_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "detail": "Internal server error"},
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    logger.info("%s %s ready", settings.app_name, settings.app_version)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("authentiwrite.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
