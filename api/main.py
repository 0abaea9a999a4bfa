#!/usr/bin/env python3
"""
Name Cluster API - HTTP API layer for connected grouping.

This is the FastAPI application behind the grouping form. It accepts
people and links, runs the grouping pipeline and returns the groups with
their connectivity statistics.

Run with:
    name-cluster-api
    uvicorn api.main:app --port 8000
"""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grouping.logging_config import configure_logging, get_logger

from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api")
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Name Cluster API", description="Connected grouping API")

    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    from .routers import groups

    app.include_router(groups.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "name-cluster-api"}

    logger.info(f"API ready, CORS origins: {settings.allowed_origins}")
    return app


# Create app instance for uvicorn
app = create_app()


def run() -> None:
    """Serve the app on the configured host and port."""
    settings = get_settings()
    # log_config=None keeps the handlers configure_logging installed
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
