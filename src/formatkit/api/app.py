"""FastAPI application for the formatkit REST API."""

from __future__ import annotations

from fastapi import FastAPI

from formatkit.api.routes.format import router as format_router

API_VERSION = "0.1.0"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="formatkit API",
        description="Format, validate and minify JSON, TypeScript, XML, CSS and HTML.",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.include_router(format_router, prefix="/api/v1", tags=["Formatting"])

    @app.get("/health")
    async def health_check() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    return app
