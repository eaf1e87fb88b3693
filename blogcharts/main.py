"""Blog Charts - Main Application.

FastAPI application that serves the blog's radial bar charts to the page
rendering layer, either as SVG images or as embeddable markup.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from blogcharts.radial.api import router as charts_router
from blogcharts.radial.composer import get_chart_composer
from blogcharts.radial.config import get_settings
from blogcharts.shared.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


# ===========================================
# APPLICATION METADATA
# ===========================================

APP_TITLE = "Blog Charts"
APP_DESCRIPTION = """
## Overview

Renders the radial bar chart used by the blog's feature importance post.

| Endpoint | Description |
|----------|-------------|
| `GET /api/v1/charts/radial-bar/{variant}` | SVG of the built-in dataset |
| `GET /api/v1/charts/radial-bar/{variant}/geometry` | Rendered chart with per-arc geometry |
| `POST /api/v1/charts/radial-bar/render` | Render a caller-supplied dataset |
| `POST /api/v1/charts/radial-bar/interactive/hover` | Replay hover events on the interactive chart |
"""
APP_VERSION = "1.0.0"
API_PREFIX = "/api/v1"
TAGS_METADATA = [
    {
        "name": "health",
        "description": "Health check endpoints",
    },
    {
        "name": "charts",
        "description": "Radial bar chart rendering",
    },
]


# ===========================================
# LIFECYCLE MANAGEMENT
# ===========================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info("app_starting", title=APP_TITLE, version=APP_VERSION)
    yield
    get_chart_composer().clear_cache()
    logger.info("app_stopped", title=APP_TITLE)


# ===========================================
# APPLICATION FACTORY
# ===========================================


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
        openapi_tags=TAGS_METADATA,
        lifespan=lifespan,
    )

    app.include_router(charts_router, prefix=API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health():
        """Liveness check."""
        return {"status": "healthy", "version": APP_VERSION}

    return app


app = create_app()
