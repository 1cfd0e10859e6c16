"""
FastAPI application factory for wmspanel.

Creates the FastAPI app with:
- Health probe endpoints (/livez, /healthz)
- The NiceGUI layer panel mounted at /

Entry Point:
    Use wmspanel.main:app, which configures structured logging before
    the application is created.
"""

import logging

from fastapi import FastAPI

from wmspanel import __version__
from wmspanel.dashboard import mount_panel
from wmspanel.routers import health

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the FastAPI application and mount the panel."""
    app = FastAPI(
        title="WMS Layer Panel",
        version=__version__,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
    )

    app.include_router(health.router)

    mount_panel(app)

    logger.info(f"Created wmspanel v{__version__}")
    return app
