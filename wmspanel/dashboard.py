"""
WMS Layer Panel - NiceGUI Interface.

Registers the panel page and manages the shared WMS client. It can run
in two modes:
1. Integrated: Mounted onto the FastAPI app using ui.run_with()
2. Standalone: Running as a separate NiceGUI application

Usage:
    # Integrated mode (called from wmspanel.app):
    from wmspanel.dashboard import mount_panel
    mount_panel(app)

    # Standalone mode:
    python -m wmspanel.dashboard
"""

import logging
from typing import Optional

from nicegui import app, ui

from wmspanel.client import WmsClient
from wmspanel.config import settings
from wmspanel.infrastructure.logging import ComponentType, LoggerFactory
from wmspanel.pages import panel
from wmspanel.theme import apply_theme

logger = LoggerFactory.create_logger(ComponentType.UI, "dashboard")

_wms_client: Optional[WmsClient] = None


def get_wms_client() -> WmsClient:
    """Get or create the shared WMS client."""
    global _wms_client
    if _wms_client is None:
        _wms_client = WmsClient(timeout=settings.http_timeout, wms_version=settings.wms_version)
    return _wms_client


@app.on_startup
async def startup():
    """Log configuration on startup."""
    logger.info("=" * 60)
    logger.info("WMS Layer Panel")
    logger.info(f"Default server: {settings.default_server_url}")
    logger.info(f"WMS version: {settings.wms_version}")
    logger.info("=" * 60)


@app.on_shutdown
async def shutdown():
    """Close the shared WMS client."""
    if _wms_client:
        await _wms_client.close()


# =============================================================================
# PAGES
# =============================================================================

@ui.page("/")
def panel_page():
    """Layer panel page. Each browser tab gets its own session."""
    apply_theme()
    panel.create_page(get_wms_client())


# =============================================================================
# INTEGRATION FUNCTIONS
# =============================================================================

def mount_panel(fastapi_app, storage_secret: Optional[str] = None):
    """
    Mount the NiceGUI panel onto an existing FastAPI application.

    Args:
        fastapi_app: The FastAPI application instance
        storage_secret: Secret for NiceGUI's storage feature
    """
    ui.run_with(
        fastapi_app,
        storage_secret=storage_secret or settings.storage_secret,
        title="WMS Layer Panel",
    )


# =============================================================================
# STANDALONE MODE
# =============================================================================

if __name__ in {"__main__", "__mp_main__"}:
    LoggerFactory.configure(use_json=settings.log_json, level=logging.getLevelName(settings.log_level.upper()))
    ui.run(
        host=settings.host,
        port=settings.port,
        title="WMS Layer Panel",
        storage_secret=settings.storage_secret,
        reload=False,
        show=False,
    )
