"""
Health probe endpoints.

- /livez   - Liveness probe (is the process alive?)
- /healthz - Basic service info (version and configured defaults)
"""

from fastapi import APIRouter

from wmspanel import __version__
from wmspanel.config import settings

router = APIRouter(tags=["Health"])


@router.get("/livez")
async def liveness():
    """Liveness probe - responds immediately to indicate the process is running."""
    return {
        "status": "alive",
        "message": "Panel is running",
    }


@router.get("/healthz")
async def health():
    """
    Service info for monitoring.

    The panel has no backing services of its own; WMS servers are only
    contacted when a user loads capabilities.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "wms_version": settings.wms_version,
        "default_server_url": settings.default_server_url,
    }
