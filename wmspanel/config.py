"""
Configuration management for wmspanel.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All magic numbers and UI strings are extracted as named constants.

Environment variables use the WMSPANEL_ prefix, e.g.:
    - WMSPANEL_DEFAULT_SERVER_URL: GeoServer address prefilled in the panel
    - WMSPANEL_HTTP_TIMEOUT: GetCapabilities request timeout (seconds)
    - WMSPANEL_LOG_JSON: Emit JSON log lines instead of plain text

Observability Configuration:
    See infrastructure/latency.py.
    - WMSPANEL_OBSERVABILITY_MODE: Time capability fetches
    - WMSPANEL_SLOW_REQUEST_THRESHOLD_MS: Slow fetch threshold (default: 2000ms)
"""

from functools import lru_cache
from typing import Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via WMSPANEL_* environment variables.
    Boolean values accept: true/false, 1/0, yes/no (case-insensitive).
    """

    model_config = SettingsConfigDict(
        env_prefix="WMSPANEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # WMS Server
    # =========================================================================
    default_server_url: str = "http://localhost:8080/geoserver"
    """GeoServer base URL prefilled in the server address input."""

    http_timeout: float = 30.0
    """Timeout for GetCapabilities requests in seconds."""

    wms_version: str = "1.3.0"
    """WMS version requested in GetCapabilities and used by tile sources."""

    # =========================================================================
    # Base Map
    # =========================================================================
    basemap_url: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    """XYZ template for the base map tiles."""

    basemap_attribution: str = "&copy; OpenStreetMap contributors"
    """Attribution shown for the base map."""

    map_center_lat: float = 0.0
    map_center_lon: float = 0.0
    map_zoom: int = 2

    @property
    def map_center(self) -> Tuple[float, float]:
        """Initial map centre as (lat, lon)."""
        return (self.map_center_lat, self.map_center_lon)

    # =========================================================================
    # Server
    # =========================================================================
    host: str = "0.0.0.0"
    port: int = 8080

    storage_secret: str = "wmspanel-secret"
    """Secret for NiceGUI's storage feature."""

    # =========================================================================
    # Logging
    # =========================================================================
    log_json: bool = False
    """Use JSON log lines (for log aggregation). Plain text otherwise."""

    log_level: str = "INFO"


# =============================================================================
# Constants (extracted magic numbers)
# =============================================================================

WMS_SERVICE: str = "WMS"
GET_CAPABILITIES: str = "GetCapabilities"

WMS_PATH: str = "/wms"
"""Path of the WMS endpoint below the server base URL."""

SERVER_TYPE: str = "geoserver"
"""Server protocol hint carried by tile sources."""

TILE_FORMAT: str = "image/png"

PANEL_TRANSITION_SECS: float = 0.3
"""Controls panel expand/collapse transition; the map is resized afterwards."""

# UI strings
WORKSPACE_PLACEHOLDER: str = "Select a Workspace"
WORKSPACES_HEADING: str = "Workspaces Available"
SELECT_WORKSPACE_MESSAGE: str = "Please select a specific workspace to view its layers"
LAYERS_HEADING: str = "Available Layers in {workspace}:"
NO_LAYERS_MESSAGE: str = "No layers found in this workspace"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# Convenience alias for direct import
settings = get_settings()
