# ============================================================================
# WMSPANEL ENTRY POINT
# ============================================================================
# STATUS: Core - Application entry point with logging initialization
# PURPOSE: Configure structured logging BEFORE the app and its loggers load
# ============================================================================
"""
wmspanel Application Entry Point.

Initialization order:
1. Configure structured logging
2. Import and create the FastAPI application

Usage:
    # Production (uvicorn)
    uvicorn wmspanel.main:app --host 0.0.0.0 --port 8080

    # Development
    python -m wmspanel

Environment Variables:
    WMSPANEL_LOG_JSON: Emit JSON log lines (default: false)
    WMSPANEL_LOG_LEVEL: Root log level (default: INFO)
    WMSPANEL_OBSERVABILITY_MODE: Time capability fetches (default: false)
"""

import logging

from wmspanel.config import settings
from wmspanel.infrastructure.logging import LoggerFactory

LoggerFactory.configure(
    use_json=settings.log_json,
    level=logging.getLevelName(settings.log_level.upper()),
)

from wmspanel.app import create_app  # noqa: E402

app = create_app()

logger = logging.getLogger(__name__)
logger.info(f"wmspanel initialized (json_logs={settings.log_json})")
