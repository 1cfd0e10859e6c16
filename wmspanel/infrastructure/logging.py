"""
Component loggers for wmspanel.

Loggers are named ``wmspanel.<component>.<name>`` and tag every record
with its component. ``LoggerFactory.configure`` installs one stdout
handler, plain text by default or one JSON object per line, and routes
uvicorn through it.

Usage:
    logger = LoggerFactory.create_logger(ComponentType.DISCOVERY, "WmsClient")
    logger.info("Fetched capabilities", extra={
        "custom_dimensions": {"server_url": "http://localhost:8080/geoserver"}
    })
"""

import json
import logging
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

SERVICE_NAME = "wmspanel"

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Loggers that share the panel's handler instead of their own
ROUTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class ComponentType(Enum):
    DISCOVERY = "discovery"  # GetCapabilities fetch and parsing
    LAYERS = "layers"        # Layer toggles
    UI = "ui"                # NiceGUI pages
    HEALTH = "health"
    APP = "app"


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Fields: timestamp, level, logger, message, service, and when present
    component, custom_dimensions (from ``extra``) and exception.
    """

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service,
        }

        component = getattr(record, "component", None)
        if component:
            entry["component"] = component

        dimensions = getattr(record, "custom_dimensions", None)
        if dimensions:
            entry["custom_dimensions"] = dimensions

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class _ComponentTag(logging.Filter):
    def __init__(self, component: ComponentType):
        super().__init__()
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:
        record.component = self.component.value
        return True


class LoggerFactory:
    """Configures the handler once and hands out component loggers."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def configure(cls, use_json: bool = False, level: int = logging.INFO) -> logging.Handler:
        """
        Install the stdout handler on the root logger.

        Calling again replaces the previous handler, so settings reloaded
        at startup take effect.
        """
        root = logging.getLogger()
        if cls._handler is not None:
            root.removeHandler(cls._handler)

        handler = logging.StreamHandler(sys.stdout)
        if use_json:
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

        root.setLevel(level)
        root.addHandler(handler)

        for name in ROUTED_LOGGERS:
            routed = logging.getLogger(name)
            routed.handlers = [handler]
            routed.propagate = False

        # httpx logs every request at INFO; WmsClient already logs each fetch
        logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

        cls._handler = handler
        return handler

    @classmethod
    def create_logger(cls, component: ComponentType, name: str, level: Optional[int] = None) -> logging.Logger:
        logger = logging.getLogger(f"{SERVICE_NAME}.{component.value}.{name}")
        if level is not None:
            logger.setLevel(level)
        if not any(isinstance(f, _ComponentTag) for f in logger.filters):
            logger.addFilter(_ComponentTag(component))
        return logger
