"""Logging and latency instrumentation."""

from wmspanel.infrastructure.logging import LoggerFactory, ComponentType
from wmspanel.infrastructure.latency import track_latency_async

__all__ = [
    "LoggerFactory",
    "ComponentType",
    "track_latency_async",
]
