"""FastAPI routers for health probes."""

from wmspanel.routers import health

__all__ = ["health"]
