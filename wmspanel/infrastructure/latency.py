# ============================================================================
# SERVICE LATENCY TRACKING
# ============================================================================
# STATUS: Infrastructure - Capability fetch instrumentation
# PURPOSE: Time GetCapabilities round trips to spot slow WMS servers
# ============================================================================
"""
Latency tracking for wmspanel network calls.

Key Design:
-----------
- Zero overhead when WMSPANEL_OBSERVABILITY_MODE=false (early return, no timing)
- Full timing + structured logging when enabled
- Slow operation warnings (configurable threshold)

Environment Variables:
----------------------
WMSPANEL_OBSERVABILITY_MODE: Enable latency tracking (default: false)
WMSPANEL_SLOW_REQUEST_THRESHOLD_MS: Threshold for slow warnings (default: 2000)

Usage:
------
```python
from wmspanel.infrastructure.latency import track_latency_async

@track_latency_async("wms.get_capabilities")
async def get_capabilities(base_url: str) -> str:
    ...
```
"""

import os
import time
from functools import wraps
from typing import Any, Callable

from wmspanel.infrastructure.logging import ComponentType, LoggerFactory

logger = LoggerFactory.create_logger(ComponentType.DISCOVERY, "latency")


def _slow_threshold_ms() -> int:
    return int(os.environ.get("WMSPANEL_SLOW_REQUEST_THRESHOLD_MS", "2000"))


def _is_observability_enabled() -> bool:
    """
    Check if observability mode is enabled.

    Returns:
        bool: True if WMSPANEL_OBSERVABILITY_MODE is truthy
    """
    val = os.environ.get("WMSPANEL_OBSERVABILITY_MODE", "").lower()
    return val in ("true", "1", "yes")


def track_latency_async(operation_name: str):
    """
    Decorator to track latency of an async operation.

    When enabled, logs structured JSON with:
    - operation: Operation name for filtering
    - duration_ms: Execution time in milliseconds
    - status: 'success' or 'error'
    - slow: True if duration > WMSPANEL_SLOW_REQUEST_THRESHOLD_MS

    Example:
        @track_latency_async("wms.get_capabilities")
        async def get_capabilities(base_url: str):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            # Fast path: no overhead when disabled
            if not _is_observability_enabled():
                return await func(*args, **kwargs)

            start = time.perf_counter()
            status = "success"
            error_msg = None

            try:
                return await func(*args, **kwargs)
            except Exception as e:
                status = "error"
                error_msg = str(e)
                raise
            finally:
                duration_ms = (time.perf_counter() - start) * 1000
                is_slow = duration_ms > _slow_threshold_ms()

                custom_dims = {
                    "operation": operation_name,
                    "duration_ms": round(duration_ms, 2),
                    "status": status,
                    "slow": is_slow,
                }
                if error_msg:
                    custom_dims["error"] = error_msg[:200]

                extra = {"custom_dimensions": custom_dims}

                if is_slow:
                    logger.warning(
                        f"[WMS_LATENCY] SLOW {operation_name}: {duration_ms:.0f}ms",
                        extra=extra
                    )
                else:
                    logger.info(
                        f"[WMS_LATENCY] {operation_name}: {duration_ms:.0f}ms",
                        extra=extra
                    )

        return wrapper
    return decorator


__all__ = [
    "track_latency_async",
]
