"""
Error taxonomy for wmspanel.

DiscoveryError covers everything that can go wrong while loading a
server's capabilities. Toggle operations never raise.
"""

from typing import Optional


class WmsPanelError(Exception):
    """Base class for wmspanel errors."""


class DiscoveryError(WmsPanelError):
    """Capability discovery failed; session state is left untouched."""


class ServerConnectionError(DiscoveryError, ConnectionError):
    """Server unreachable, timed out, or answered with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CapabilitiesParseError(DiscoveryError):
    """Capabilities document is malformed or is a WMS service exception."""
