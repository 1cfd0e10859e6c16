"""
HTTP client for WMS servers.

Fetches GetCapabilities documents and maps transport failures and
non-2xx responses onto ServerConnectionError.
"""

import httpx
from typing import Optional

from wmspanel.capabilities import capabilities_params, wms_endpoint
from wmspanel.errors import ServerConnectionError
from wmspanel.infrastructure.latency import track_latency_async
from wmspanel.infrastructure.logging import ComponentType, LoggerFactory

logger = LoggerFactory.create_logger(ComponentType.DISCOVERY, "WmsClient")


class WmsClient:
    """
    Async HTTP client for WMS GetCapabilities requests.

    One client is shared by all panel sessions; the underlying
    httpx.AsyncClient is created lazily and recreated after close().
    """

    def __init__(
        self,
        timeout: float = 30.0,
        wms_version: str = "1.3.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.wms_version = wms_version
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @track_latency_async("wms.get_capabilities")
    async def get_capabilities(self, base_url: str) -> bytes:
        """
        Fetch the capabilities document from ``{base_url}/wms``.

        Returns the raw body; the XML declaration decides its encoding.

        Raises:
            ServerConnectionError: Network failure, timeout or non-2xx status.
        """
        url = wms_endpoint(base_url)
        client = await self._get_client()

        logger.info(f"Fetching capabilities from {url}")
        try:
            response = await client.get(url, params=capabilities_params(self.wms_version))
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ServerConnectionError(
                f"Failed to connect to GeoServer: {str(e) or type(e).__name__}"
            ) from e

        if not response.is_success:
            raise ServerConnectionError(
                f"Failed to connect to GeoServer: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        return response.content
