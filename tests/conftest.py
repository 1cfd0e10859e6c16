from __future__ import annotations

import itertools
from typing import Any, Callable, List

import httpx
import pytest

from wmspanel.client import WmsClient
from wmspanel.models import TileSourceConfig


# The worked example: a root container, two ws1 layers and one layer
# without a workspace prefix.
EXAMPLE_CAPABILITIES = """<?xml version="1.0" encoding="UTF-8"?>
<WMT_MS_Capabilities version="1.1.1">
  <Capability>
    <Layer>
      <Title>root</Title>
      <Layer><Name>ws1:roads</Name><Title>Roads</Title></Layer>
      <Layer><Name>ws1:rivers</Name></Layer>
      <Layer><Name>lonewolf</Name><Title>x</Title></Layer>
    </Layer>
  </Capability>
</WMT_MS_Capabilities>
"""

GEOSERVER_CAPABILITIES = """<?xml version="1.0" encoding="UTF-8"?>
<WMS_Capabilities version="1.3.0" xmlns="http://www.opengis.net/wms" xmlns:xlink="http://www.w3.org/1999/xlink">
  <Service>
    <Name>WMS</Name>
    <Title>GeoServer Web Map Service</Title>
  </Service>
  <Capability>
    <Layer>
      <Title>GeoServer Web Map Service</Title>
      <Layer queryable="1">
        <Name>topp:states</Name>
        <Title>USA Population</Title>
        <Style>
          <Name>population</Name>
          <Title>Population in the United States</Title>
        </Style>
      </Layer>
      <Layer queryable="1">
        <Name>tiger:roads</Name>
        <Title>Manhattan (NY) roads</Title>
      </Layer>
      <Layer queryable="1">
        <Name>topp:tasmania_cities</Name>
      </Layer>
      <Layer>
        <Title>Spearfish group</Title>
        <Layer queryable="1">
          <Name>sf:streams</Name>
          <Title>Spearfish streams</Title>
        </Layer>
      </Layer>
      <Layer queryable="1">
        <Name>basemap</Name>
        <Title>Global basemap</Title>
      </Layer>
    </Layer>
  </Capability>
</WMS_Capabilities>
"""

SERVICE_EXCEPTION = """<?xml version="1.0" encoding="UTF-8"?>
<ServiceExceptionReport version="1.3.0" xmlns="http://www.opengis.net/ogc">
  <ServiceException code="InvalidParameterValue">No service: ( wmts )</ServiceException>
</ServiceExceptionReport>
"""


class FakeSurface:
    """In-memory rendering surface; the stack starts with a base map."""

    def __init__(self):
        self._ids = itertools.count(1)
        self.stack: List[Any] = ["basemap"]
        self.configs: List[TileSourceConfig] = []

    def add_layer(self, config: TileSourceConfig):
        handle = ("wms", config.layer_identifier, next(self._ids))
        self.stack.append(handle)
        self.configs.append(config)
        return handle

    def remove_layer(self, handle) -> None:
        self.stack.remove(handle)


def make_client(handler: Callable) -> WmsClient:
    return WmsClient(timeout=5.0, transport=httpx.MockTransport(handler))


def serve(text: str, status_code: int = 200) -> Callable:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)
    return handler


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()
