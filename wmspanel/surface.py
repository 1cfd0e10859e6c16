"""
Leaflet rendering surface.

Adapts NiceGUI's ``ui.leaflet`` to the RenderSurface interface used by
LayerStateManager. Tile fetching and compositing happen in the browser.
"""

from typing import Any

from nicegui import ui

from wmspanel.config import Settings
from wmspanel.models import TileSourceConfig


class LeafletSurface:
    """RenderSurface backed by a ``ui.leaflet`` map."""

    def __init__(self, leaflet: ui.leaflet):
        self.map = leaflet

    def add_layer(self, config: TileSourceConfig) -> Any:
        return self.map.wms_layer(
            url_template=config.base_url,
            options=config.to_leaflet_options(),
        )

    def remove_layer(self, handle: Any) -> None:
        self.map.remove_layer(handle)

    def invalidate_size(self) -> None:
        """Re-measure the map container after a layout change."""
        self.map.run_map_method("invalidateSize")


def add_base_map(leaflet: ui.leaflet, settings: Settings) -> Any:
    """Replace the default base layer with the configured one."""
    leaflet.clear_layers()
    return leaflet.tile_layer(
        url_template=settings.basemap_url,
        options={
            "attribution": settings.basemap_attribution,
            "maxZoom": 19,
        },
    )
