"""
Data model for discovered layers and active map layers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Tuple

from wmspanel.config import SERVER_TYPE, TILE_FORMAT


@dataclass(frozen=True)
class LayerRecord:
    """A discovered layer addressable as ``workspace:name``."""

    full_name: str
    workspace: str
    name: str
    title: str

    @property
    def label(self) -> str:
        """Text shown next to the layer's checkbox."""
        return self.title or self.name


@dataclass(frozen=True)
class Capabilities:
    """Parsed GetCapabilities result: layers in discovery order plus workspaces."""

    layers: Tuple[LayerRecord, ...] = ()
    workspaces: FrozenSet[str] = frozenset()

    @property
    def sorted_workspaces(self) -> List[str]:
        return sorted(self.workspaces)

    def layers_in(self, workspace: str) -> List[LayerRecord]:
        return [layer for layer in self.layers if layer.workspace == workspace]

    def has_layer(self, full_name: str) -> bool:
        return any(layer.full_name == full_name for layer in self.layers)


@dataclass(frozen=True)
class TileSourceConfig:
    """
    Tile source handed to the rendering surface.

    ``base_url`` is the WMS endpoint (``{server}/wms``), ``layer_identifier``
    the qualified ``workspace:name`` layer.
    """

    base_url: str
    layer_identifier: str
    tiled: bool = True
    server_type: str = SERVER_TYPE
    image_format: str = TILE_FORMAT
    transparent: bool = True
    version: str = "1.3.0"

    def to_leaflet_options(self) -> Dict[str, Any]:
        """Options for L.TileLayer.WMS; unknown keys become WMS request params."""
        return {
            "layers": self.layer_identifier,
            "format": self.image_format,
            "transparent": self.transparent,
            "version": self.version,
            "tiled": self.tiled,
        }


@dataclass
class ActiveLayerEntry:
    """A layer currently rendered on the surface."""

    name: str
    layer: Any
    config: TileSourceConfig


@dataclass(frozen=True)
class WorkspaceView:
    """
    What the layer list shows for a workspace selection.

    With no workspace selected, ``layers`` is empty and
    ``reference_workspaces`` lists every discovered workspace. With a
    workspace selected, ``message`` is set only when it has no layers.
    """

    workspace: str
    heading: str
    layers: Tuple[LayerRecord, ...] = ()
    message: str = ""
    reference_workspaces: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_selection(self) -> bool:
        return bool(self.workspace)
