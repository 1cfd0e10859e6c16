"""
Layer state management.

Keeps track of which WMS layers are rendered on the map and reconciles
checkbox toggles with the rendering surface. Each qualified layer name
has at most one live surface layer.
"""

from typing import Any, Callable, Dict, List, Optional, Protocol

from wmspanel.capabilities import wms_endpoint
from wmspanel.infrastructure.logging import ComponentType, LoggerFactory
from wmspanel.models import ActiveLayerEntry, TileSourceConfig

logger = LoggerFactory.create_logger(ComponentType.LAYERS, "LayerStateManager")


class RenderSurface(Protocol):
    """Map surface that tile layers are added to and removed from."""

    def add_layer(self, config: TileSourceConfig) -> Any:
        """Add a tile layer and return its handle."""

    def remove_layer(self, handle: Any) -> None:
        """Remove a layer previously returned by add_layer."""


class LayerStateManager:
    """
    Active-layer bookkeeping for one rendering surface.

    Args:
        surface: Rendering surface receiving the tile layers.
        is_known: Optional predicate; layers it rejects are never turned on.
        wms_version: WMS version carried by new tile sources.
    """

    def __init__(
        self,
        surface: RenderSurface,
        is_known: Optional[Callable[[str], bool]] = None,
        wms_version: str = "1.3.0",
    ):
        self.surface = surface
        self.is_known = is_known
        self.wms_version = wms_version
        self._active: Dict[str, ActiveLayerEntry] = {}

    @property
    def active_names(self) -> List[str]:
        """Qualified names of rendered layers, in the order they were added."""
        return list(self._active)

    def is_active(self, full_name: str) -> bool:
        return full_name in self._active

    def get(self, full_name: str) -> Optional[ActiveLayerEntry]:
        return self._active.get(full_name)

    def build_config(self, full_name: str, server_base_url: str) -> TileSourceConfig:
        return TileSourceConfig(
            base_url=wms_endpoint(server_base_url),
            layer_identifier=full_name,
            tiled=True,
            version=self.wms_version,
        )

    def toggle(self, full_name: str, server_base_url: str, turn_on: bool) -> bool:
        """
        Turn a layer on or off.

        Turning on an already active layer, turning off an inactive one,
        or turning on a layer the session never discovered changes
        nothing.

        Returns:
            True if the surface was changed.
        """
        if turn_on:
            return self._add(full_name, server_base_url)
        return self._remove(full_name)

    def _add(self, full_name: str, server_base_url: str) -> bool:
        if full_name in self._active:
            logger.debug(f"Layer already active: {full_name}")
            return False
        if self.is_known is not None and not self.is_known(full_name):
            logger.warning(f"Ignoring toggle for undiscovered layer: {full_name}")
            return False

        config = self.build_config(full_name, server_base_url)
        handle = self.surface.add_layer(config)
        self._active[full_name] = ActiveLayerEntry(name=full_name, layer=handle, config=config)

        logger.info(
            f"Added layer: {full_name}",
            extra={"custom_dimensions": {"layer": full_name, "wms_url": config.base_url}},
        )
        return True

    def _remove(self, full_name: str) -> bool:
        entry = self._active.pop(full_name, None)
        if entry is None:
            return False

        self.surface.remove_layer(entry.layer)
        logger.info(f"Removed layer: {full_name}", extra={"custom_dimensions": {"layer": full_name}})
        return True

    def clear(self) -> None:
        """Remove every active layer from the surface."""
        for full_name in list(self._active):
            self._remove(full_name)
