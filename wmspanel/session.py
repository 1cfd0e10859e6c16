"""
Panel session state and controller.

A PanelSession holds everything one browser tab knows: the committed
server address, the last successfully parsed capabilities, the selected
workspace and the active map layers. PanelController exposes the
commands the UI drives:

- load_capabilities(server_url)
- on_workspace_selected(workspace)
- on_layer_toggled(full_name, checked)

Discovery requests are guarded by a request token. Starting a new load
invalidates any load still waiting on the network; a superseded
response never touches the session.
"""

from dataclasses import dataclass, field
from typing import Optional

from wmspanel.capabilities import normalize_base_url, parse_capabilities
from wmspanel.client import WmsClient
from wmspanel.config import (
    LAYERS_HEADING,
    NO_LAYERS_MESSAGE,
    SELECT_WORKSPACE_MESSAGE,
    WORKSPACES_HEADING,
)
from wmspanel.errors import DiscoveryError
from wmspanel.infrastructure.logging import ComponentType, LoggerFactory
from wmspanel.layers import LayerStateManager, RenderSurface
from wmspanel.models import Capabilities, WorkspaceView

logger = LoggerFactory.create_logger(ComponentType.DISCOVERY, "PanelController")


def select_workspace(capabilities: Capabilities, workspace: str) -> WorkspaceView:
    """
    Build the layer list for a workspace selection.

    An empty selection yields no layers, only the sorted list of known
    workspaces for reference. A selected workspace yields its layers in
    discovery order, or the "no layers" message when there are none.
    """
    if not workspace:
        return WorkspaceView(
            workspace="",
            heading=WORKSPACES_HEADING,
            message=SELECT_WORKSPACE_MESSAGE,
            reference_workspaces=tuple(capabilities.sorted_workspaces),
        )

    layers = tuple(capabilities.layers_in(workspace))
    return WorkspaceView(
        workspace=workspace,
        heading=LAYERS_HEADING.format(workspace=workspace),
        layers=layers,
        message="" if layers else NO_LAYERS_MESSAGE,
    )


@dataclass
class PanelSession:
    """Per-tab state shared by the parser, filter and layer manager."""

    server_url: str = ""
    capabilities: Capabilities = field(default_factory=Capabilities)
    selected_workspace: str = ""
    discovery_token: int = 0
    loading: bool = False

    def begin_discovery(self) -> int:
        self.discovery_token += 1
        self.loading = True
        return self.discovery_token

    def is_current(self, token: int) -> bool:
        return token == self.discovery_token

    def end_discovery(self, token: int) -> None:
        # Only the newest request may clear the in-flight flag
        if self.is_current(token):
            self.loading = False


class PanelController:
    """
    Command interface between the UI and the panel state.

    Args:
        client: Shared WMS client used for discovery.
        surface: Rendering surface for toggled layers.
        session: Session to drive; a fresh one is created if omitted.
        wms_version: WMS version carried by new tile sources.
    """

    def __init__(
        self,
        client: WmsClient,
        surface: RenderSurface,
        session: Optional[PanelSession] = None,
        wms_version: str = "1.3.0",
    ):
        self.client = client
        self.session = session or PanelSession()
        self.layers = LayerStateManager(
            surface,
            is_known=lambda name: self.session.capabilities.has_layer(name),
            wms_version=wms_version,
        )

    async def load_capabilities(self, server_url: str) -> Optional[Capabilities]:
        """
        Discover the layers a server exposes and commit them to the session.

        On success the server address and capabilities are replaced and
        the workspace selection is reset. Active layers are kept.

        Returns:
            The parsed capabilities, or None if a newer load superseded
            this one while it was in flight.

        Raises:
            ServerConnectionError: Fetch failed or returned non-2xx.
            CapabilitiesParseError: Document could not be parsed.
        """
        base_url = normalize_base_url(server_url)
        token = self.session.begin_discovery()

        try:
            document = await self.client.get_capabilities(base_url)
            capabilities = parse_capabilities(document)
        except DiscoveryError as e:
            if not self.session.is_current(token):
                logger.warning(f"Discarding failure from superseded discovery of {base_url}: {e}")
                return None
            logger.error(
                f"Error loading capabilities: {e}",
                extra={"custom_dimensions": {"server_url": base_url, "error_type": type(e).__name__}},
            )
            raise
        finally:
            self.session.end_discovery(token)

        if not self.session.is_current(token):
            logger.info(f"Discarding superseded discovery of {base_url}")
            return None

        self.session.server_url = base_url
        self.session.capabilities = capabilities
        self.session.selected_workspace = ""
        return capabilities

    def on_workspace_selected(self, workspace: Optional[str]) -> WorkspaceView:
        self.session.selected_workspace = workspace or ""
        return select_workspace(self.session.capabilities, self.session.selected_workspace)

    def current_view(self) -> WorkspaceView:
        return select_workspace(self.session.capabilities, self.session.selected_workspace)

    def on_layer_toggled(self, full_name: str, checked: bool) -> bool:
        """Apply a checkbox change; returns True if the map changed."""
        return self.layers.toggle(full_name, self.session.server_url, checked)

    @property
    def is_loading(self) -> bool:
        """True while the newest discovery request is still in flight."""
        return self.session.loading

    def is_layer_active(self, full_name: str) -> bool:
        return self.layers.is_active(full_name)
