"""
WMS Layer Panel page.

Full-screen map with a floating controls card:
- Server address input and "Load Layers" button
- Workspace dropdown (shown once capabilities are loaded)
- Layer checkboxes for the selected workspace
"""

from nicegui import ui

from wmspanel.client import WmsClient
from wmspanel.config import PANEL_TRANSITION_SECS, WORKSPACE_PLACEHOLDER, settings
from wmspanel.errors import DiscoveryError
from wmspanel.models import Capabilities, WorkspaceView
from wmspanel.session import PanelController
from wmspanel.surface import LeafletSurface, add_base_map


class PanelPage:
    """Panel page state: controller plus the expand/collapse flag."""

    def __init__(self, controller: PanelController, surface: LeafletSurface):
        self.controller = controller
        self.surface = surface
        self.expanded = True


def workspace_options(capabilities: Capabilities) -> dict:
    """Dropdown options: empty sentinel first, then sorted workspaces."""
    options = {"": WORKSPACE_PLACEHOLDER}
    for workspace in capabilities.sorted_workspaces:
        options[workspace] = workspace
    return options


def create_page(client: WmsClient):
    """Create the layer panel page."""
    leaflet = ui.leaflet(center=settings.map_center, zoom=settings.map_zoom).classes("map-canvas")
    add_base_map(leaflet, settings)

    surface = LeafletSurface(leaflet)
    controller = PanelController(client, surface, wms_version=settings.wms_version)
    page = PanelPage(controller, surface)

    with ui.card().classes("controls") as controls:
        # Header
        with ui.row().classes("w-full items-center justify-between no-wrap"):
            with ui.row().classes("items-center gap-2 no-wrap"):
                ui.icon("layers").classes("text-blue-600")
                ui.label("GeoServer Layers").classes("controls-title")
            toggle_btn = ui.button(icon="expand_less", on_click=lambda: toggle_controls())
            toggle_btn.props("flat round dense")

        with ui.column().classes("gap-3 w-full") as body:
            # Server address
            server_input = ui.input(
                label="GeoServer URL",
                value=settings.default_server_url,
                placeholder="http://localhost:8080/geoserver",
            ).classes("w-full").props("dense")
            server_input.on("keydown.enter", lambda: load_capabilities())

            load_btn = ui.button("Load Layers", icon="cloud_download", on_click=lambda: load_capabilities())
            load_btn.props("color=primary").classes("w-full")

            # Workspace selector (hidden until capabilities are loaded)
            with ui.column().classes("gap-1 w-full") as workspace_selector:
                ui.label("Workspace").classes("text-sm font-medium text-gray-600")
                workspace_select = ui.select(
                    options={"": WORKSPACE_PLACEHOLDER},
                    value="",
                    on_change=lambda e: on_workspace_change(e.value),
                ).classes("w-full").props("dense")
            workspace_selector.set_visibility(False)

            layer_list = ui.column().classes("gap-1 w-full")

    def set_expanded(expanded: bool):
        page.expanded = expanded
        body.set_visibility(expanded)
        if expanded:
            controls.classes(remove="collapsed")
        else:
            controls.classes(add="collapsed")
        toggle_btn.props(f"icon={'expand_less' if expanded else 'expand_more'}")
        # Resize the map once the CSS transition has finished
        ui.timer(PANEL_TRANSITION_SECS, page.surface.invalidate_size, once=True)

    def toggle_controls():
        set_expanded(not page.expanded)

    async def load_capabilities():
        """Fetch capabilities and repopulate the workspace dropdown."""
        # Enter in the address field must not start a second fetch
        if page.controller.is_loading:
            return

        load_btn.disable()
        try:
            capabilities = await page.controller.load_capabilities(server_input.value or "")
        except DiscoveryError as e:
            ui.notify(str(e), type="negative", close_button="OK", timeout=0, multi_line=True)
            return
        finally:
            if not page.controller.is_loading:
                load_btn.enable()

        if capabilities is None:
            return

        workspace_select.options = workspace_options(capabilities)
        workspace_select.update()
        workspace_select.set_value("")
        workspace_selector.set_visibility(True)

        render_layers(page.controller.current_view())
        set_expanded(True)

    def on_workspace_change(workspace):
        render_layers(page.controller.on_workspace_selected(workspace))

    def on_layer_toggle(full_name: str, checked: bool):
        page.controller.on_layer_toggled(full_name, checked)

    def render_layers(view: WorkspaceView):
        """Render the layer list for a workspace selection."""
        layer_list.clear()

        with layer_list:
            ui.label(view.heading).classes("font-bold text-gray-800")

            if not view.is_selection:
                ui.label(view.message).classes("text-sm text-gray-600")
                if view.reference_workspaces:
                    with ui.column().classes("gap-0 pl-4"):
                        for workspace in view.reference_workspaces:
                            ui.label(f"• {workspace}").classes("text-sm font-mono")
                return

            for layer in view.layers:
                with ui.row().classes("layer-item items-center w-full no-wrap"):
                    ui.checkbox(
                        layer.label,
                        value=page.controller.is_layer_active(layer.full_name),
                        on_change=lambda e, name=layer.full_name: on_layer_toggle(name, e.value),
                    ).props(f'dense id="layer-{layer.full_name}"').tooltip(layer.full_name)

            if view.message:
                ui.label(view.message).classes("text-sm text-gray-500")
