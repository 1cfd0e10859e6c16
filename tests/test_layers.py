from __future__ import annotations

from wmspanel.layers import LayerStateManager
from wmspanel.models import TileSourceConfig

SERVER = "http://localhost:8080/geoserver"


def test_toggle_on_adds_tiled_wms_layer(surface):
    manager = LayerStateManager(surface)

    changed = manager.toggle("ws1:roads", SERVER, True)

    assert changed is True
    assert manager.active_names == ["ws1:roads"]
    assert surface.configs == [
        TileSourceConfig(
            base_url="http://localhost:8080/geoserver/wms",
            layer_identifier="ws1:roads",
            tiled=True,
            server_type="geoserver",
        )
    ]
    assert manager.get("ws1:roads").layer == surface.stack[-1]


def test_toggle_on_off_cycles_restore_stack(surface):
    manager = LayerStateManager(surface)
    manager.toggle("ws1:rivers", SERVER, True)
    before = list(surface.stack)

    for _ in range(5):
        manager.toggle("ws1:roads", SERVER, True)
        assert len(surface.stack) == len(before) + 1
        manager.toggle("ws1:roads", SERVER, False)
        assert surface.stack == before

    assert manager.active_names == ["ws1:rivers"]


def test_toggle_off_removes_exact_handle(surface):
    manager = LayerStateManager(surface)
    manager.toggle("ws1:roads", SERVER, True)
    manager.toggle("ws1:rivers", SERVER, True)
    rivers = manager.get("ws1:rivers").layer

    manager.toggle("ws1:roads", SERVER, False)

    assert surface.stack == ["basemap", rivers]


def test_toggle_off_unknown_layer_is_noop(surface):
    manager = LayerStateManager(surface)

    changed = manager.toggle("ws1:never", SERVER, False)

    assert changed is False
    assert surface.stack == ["basemap"]
    assert manager.active_names == []


def test_toggle_on_twice_keeps_single_entry(surface):
    manager = LayerStateManager(surface)

    assert manager.toggle("ws1:roads", SERVER, True) is True
    assert manager.toggle("ws1:roads", SERVER, True) is False

    assert len(surface.stack) == 2
    assert manager.active_names == ["ws1:roads"]


def test_undiscovered_layer_is_not_turned_on(surface):
    manager = LayerStateManager(surface, is_known=lambda name: name == "ws1:roads")

    assert manager.toggle("ws1:ghost", SERVER, True) is False
    assert manager.toggle("ws1:roads", SERVER, True) is True

    assert manager.active_names == ["ws1:roads"]


def test_clear_removes_everything(surface):
    manager = LayerStateManager(surface)
    manager.toggle("ws1:roads", SERVER, True)
    manager.toggle("ws1:rivers", SERVER, True)

    manager.clear()

    assert surface.stack == ["basemap"]
    assert not manager.is_active("ws1:roads")


def test_leaflet_options_carry_layer_and_tiling():
    config = TileSourceConfig(base_url=f"{SERVER}/wms", layer_identifier="topp:states")

    assert config.to_leaflet_options() == {
        "layers": "topp:states",
        "format": "image/png",
        "transparent": True,
        "version": "1.3.0",
        "tiled": True,
    }
