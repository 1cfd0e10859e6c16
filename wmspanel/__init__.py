"""
wmspanel - WMS Layer Control Panel
==================================

A NiceGUI control panel for browsing a GeoServer-style WMS endpoint:
- Discover workspaces and layers from WMS GetCapabilities
- Filter the layer list by workspace
- Toggle layers on/off over an OpenStreetMap base map (Leaflet)

Tiling, projection and compositing are handled by Leaflet in the browser.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
