"""NiceGUI pages for the WMS panel."""
