"""
Design System Theme for the WMS panel.

Full-screen map with a floating, collapsible controls card.
"""

from nicegui import ui

# =============================================================================
# DESIGN SYSTEM COLORS
# =============================================================================

COLORS = {
    "blue_primary": "#0071BC",
    "navy": "#053657",
    "gray": "#626F86",
    "gray_light": "#e9ecef",
    "bg": "#f8f9fa",
    "white": "#ffffff",
}

# =============================================================================
# CUSTOM CSS
# =============================================================================

CUSTOM_CSS = """
:root {
    --ds-blue-primary: #0071BC;
    --ds-navy: #053657;
    --ds-gray: #626F86;
    --ds-gray-light: #e9ecef;
}

body, .q-page, .nicegui-content {
    font-family: 'Open Sans', Arial, sans-serif !important;
    padding: 0 !important;
}

/* Map fills the viewport behind the controls */
.map-canvas {
    position: fixed !important;
    inset: 0;
    width: 100vw !important;
    height: 100vh !important;
    z-index: 0;
}

/* Floating controls card */
.controls {
    position: fixed;
    top: 12px;
    right: 12px;
    z-index: 1000;
    width: 320px;
    max-height: calc(100vh - 24px);
    overflow-y: auto;
    border-radius: 3px !important;
    box-shadow: 0 1px 3px rgba(0,0,0,0.2) !important;
    transition: width 0.3s ease;
}

.controls.collapsed {
    width: 180px;
}

.controls-title {
    font-weight: 700;
    color: var(--ds-navy);
}

.layer-item {
    padding: 2px 0;
    border-bottom: 1px solid var(--ds-gray-light);
}

.mono, .font-mono {
    font-family: 'Monaco', 'Courier New', monospace !important;
}
"""


def apply_theme():
    """Apply the design system theme to a NiceGUI page."""
    ui.add_head_html('''
        <link rel="preconnect" href="https://fonts.googleapis.com">
        <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
        <link href="https://fonts.googleapis.com/css2?family=Open+Sans:wght@400;600;700&display=swap" rel="stylesheet">
    ''')
    ui.add_head_html(f'<style>{CUSTOM_CSS}</style>')
