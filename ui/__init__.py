"""
ui/
---
Presentation layer.

    from ui import render_tree, get_theme
    from ui import playback_controls, result_panel, …
"""

from ui.canvas import render_tree, layout_nodes, PlacedNode, CanvasConfig
from ui.theme  import Theme, LIGHT, DARK, get_theme, theme_css

from ui.controls import (
    playback_controls,
    theme_toggle,
    legend,
    result_panel,
    step_description,
    pseudocode_viewer,
)

__all__ = [
    "render_tree",
    "layout_nodes",
    "PlacedNode",
    "CanvasConfig",
    "Theme",
    "LIGHT",
    "DARK",
    "get_theme",
    "theme_css",
    "playback_controls",
    "theme_toggle",
    "legend",
    "result_panel",
    "step_description",
    "pseudocode_viewer",
]
