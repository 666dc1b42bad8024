"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – play/pause, next step, random tree, reset
  • theme_toggle        – light/dark switch
  • legend              – visited / unvisited swatches
  • result_panel        – one badge per value in traversal order
  • step_description    – what the current step did
  • pseudocode_viewer   – inorder routine with the live line highlighted

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Colours come from CSS variables set by the page (see ui.theme.theme_css),
    so panels do not need the theme object.
"""

from html import escape
from typing import List, Sequence


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = -1,
    total_steps: int = 0,
    is_finished: bool = False,
) -> str:
    play_icon = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"
    play_class = "btn-danger" if is_playing else "btn-primary"
    shown_step = current_step + 1

    return f"""
    <div class="panel playback-controls">
      <div class="button-row">
        <button id="btn-play" class="{play_class}" title="{play_label}">{play_icon} {play_label}</button>
        <button id="btn-next" class="btn-outline" title="Next step" {'disabled' if is_finished else ''}>⏭ Next Step</button>
        <button id="btn-random" class="btn-outline" title="Generate a random tree">🔀 Random</button>
        <button id="btn-reset" class="btn-outline" title="Reset traversal">↺ Reset</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{shown_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Theme Toggle
# ---------------------------------------------------------------------------
def theme_toggle(is_dark: bool = False) -> str:
    icon = "☀" if is_dark else "☾"
    title = "Switch to light mode" if is_dark else "Switch to dark mode"
    return f'<button id="btn-theme" class="btn-ghost" title="{title}">{icon}</button>'


# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
def legend() -> str:
    return """
    <div class="legend">
      <div class="legend-item"><span class="swatch swatch-unvisited"></span>Unvisited</div>
      <div class="legend-item"><span class="swatch swatch-visited"></span>Visited</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Traversal Result
# ---------------------------------------------------------------------------
def result_panel(result: Sequence[int] = ()) -> str:
    if not result:
        badges = '<span class="placeholder">No nodes visited yet</span>'
    else:
        badges = "".join(f'<span class="badge">{value}</span>' for value in result)

    return f"""
    <div class="panel result-panel">
      <h3>Inorder Traversal Result:</h3>
      <div class="badges">{badges}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Step Description
# ---------------------------------------------------------------------------
def step_description(text: str = "") -> str:
    return f'<div class="explanation-text">{escape(text)}</div>'


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
) -> str:
    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """
