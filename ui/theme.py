"""
theme.py — Light / Dark Palettes
=================================
One Theme per colour scheme.  The canvas and the panels look colours up
here instead of hard-coding them, so toggling the theme is just passing
a different object.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Theme:
    name:              str
    page_bg:           str
    page_text:         str
    card_bg:           str
    card_border:       str
    canvas_bg:         str
    edge:              str
    unvisited_fill:    str
    unvisited_stroke:  str
    unvisited_text:    str
    visited_fill:      str
    visited_stroke:    str
    visited_text:      str
    badge_bg:          str
    badge_text:        str
    result_bg:         str
    result_border:     str
    result_heading:    str
    muted_text:        str


LIGHT = Theme(
    name="light",
    page_bg="#f9fafb",
    page_text="#111827",
    card_bg="#ffffff",
    card_border="#e5e7eb",
    canvas_bg="#f3f4f6",
    edge="#e5e7eb",
    unvisited_fill="#f3f4f6",
    unvisited_stroke="#d1d5db",
    unvisited_text="#374151",
    visited_fill="#22c55e",
    visited_stroke="#16a34a",
    visited_text="#ffffff",
    badge_bg="#e5e7eb",
    badge_text="#111827",
    result_bg="#f0fdf4",
    result_border="#bbf7d0",
    result_heading="#14532d",
    muted_text="#16a34a",
)

DARK = Theme(
    name="dark",
    page_bg="#111827",
    page_text="#ffffff",
    card_bg="#1f2937",
    card_border="#374151",
    canvas_bg="#111827",
    edge="#374151",
    unvisited_fill="#1f2937",
    unvisited_stroke="#4b5563",
    unvisited_text="#e5e7eb",
    visited_fill="#22c55e",
    visited_stroke="#16a34a",
    visited_text="#ffffff",
    badge_bg="#2563eb",
    badge_text="#ffffff",
    result_bg="#1f2937",
    result_border="#4b5563",
    result_heading="#ffffff",
    muted_text="#d1d5db",
)

THEMES: Dict[str, Theme] = {t.name: t for t in (LIGHT, DARK)}


def get_theme(name: str) -> Theme:
    """Unknown names fall back to the light palette."""
    return THEMES.get(name, LIGHT)


def theme_css(theme: Theme) -> str:
    """CSS custom properties consumed by the page stylesheet."""
    return (
        ":root {"
        f" --page-bg: {theme.page_bg};"
        f" --page-text: {theme.page_text};"
        f" --card-bg: {theme.card_bg};"
        f" --card-border: {theme.card_border};"
        f" --canvas-bg: {theme.canvas_bg};"
        f" --unvisited-fill: {theme.unvisited_fill};"
        f" --unvisited-stroke: {theme.unvisited_stroke};"
        f" --visited-fill: {theme.visited_fill};"
        f" --visited-stroke: {theme.visited_stroke};"
        f" --badge-bg: {theme.badge_bg};"
        f" --badge-text: {theme.badge_text};"
        f" --result-bg: {theme.result_bg};"
        f" --result-border: {theme.result_border};"
        f" --result-heading: {theme.result_heading};"
        f" --muted-text: {theme.muted_text};"
        " }"
    )
