"""
canvas.py — SVG Tree Renderer
==============================
Pure rendering function: tree + visited set + theme → SVG string.

The renderer consumes:
  • root     – the laid-out tree (node positions already assigned)
  • visited  – ids of nodes the traversal has reached so far
  • theme    – light or dark palette
  • config   – canvas size and node geometry

Design decisions:
  - NO mutation.  The caller passes in everything and gets a string back.
  - layout_nodes() is the visitor: it pairs each node with its parent's
    position and its visited flag.  It is plain data and is tested on
    its own.
  - Nodes without a position are skipped silently, together with the
    edge that would lead to them.
"""

from dataclasses import dataclass
from html import escape
from typing import AbstractSet, List, Optional, Tuple

from bintree import TreeNode
from ui.theme import Theme, LIGHT


# ---------------------------------------------------------------------------
# Visual Config — dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    width:  int = 600
    height: int = 350

    node_radius:       int = 25
    node_stroke_width: int = 3
    node_label_size:   int = 18
    node_label_weight: str = "600"

    edge_width: int = 2


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Visitor
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PlacedNode:
    node_id:  str
    value:    int
    x:        float
    y:        float
    visited:  bool
    parent:   Optional[Tuple[float, float]] = None


def layout_nodes(root: Optional[TreeNode], visited: AbstractSet[str] = frozenset()) -> List[PlacedNode]:
    """Preorder list of every renderable node."""
    placed: List[PlacedNode] = []
    _walk(root, None, visited, placed)
    return placed


def _walk(
    node: Optional[TreeNode],
    parent: Optional[Tuple[float, float]],
    visited: AbstractSet[str],
    out: List[PlacedNode],
) -> None:
    if node is None or not node.is_positioned:
        return
    out.append(PlacedNode(
        node_id=node.id,
        value=node.value,
        x=node.x,
        y=node.y,
        visited=node.id in visited,
        parent=parent,
    ))
    _walk(node.left, (node.x, node.y), visited, out)
    _walk(node.right, (node.x, node.y), visited, out)


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_tree(
    root: Optional[TreeNode],
    visited: AbstractSet[str] = frozenset(),
    theme: Theme = LIGHT,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        root    : The tree to render (None → empty canvas).
        visited : Node ids drawn in the "visited" colours.
        theme   : Colour palette.
        config  : Canvas geometry.
    """
    placed = layout_nodes(root, visited)

    svg_parts = [
        f'<svg width="100%" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" class="tree-canvas">'
    ]

    # -- edges (draw first so nodes sit on top) --
    for p in placed:
        if p.parent is not None:
            svg_parts.append(_render_edge(p.parent, (p.x, p.y), theme, config))

    # -- nodes --
    for p in placed:
        svg_parts.append(_render_node(p, theme, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(p: PlacedNode, theme: Theme, config: CanvasConfig) -> str:
    if p.visited:
        fill, stroke, text = theme.visited_fill, theme.visited_stroke, theme.visited_text
        state = "visited"
    else:
        fill, stroke, text = theme.unvisited_fill, theme.unvisited_stroke, theme.unvisited_text
        state = "unvisited"

    parts = [
        f'<g class="node {state}" data-id="{escape(p.node_id)}">',
        f'  <circle cx="{p.x}" cy="{p.y}" r="{config.node_radius}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{config.node_stroke_width}"/>',
        f'  <text x="{p.x}" y="{p.y + 5}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-weight="{config.node_label_weight}" '
        f'fill="{text}">{p.value}</text>',
        '</g>',
    ]
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(
    start: Tuple[float, float],
    end: Tuple[float, float],
    theme: Theme,
    config: CanvasConfig,
) -> str:
    x1, y1 = start
    x2, y2 = end
    return (
        f'<line class="edge" x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
        f'stroke="{theme.edge}" stroke-width="{config.edge_width}"/>'
    )
