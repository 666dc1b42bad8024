"""
inorder.py — Inorder Traversal Planner
=======================================
Computes the whole inorder traversal up front as an immutable tuple of
TraversalSteps.  Playback timing lives in the engine, not here.

Order at every level: left subtree fully, then the node, then the right
subtree fully.  Exactly one step per node.
"""

import logging
from typing import List, Optional, Tuple

from bintree import TreeNode
from algorithms.step import TraversalStep, VISIT_ROOT

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def inorder(node):",                # 0
    "    if node is None: return",       # 1
    "    inorder(node.left)",            # 2
    "    visit(node)",                   # 3
    "    inorder(node.right)",           # 4
]

VISIT_LINE = 3


# ---------------------------------------------------------------------------
# Planner
# ---------------------------------------------------------------------------
def plan_inorder(root: Optional[TreeNode]) -> Tuple[TraversalStep, ...]:
    """Return the inorder plan for `root`; the empty tree gives ()."""
    steps: List[TraversalStep] = []
    _collect(root, steps)
    logger.debug("Planned inorder traversal with %d step(s)", len(steps))
    return tuple(steps)


def _collect(node: Optional[TreeNode], steps: List[TraversalStep]) -> None:
    if node is None:
        return

    _collect(node.left, steps)

    steps.append(TraversalStep(
        step_number=len(steps),
        action=VISIT_ROOT,
        node_id=node.id,
        value=node.value,
        pseudocode_line=VISIT_LINE,
        explanation=f"Processing node {node.id} (value: {node.value}) - adding to result.",
    ))

    _collect(node.right, steps)


# ---------------------------------------------------------------------------
def leftmost(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """The node an inorder traversal visits first."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def start_hint(root: Optional[TreeNode]) -> str:
    """Text shown before the first step is taken."""
    first = leftmost(root)
    if first is None:
        return "The tree is empty - nothing to traverse."
    return (
        "Click 'Next Step' or 'Play' to start the inorder traversal "
        f"from the leftmost node ({first.value})."
    )
