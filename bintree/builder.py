"""
builder.py — Tree Construction & Layout
========================================
Everything that creates a tree or places it on the canvas.

Responsibilities:
  1. The fixed sample tree                  (1 / 2 3 / 4 5 6 7)
  2. Random tree generation                 (shuffled value pool, coin-flip branching)
  3. Layout                                 (x/y per node, spacing halved per level)

Design decisions:
  - The random generator consumes a pre-shuffled deque that is passed
    explicitly down the recursion.  Each successful branch pops exactly
    one value, so no value can appear twice.
  - Random generation is intentionally lossy: if the coin flips fail,
    some pool values are never used and the tree can be a single node.
  - Layout mutates x/y in place and nothing else.
"""

import logging
import random
from collections import deque
from typing import Deque, Iterable, Optional

from bintree.node import TreeNode

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Layout constants (canvas units)
# ---------------------------------------------------------------------------
ROOT_X:        float = 300
ROOT_Y:        float = 50
ROOT_SPACING:  float = 140
VERTICAL_STEP: float = 80

# random-tree defaults
DEFAULT_VALUES             = (1, 2, 3, 4, 5, 6, 7)
DEFAULT_MAX_DEPTH          = 3
DEFAULT_BRANCH_PROBABILITY = 0.7


# ---------------------------------------------------------------------------
# Sample tree
# ---------------------------------------------------------------------------
def build_sample_tree() -> TreeNode:
    """
    The fixed complete tree used on first load:

              1
            /   \\
           2     3
          / \\   / \\
         4   5 6   7
    """
    return TreeNode(
        1,
        left=TreeNode(2, left=TreeNode(4), right=TreeNode(5)),
        right=TreeNode(3, left=TreeNode(6), right=TreeNode(7)),
    )


# ---------------------------------------------------------------------------
# Random tree
# ---------------------------------------------------------------------------
def build_random_tree(
    values: Iterable[int] = DEFAULT_VALUES,
    max_depth: int = DEFAULT_MAX_DEPTH,
    branch_probability: float = DEFAULT_BRANCH_PROBABILITY,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> TreeNode:
    """
    Shuffle the value pool, take the first value as the root, then grow
    children by independent coin flips until `max_depth` is reached or
    the pool runs dry.

    Args:
        values             : Pool of distinct integers.
        max_depth          : Deepest level a node may sit on (root = 0).
        branch_probability : Chance of attaching each child.
        seed               : Reproducible shuffle / coin flips.
        rng                : Caller-owned generator (overrides `seed`).

    Raises:
        ValueError on an empty pool, duplicate values, a negative depth or
        a probability outside [0, 1].
    """
    pool_list = list(values)
    if not pool_list:
        raise ValueError("Value pool must not be empty")
    if len(set(pool_list)) != len(pool_list):
        raise ValueError(f"Value pool contains duplicates: {pool_list}")
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    if not 0.0 <= branch_probability <= 1.0:
        raise ValueError(f"branch_probability must be in [0, 1], got {branch_probability}")

    rng = rng or random.Random(seed)
    rng.shuffle(pool_list)
    pool: Deque[int] = deque(pool_list)

    root = _grow(pool, 0, max_depth, branch_probability, rng)
    logger.debug("Random tree built, %d of %d values unused", len(pool), len(pool_list))
    return root


def _grow(
    pool: Deque[int],
    depth: int,
    max_depth: int,
    branch_probability: float,
    rng: random.Random,
) -> TreeNode:
    node = TreeNode(pool.popleft())

    if depth < max_depth and pool:
        if rng.random() < branch_probability and pool:
            node.left = _grow(pool, depth + 1, max_depth, branch_probability, rng)
        if rng.random() < branch_probability and pool:
            node.right = _grow(pool, depth + 1, max_depth, branch_probability, rng)

    return node


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
def assign_layout(
    root: Optional[TreeNode],
    x: float = ROOT_X,
    y: float = ROOT_Y,
    spacing: float = ROOT_SPACING,
    vertical_step: float = VERTICAL_STEP,
) -> None:
    """
    Depth-first placement.  Children sit `vertical_step` below their
    parent and `spacing` to either side; spacing halves each level so
    left-child x < parent x < right-child x always holds.
    """
    if root is None:
        return

    root.x = x
    root.y = y

    if root.left is not None:
        assign_layout(root.left, x - spacing, y + vertical_step, spacing / 2, vertical_step)
    if root.right is not None:
        assign_layout(root.right, x + spacing, y + vertical_step, spacing / 2, vertical_step)


def new_tree(random_tree: bool = False, seed: Optional[int] = None) -> TreeNode:
    """Build (sample or random) and lay out in one call."""
    root = build_random_tree(seed=seed) if random_tree else build_sample_tree()
    assign_layout(root)
    return root
