"""
bintree/
--------
Core data layer.  Public API:

    from bintree import TreeNode
    from bintree import build_sample_tree, build_random_tree, assign_layout
    from bintree import iter_nodes, node_count, tree_depth
"""

from bintree.node    import TreeNode
from bintree.builder import (
    build_sample_tree,
    build_random_tree,
    assign_layout,
    new_tree,
    ROOT_X,
    ROOT_Y,
    ROOT_SPACING,
    VERTICAL_STEP,
)
from bintree.queries import iter_nodes, node_count, node_values, tree_depth, find_node

__all__ = [
    "TreeNode",
    "build_sample_tree",
    "build_random_tree",
    "assign_layout",
    "new_tree",
    "ROOT_X",
    "ROOT_Y",
    "ROOT_SPACING",
    "VERTICAL_STEP",
    "iter_nodes",
    "node_count",
    "node_values",
    "tree_depth",
    "find_node",
]
