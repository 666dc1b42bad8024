"""
queries.py — Read-only Tree Queries
====================================
Small helpers the planner, the renderer and the tests share.
All of them accept None (the empty tree) and never mutate the tree.
"""

from typing import Iterator, List, Optional

from bintree.node import TreeNode


def iter_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Preorder walk (node, left subtree, right subtree)."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # reversed so the left child is popped first
        stack.extend(reversed(node.children()))


def node_count(root: Optional[TreeNode]) -> int:
    return sum(1 for _ in iter_nodes(root))


def node_values(root: Optional[TreeNode]) -> List[int]:
    return [n.value for n in iter_nodes(root)]


def tree_depth(root: Optional[TreeNode]) -> int:
    """
    Number of edges on the longest root-to-leaf path.
    A single node has depth 0; the empty tree has depth -1.
    """
    if root is None:
        return -1
    return 1 + max(tree_depth(root.left), tree_depth(root.right))


def find_node(root: Optional[TreeNode], node_id: str) -> Optional[TreeNode]:
    for node in iter_nodes(root):
        if node.id == node_id:
            return node
    return None
