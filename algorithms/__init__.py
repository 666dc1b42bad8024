"""
algorithms/
-----------
Traversal planning.

    from algorithms import plan_inorder, TraversalStep, PSEUDOCODE
"""

from algorithms.step    import TraversalStep, VISIT_ROOT
from algorithms.inorder import plan_inorder, leftmost, start_hint, PSEUDOCODE, VISIT_LINE

__all__ = [
    "TraversalStep",
    "VISIT_ROOT",
    "plan_inorder",
    "leftmost",
    "start_hint",
    "PSEUDOCODE",
    "VISIT_LINE",
]
