"""
Unit tests for the inorder planner.
"""

from collections import Counter

import pytest

from algorithms import plan_inorder, leftmost, start_hint, PSEUDOCODE, VISIT_LINE, VISIT_ROOT
from bintree import TreeNode, build_sample_tree, build_random_tree, node_count, node_values


def test_sample_tree_order():
    plan = plan_inorder(build_sample_tree())

    assert [s.value for s in plan] == [4, 2, 5, 1, 6, 3, 7]
    assert [s.node_id for s in plan] == ["4", "2", "5", "1", "6", "3", "7"]


def test_steps_are_numbered_visits():
    plan = plan_inorder(build_sample_tree())

    assert [s.step_number for s in plan] == list(range(7))
    assert all(s.action == VISIT_ROOT for s in plan)
    assert all(s.pseudocode_line == VISIT_LINE for s in plan)
    assert PSEUDOCODE[VISIT_LINE].strip() == "visit(node)"


def test_explanation_mentions_node():
    first = plan_inorder(build_sample_tree())[0]
    assert "node 4" in first.explanation


def test_empty_tree_gives_empty_plan():
    assert plan_inorder(None) == ()


def test_plan_is_immutable():
    plan = plan_inorder(build_sample_tree())

    assert isinstance(plan, tuple)
    with pytest.raises(AttributeError):
        plan[0].value = 100


def test_idempotent():
    root = build_sample_tree()
    assert plan_inorder(root) == plan_inorder(root)


@pytest.mark.parametrize("seed", range(100))
def test_random_tree_values_preserved(seed):
    root = build_random_tree(seed=seed)
    plan = plan_inorder(root)

    assert len(plan) == node_count(root)
    assert Counter(s.value for s in plan) == Counter(node_values(root))


def test_left_skewed_tree():
    root = TreeNode(3, left=TreeNode(2, left=TreeNode(1)))
    assert [s.value for s in plan_inorder(root)] == [1, 2, 3]


def test_leftmost_and_hint():
    root = build_sample_tree()

    assert leftmost(root).value == 4
    assert "(4)" in start_hint(root)
    assert leftmost(None) is None
    assert "empty" in start_hint(None)
