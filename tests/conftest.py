import pytest

from bintree import build_sample_tree, assign_layout


@pytest.fixture
def sample_tree():
    root = build_sample_tree()
    assign_layout(root, 300, 50, 140)
    return root
