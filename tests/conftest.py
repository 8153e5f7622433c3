"""
Shared test fixtures and utilities for the branchtree test suite.
"""

import pytest

from branchtree import BranchTreeConfig, Severity, TreeNode


@pytest.fixture
def scenario_tree():
    """Root with one condition holding a reverting leaf, then a sibling leaf.

    Usage:
        def test_something(scenario_tree):
            source = scaffold(scenario_tree)
    """
    return TreeNode.branch(
        "HashPair",
        TreeNode.branch("ConditionA", TreeNode.leaf("it reverts")),
        TreeNode.leaf("it succeeds"),
    )


@pytest.fixture
def nested_tree():
    """Tree with two levels of conditions, detail lines and a colliding leaf."""
    return TreeNode.branch(
        "hash_pair",
        TreeNode.branch(
            "when first arg is smaller than second arg",
            TreeNode.leaf(
                "it should match the result of hash(a, b)",
                "the result is deterministic",
            ),
        ),
        TreeNode.branch(
            "when first arg is bigger than second arg",
            TreeNode.branch(
                "given the contract is paused",
                TreeNode.leaf("it should revert"),
            ),
            TreeNode.leaf("it should match the result of hash(b, a)"),
            TreeNode.leaf("it should match the result of hash(b, a)"),
        ),
    )


@pytest.fixture
def warn_on_reorder():
    """Configuration that reports reordering without failing the check."""
    return BranchTreeConfig(reorder_severity=Severity.WARNING)
