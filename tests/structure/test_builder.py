"""
Tests for expected structural model construction.
"""

import pytest

from branchtree import BranchTreeConfig, GenerationError, NodeKind, TreeNode
from branchtree.exceptions import ErrorLevel
from branchtree.naming import strategy as naming_strategy
from branchtree.structure import build_expected_model, check_tree_shape


class TestBuildExpectedModel:
    """Tests for build_expected_model."""

    def test_scenario_model(self, scenario_tree):
        """Identifiers, kinds and order follow the tree."""
        model = build_expected_model(scenario_tree)

        assert model.source == "expected"
        assert model.shape() == (
            ("condition_a", NodeKind.BRANCH, (("reverts", NodeKind.LEAF, ()),)),
            ("succeeds", NodeKind.LEAF, ()),
        )

    def test_descriptions_are_attached(self, scenario_tree):
        """Each structural node keeps its tree description for reporting."""
        model = build_expected_model(scenario_tree)

        assert model.root.description == "HashPair"
        assert model.find(("condition_a",)).description == "ConditionA"
        assert model.find(("condition_a", "reverts")).description == "it reverts"

    def test_collisions_are_resolved_per_scope(self, nested_tree):
        """Only siblings are disambiguated against each other."""
        model = build_expected_model(nested_tree)

        assert model.leaf_paths() == [
            ("first_arg_is_smaller_than_second_arg", "should_match_the_result_of_hash_a_b"),
            ("first_arg_is_bigger_than_second_arg", "the_contract_is_paused", "should_revert"),
            ("first_arg_is_bigger_than_second_arg", "should_match_the_result_of_hash_b_a"),
            ("first_arg_is_bigger_than_second_arg", "should_match_the_result_of_hash_b_a_2"),
        ]

    def test_same_names_in_different_scopes_are_kept(self):
        """Identical descriptions under different parents keep the base name."""
        tree = TreeNode.branch(
            "Root",
            TreeNode.branch("when a", TreeNode.leaf("it works")),
            TreeNode.branch("when b", TreeNode.leaf("it works")),
        )
        model = build_expected_model(tree)

        assert model.leaf_paths() == [("a", "works"), ("b", "works")]

    def test_branch_and_leaf_siblings_share_one_namespace(self):
        """A branch and a leaf with the same base name are disambiguated."""
        tree = TreeNode.branch(
            "Root",
            TreeNode.branch("when paused", TreeNode.leaf("it reverts")),
            TreeNode.leaf("it paused"),
        )
        model = build_expected_model(tree)

        assert [node.identifier for node in model.root.children] == ["paused", "paused_2"]

    def test_configured_length_is_used(self):
        """The naming strategy comes from the configuration."""
        tree = TreeNode.branch("Root", TreeNode.leaf("it alpha beta gamma"))
        model = build_expected_model(tree, BranchTreeConfig(max_identifier_length=10))

        assert model.leaf_paths() == [("alpha_beta",)]


class TestCheckTreeShape:
    """Tests for check_tree_shape."""

    def test_well_formed_tree_passes(self, nested_tree):
        check_tree_shape(nested_tree)

    def test_malformed_tree_fails(self):
        with pytest.raises(GenerationError):
            check_tree_shape(TreeNode.branch("Root", TreeNode.branch("when empty")))


class TestErrorDetail:
    """Tests for the detail level of generation errors."""

    @pytest.fixture
    def empty_nested_branch(self):
        return TreeNode.branch(
            "Root",
            TreeNode.branch("when paused", TreeNode.branch("when empty")),
        )

    def test_user_level_shows_descriptions_only(self, empty_nested_branch):
        with pytest.raises(GenerationError) as exc_info:
            build_expected_model(empty_nested_branch)

        message = str(exc_info.value)
        assert "'Root' > 'when paused' > 'when empty'" in message
        assert "identifier path" not in message

    def test_developer_level_adds_identifier_path(self, empty_nested_branch):
        config = BranchTreeConfig(error_level=ErrorLevel.DEVELOPER)

        with pytest.raises(GenerationError) as exc_info:
            build_expected_model(empty_nested_branch, config)

        assert exc_info.value.context.identifier_path == ("paused", "empty")
        assert "identifier path: paused.empty" in str(exc_info.value)

    def test_collision_error_carries_scope(self, monkeypatch):
        """Unresolvable collisions report the scope and the configured level."""
        monkeypatch.setattr(naming_strategy, "MAX_DISAMBIGUATOR", 1)
        tree = TreeNode.branch(
            "Root",
            TreeNode.branch("when x", TreeNode.leaf("it a"), TreeNode.leaf("it a")),
        )
        config = BranchTreeConfig(error_level=ErrorLevel.DEVELOPER)

        with pytest.raises(GenerationError) as exc_info:
            build_expected_model(tree, config)

        assert exc_info.value.path == ("Root", "when x", "it a")
        assert exc_info.value.error_level == ErrorLevel.DEVELOPER
        assert "identifier path: x" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, GenerationError)
