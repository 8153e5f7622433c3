"""
Property-based tests for scaffold generation and structural checks.

Random well-formed trees are generated and the round trip through emission,
extraction and validation is checked for each of them.
"""

import copy
import keyword

from hypothesis import given, settings, strategies as st

from branchtree import BranchTreeConfig, DiffKind, NodeKind, TreeNode, check, scaffold
from branchtree.parsing import extract_structure
from branchtree.scaffold import emit
from branchtree.structure import build_expected_model
from branchtree.validation import validate


# ============================================================================
# Strategies for generating test data
# ============================================================================

# Words, separators, punctuation, quoting and stray control characters
DESCRIPTION_ALPHABET = "abcxyzABCXYZ0129 _-.,'\"()\\é\x00\x07\u200b"

PREFIXES = ["", "when ", "given ", "it ", "It should ", "WHEN "]


@st.composite
def description_strategy(draw):
    """Generate a description with an optional BDD keyword."""
    prefix = draw(st.sampled_from(PREFIXES))
    body = draw(st.text(alphabet=DESCRIPTION_ALPHABET, min_size=0, max_size=40))
    return prefix + body


@st.composite
def tree_strategy(draw, depth=3):
    """Generate a well-formed branch with up to ``depth`` levels below it."""
    description = draw(description_strategy())
    child_count = draw(st.integers(min_value=1, max_value=4))
    children = []
    for _ in range(child_count):
        if depth > 0 and draw(st.booleans()):
            children.append(draw(tree_strategy(depth=depth - 1)))
        else:
            details = draw(st.lists(description_strategy(), max_size=2))
            children.append(TreeNode.leaf(draw(description_strategy()), *details))
    return TreeNode.branch(description, *children)


def sibling_groups(node):
    """Yield the identifier list of every scope in a structural model."""
    yield [child.identifier for child in node.children]
    for child in node.children:
        yield from sibling_groups(child)


# ============================================================================
# Properties
# ============================================================================


class TestEmissionProperties:
    """Properties of scaffold emission."""

    @given(tree=tree_strategy())
    @settings(max_examples=100, deadline=None)
    def test_emission_is_idempotent(self, tree):
        """The same tree always gives byte-identical output."""
        assert scaffold(tree) == scaffold(tree)

    @given(tree=tree_strategy())
    @settings(max_examples=100, deadline=None)
    def test_output_is_valid_python(self, tree):
        """Scaffolds always compile."""
        compile(emit(tree), "<scaffold>", "exec")

    @given(tree=tree_strategy())
    @settings(max_examples=100, deadline=None)
    def test_identifiers_are_unique_and_usable(self, tree):
        """Sibling identifiers never collide and always form valid names."""
        model = build_expected_model(tree)

        for identifiers in sibling_groups(model.root):
            assert len(identifiers) == len(set(identifiers))
            for identifier in identifiers:
                assert identifier.isidentifier()
                assert not keyword.iskeyword(identifier)
                assert ("test_" + identifier).isidentifier()

    @given(tree=tree_strategy(), max_length=st.integers(min_value=8, max_value=24))
    @settings(max_examples=100, deadline=None)
    def test_identifiers_respect_length_limit(self, tree, max_length):
        """No generated identifier is longer than the configured limit."""
        config = BranchTreeConfig(max_identifier_length=max_length)
        model = build_expected_model(tree, config)

        for identifiers in sibling_groups(model.root):
            assert len(identifiers) == len(set(identifiers))
            assert all(len(identifier) <= max_length for identifier in identifiers)


class TestRoundTripProperties:
    """Properties of extraction and validation of fresh scaffolds."""

    @given(tree=tree_strategy())
    @settings(max_examples=100, deadline=None)
    def test_extraction_matches_expected_model(self, tree):
        """Reading a scaffold back gives the expected structure."""
        assert extract_structure(emit(tree)).shape() == build_expected_model(tree).shape()

    @given(tree=tree_strategy())
    @settings(max_examples=100, deadline=None)
    def test_fresh_scaffold_is_conformant(self, tree):
        """Validating a scaffold against its own tree reports nothing."""
        assert check(tree, scaffold(tree)).conformant

    @given(tree=tree_strategy())
    @settings(max_examples=100, deadline=None)
    def test_fresh_scaffold_keeps_error_expectations(self, tree):
        """Every emitted test that should raise is recognized as raising."""
        config = BranchTreeConfig(check_error_expectations=True)
        assert check(tree, scaffold(tree, config), config).conformant

    @given(tree=tree_strategy(), data=st.data())
    @settings(max_examples=100, deadline=None)
    def test_removed_leaf_is_reported_missing(self, tree, data):
        """Dropping any one test yields exactly one MISSING entry at its path."""
        expected = build_expected_model(tree)
        leaf_path = data.draw(st.sampled_from(expected.leaf_paths()))

        actual = copy.deepcopy(expected)
        actual.source = "actual"
        parent = actual.find(leaf_path[:-1])
        parent.children = [c for c in parent.children if c.identifier != leaf_path[-1]]

        report = validate(expected, actual)

        assert [(e.kind, e.path) for e in report] == [(DiffKind.MISSING, leaf_path)]
        assert expected.find(leaf_path).kind == NodeKind.LEAF
