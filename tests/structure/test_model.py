"""
Tests for structural model navigation.
"""

from branchtree.core.tree_node import NodeKind
from branchtree.structure import StructuralModel, StructuralNode


def make_model():
    return StructuralModel(
        root=StructuralNode(
            identifier="",
            kind=NodeKind.BRANCH,
            children=[
                StructuralNode(
                    "paused",
                    NodeKind.BRANCH,
                    children=[StructuralNode("reverts", NodeKind.LEAF)],
                ),
                StructuralNode("succeeds", NodeKind.LEAF),
            ],
        ),
        source="actual",
    )


class TestStructuralModel:
    """Tests for find, walk and shape."""

    def test_find(self):
        model = make_model()

        assert model.find(()) is model.root
        assert model.find(("paused", "reverts")).kind == NodeKind.LEAF
        assert model.find(("paused", "missing")) is None
        assert model.find(("succeeds", "anything")) is None

    def test_walk_is_pre_order(self):
        paths = [path for path, _ in make_model().walk()]
        assert paths == [("paused",), ("paused", "reverts"), ("succeeds",)]

    def test_leaf_paths(self):
        assert make_model().leaf_paths() == [("paused", "reverts"), ("succeeds",)]

    def test_shape_ignores_descriptions_and_lines(self):
        """Shapes compare identifiers, kinds and nesting only."""
        model = make_model()
        other = make_model()
        other.root.children[1].description = "it succeeds"
        other.root.children[1].line = 42

        assert model.shape() == other.shape()
