"""
Structural model shared by expected and actual sides of a check.

A structural model is an ordered forest of identifiers with kind tags. The
expected model is built from a tree specification, the actual model is
extracted from test source text; the validator only ever compares the two.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from branchtree.core.tree_node import NodeKind
from branchtree.core.types import IdentifierPath, ModelSource


@dataclass
class StructuralNode:
    """
    Node in a structural model.

    Params:
        identifier: Canonical identifier (without the emitted Test_/test_ prefix)
        kind: BRANCH for a nesting scope, LEAF for a test unit
        children: Ordered child nodes
        description: Recovered or specified description, for reporting only
        line: Line of the declaration in the test file (actual models only)
        raises: Whether a leaf body expects an exception (actual models only)
    """

    identifier: str
    kind: NodeKind
    children: list["StructuralNode"] = field(default_factory=list)
    description: str | None = None
    line: int | None = None
    raises: bool = False

    def child(self, identifier: str) -> "StructuralNode | None":
        """Return the first child with the given identifier, if any."""
        for node in self.children:
            if node.identifier == identifier:
                return node
        return None

    def shape(self) -> tuple:
        """Return the comparable (identifier, kind, children) shape of this subtree."""
        return (
            self.identifier,
            self.kind,
            tuple(node.shape() for node in self.children),
        )


@dataclass
class StructuralModel:
    """
    Root of a structural model.

    The root node stands for the unit under test (the test module); its
    identifier does not take part in comparisons or entry paths.

    Params:
        root: Root scope node
        source: Whether the model was built from the tree or from source text
    """

    root: StructuralNode
    source: ModelSource = "expected"

    def find(self, path: IdentifierPath) -> StructuralNode | None:
        """
        Look up a node by identifier path.

        Params:
            path: Identifiers from the root scope down to the node

        Returns:
            The node, the root for an empty path, or None when absent
        """
        node = self.root
        for identifier in path:
            node = node.child(identifier)
            if node is None:
                return None
        return node

    def walk(self) -> Iterator[tuple[IdentifierPath, StructuralNode]]:
        """Yield ``(path, node)`` for every non-root node in pre-order."""

        def visit(
            node: StructuralNode, prefix: IdentifierPath
        ) -> Iterator[tuple[IdentifierPath, StructuralNode]]:
            for child in node.children:
                path = (*prefix, child.identifier)
                yield path, child
                yield from visit(child, path)

        yield from visit(self.root, ())

    def leaf_paths(self) -> list[IdentifierPath]:
        """Return the paths of all leaves in pre-order."""
        return [path for path, node in self.walk() if node.kind == NodeKind.LEAF]

    def shape(self) -> tuple:
        """Return the comparable shape of the root's children."""
        return tuple(node.shape() for node in self.root.children)
