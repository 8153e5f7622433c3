"""
TreeNode model for branching tree specifications.

This module contains the TreeNode class that represents the AST handed over
by an external tree-specification parser: a recursive union of branches
(conditions) and leaves (assertions), each parent owning its children.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(Enum):
    """Kind tag shared by tree nodes and structural model nodes."""

    BRANCH = "branch"
    LEAF = "leaf"


class TreeNode(BaseModel):
    """
    A branch or a leaf of a branching tree specification.

    Nodes are immutable once built. Shape rules (a leaf has no children, a
    branch has at least one) are not enforced here; the
    scaffold emitter rejects malformed trees with a GenerationError that
    points at the offending node.

    Params:
        description: Condition text for a branch, assertion text for a leaf
        kind: Whether this node is a BRANCH or a LEAF
        children: Ordered child nodes (empty for leaves)
        details: Extra description lines attached to a leaf
    """

    model_config = ConfigDict(frozen=True)

    description: str
    kind: NodeKind
    children: tuple["TreeNode", ...] = Field(default_factory=tuple)
    details: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def branch(cls, description: str, *children: "TreeNode") -> "TreeNode":
        """Build a branch node owning the given children."""
        return cls(description=description, kind=NodeKind.BRANCH, children=children)

    @classmethod
    def leaf(cls, description: str, *details: str) -> "TreeNode":
        """Build a leaf node with optional detail lines."""
        return cls(description=description, kind=NodeKind.LEAF, details=details)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TreeNode":
        """
        Build a tree from plain parser output.

        Accepts mappings with a ``description`` key, an optional ``children``
        list of nested mappings and an optional ``details`` list. The
        ``kind`` key may be given explicitly ("branch" or "leaf"); when it
        is absent, nodes with children are branches and nodes without are
        leaves.

        Params:
            data: Mapping describing the root node

        Returns:
            The root TreeNode

        Raises:
            ValueError: If a mapping lacks a description or names an unknown kind
        """
        if "description" not in data:
            raise ValueError(f"Tree node mapping has no description: {dict(data)!r}")

        children = tuple(cls.from_dict(child) for child in data.get("children", ()))
        kind = data.get("kind")
        if kind is None:
            kind = NodeKind.BRANCH if children else NodeKind.LEAF
        elif not isinstance(kind, NodeKind):
            kind = NodeKind(kind)

        return cls(
            description=data["description"],
            kind=kind,
            children=children,
            details=tuple(data.get("details", ())),
        )

    @property
    def is_leaf(self) -> bool:
        """Check if this node is a leaf."""
        return self.kind == NodeKind.LEAF

    @property
    def is_branch(self) -> bool:
        """Check if this node is a branch."""
        return self.kind == NodeKind.BRANCH

    def count_leaves(self) -> int:
        """Count the leaves of this subtree."""
        if self.is_leaf:
            return 1
        return sum(child.count_leaves() for child in self.children)
