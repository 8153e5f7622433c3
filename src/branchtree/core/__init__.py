"""
Core branchtree components.

This package provides the tree specification model and the type
definitions shared by the scaffold emitter and the structural checks.
"""

from branchtree.core.tree_node import NodeKind, TreeNode
from branchtree.core.types import (
    DescriptionPath,
    IdentifierPath,
    ModelSource,
    Severity,
)

__all__ = [
    "NodeKind",
    "TreeNode",
    "DescriptionPath",
    "IdentifierPath",
    "ModelSource",
    "Severity",
]
