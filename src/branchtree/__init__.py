"""
branchtree - Branching Tree Technique scaffolds for pytest

branchtree turns a parsed branching tree specification into a pytest
scaffold and checks whether an existing test file still matches the shape
of its specification.
"""

from importlib.metadata import version

from branchtree.config import BranchTreeConfig
from branchtree.core.tree_node import NodeKind, TreeNode
from branchtree.exceptions import GenerationError, ParseError
from branchtree.pipeline import check, scaffold
from branchtree.validation import DiffEntry, DiffKind, Severity, ValidationReport

__version__ = version("branchtree")

__all__ = [
    "__version__",
    "BranchTreeConfig",
    "DiffEntry",
    "DiffKind",
    "GenerationError",
    "NodeKind",
    "ParseError",
    "Severity",
    "TreeNode",
    "ValidationReport",
    "check",
    "scaffold",
]
