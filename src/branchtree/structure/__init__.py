"""
Structural models of test scaffolds.

This package provides the StructuralModel compared by the validator and
the builder that derives the expected model from a tree specification.
"""

from branchtree.structure.builder import build_expected_model, check_tree_shape
from branchtree.structure.model import StructuralModel, StructuralNode

__all__ = [
    "StructuralModel",
    "StructuralNode",
    "build_expected_model",
    "check_tree_shape",
]
