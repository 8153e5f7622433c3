"""
Entry points for scaffold generation and structural checks.

These functions tie the components together for external drivers (a CLI,
an editor integration, a batch job). They perform no I/O: tree
specifications and source text come in, source text and reports go out.
"""

import logging

from branchtree.config import DEFAULT_CONFIG, BranchTreeConfig
from branchtree.core.tree_node import TreeNode
from branchtree.parsing.extractor import StructureExtractor
from branchtree.scaffold.emitter import Emitter
from branchtree.structure.builder import build_expected_model
from branchtree.validation.report import ValidationReport
from branchtree.validation.validator import StructuralValidator

logger = logging.getLogger(__name__)


def scaffold(tree: TreeNode, config: BranchTreeConfig | None = None) -> str:
    """
    Generate a pytest scaffold for a tree specification.

    Params:
        tree: Root of the tree specification
        config: Optional configuration, defaults to DEFAULT_CONFIG

    Returns:
        Source text of the scaffold

    Raises:
        GenerationError: If the tree is malformed
    """
    config = config or DEFAULT_CONFIG
    source = Emitter(config).emit(tree)
    logger.info(
        "Scaffolded %r: %d tests", tree.description, tree.count_leaves()
    )
    return source


def check(
    tree: TreeNode,
    source: str,
    config: BranchTreeConfig | None = None,
    source_name: str | None = None,
) -> ValidationReport:
    """
    Check that a test file still matches its tree specification.

    Params:
        tree: Root of the tree specification
        source: Source text of the existing test file
        config: Optional configuration, defaults to DEFAULT_CONFIG
        source_name: Name of the test file, used in errors and reports

    Returns:
        ValidationReport listing every structural discrepancy

    Raises:
        GenerationError: If the tree is malformed
        ParseError: If the source does not follow the scaffold convention
    """
    config = config or DEFAULT_CONFIG
    expected = build_expected_model(tree, config)
    actual = StructureExtractor(source_name).extract(source)
    return StructuralValidator(config).validate(expected, actual, source_name)
