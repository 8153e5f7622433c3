"""
Scaffold emitter for branching tree specifications.

This module renders a TreeNode AST as a pytest module: the root becomes the
module, each branch a nested ``Test_<identifier>`` class and each leaf a
``test_<identifier>`` function with a placeholder body. Scopes and tests
appear in tree order, and the output depends only on the tree and the
configuration, so regenerating an unchanged tree yields identical text.
"""

import logging

from branchtree.config import DEFAULT_CONFIG, BranchTreeConfig
from branchtree.core.tree_node import NodeKind, TreeNode
from branchtree.scaffold.comment import (
    collapse_whitespace,
    docstring_literal,
    escape_unprintable,
    expects_error,
    format_description,
)
from branchtree.scaffold.constants import (
    BRANCH_PREFIX,
    ERROR_EXPECTATION,
    INDENTATION,
    LEAF_PREFIX,
    MODULE_DOCSTRING_PREFIX,
    PLACEHOLDER_STATEMENT,
)
from branchtree.structure.builder import build_expected_model
from branchtree.structure.model import StructuralNode

logger = logging.getLogger(__name__)


class Emitter:
    """
    Renders tree specifications as pytest scaffolds.

    Params:
        config: Configuration supplying naming and description formatting
    """

    def __init__(self, config: BranchTreeConfig = DEFAULT_CONFIG):
        self.config = config

    def emit(self, root: TreeNode) -> str:
        """
        Render a tree specification as test source text.

        The tree is validated and named in full before any text is
        produced.

        Params:
            root: Root branch of the tree specification

        Returns:
            Source text of the scaffold, ending with a single newline

        Raises:
            GenerationError: If the tree is malformed
        """
        model = build_expected_model(root, self.config)

        title = collapse_whitespace(root.description).rstrip(".")
        lines = [
            docstring_literal(f"{MODULE_DOCSTRING_PREFIX}{title}."),
            "",
            "import pytest",
        ]
        for tree_child, node in zip(root.children, model.root.children):
            lines.extend(["", ""])
            self._emit_node(tree_child, node, 0, lines)

        logger.debug(
            "Emitted scaffold for %r: %d top-level declarations",
            root.description,
            len(model.root.children),
        )
        return "\n".join(lines) + "\n"

    def _emit_node(
        self, tree: TreeNode, node: StructuralNode, depth: int, lines: list[str]
    ) -> None:
        if node.kind == NodeKind.BRANCH:
            self._emit_scope(tree, node, depth, lines)
        else:
            self._emit_test(tree, node, depth, lines)

    def _emit_scope(
        self, tree: TreeNode, node: StructuralNode, depth: int, lines: list[str]
    ) -> None:
        pad = INDENTATION * depth
        lines.append(f"{pad}class {BRANCH_PREFIX}{node.identifier}:")
        lines.append(f"{pad}{INDENTATION}{self._docstring(tree.description)}")

        for tree_child, child in zip(tree.children, node.children):
            lines.append("")
            self._emit_node(tree_child, child, depth + 1, lines)

    def _emit_test(
        self, tree: TreeNode, node: StructuralNode, depth: int, lines: list[str]
    ) -> None:
        pad = INDENTATION * depth
        body = pad + INDENTATION
        params = "self" if depth > 0 else ""

        lines.append(f"{pad}def {LEAF_PREFIX}{node.identifier}({params}):")
        lines.append(f"{body}{self._docstring(tree.description)}")
        for detail in tree.details:
            comment = escape_unprintable(self._describe(detail))
            lines.append(f"{body}# {comment}".rstrip())

        if expects_error(tree.description):
            lines.append(f"{body}{ERROR_EXPECTATION}")
            lines.append(f"{body}{INDENTATION}{PLACEHOLDER_STATEMENT}")
        else:
            lines.append(f"{body}{PLACEHOLDER_STATEMENT}")

    def _describe(self, text: str) -> str:
        if self.config.format_descriptions:
            return format_description(text)
        return collapse_whitespace(text)

    def _docstring(self, text: str) -> str:
        return docstring_literal(self._describe(text))


def emit(root: TreeNode, config: BranchTreeConfig = DEFAULT_CONFIG) -> str:
    """Render a tree specification with a one-off Emitter."""
    return Emitter(config).emit(root)
