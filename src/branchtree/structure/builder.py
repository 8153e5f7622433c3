"""
Expected structural model construction from tree specifications.

This module turns a TreeNode AST into the StructuralModel that a scaffold
for it must have. The scaffold emitter renders exactly this model and the
validator compares extracted models against it, so both rely on the same
naming pass.

Shape checks run during the same walk as naming, so a fault is reported
with both the description path and the identifier path of the offending
node.
"""

import logging

from branchtree.config import DEFAULT_CONFIG, BranchTreeConfig
from branchtree.core.tree_node import NodeKind, TreeNode
from branchtree.core.types import DescriptionPath, IdentifierPath
from branchtree.exceptions import ErrorContext, GenerationError
from branchtree.structure.model import StructuralModel, StructuralNode

logger = logging.getLogger(__name__)


def check_tree_shape(root: TreeNode, config: BranchTreeConfig = DEFAULT_CONFIG) -> None:
    """
    Reject trees that cannot map one-to-one onto a scaffold.

    Params:
        root: Root of the tree specification
        config: Configuration supplying naming and the error detail level

    Raises:
        GenerationError: If the root is a leaf, a leaf has children, a
            branch has no children or sibling names cannot be resolved
    """
    build_expected_model(root, config)


def build_expected_model(
    root: TreeNode, config: BranchTreeConfig = DEFAULT_CONFIG
) -> StructuralModel:
    """
    Build the structural model a scaffold of the tree must have.

    Params:
        root: Root of the tree specification
        config: Configuration supplying the naming strategy

    Returns:
        Expected StructuralModel with identifiers assigned per sibling group

    Raises:
        GenerationError: If the tree is malformed or names cannot be resolved
    """
    if root.kind != NodeKind.BRANCH:
        _fail((root.description,), (), "root must be a branch", config)

    strategy = config.naming_strategy()
    root_node = StructuralNode(
        identifier=strategy.identifier_for(root.description, 0),
        kind=NodeKind.BRANCH,
        description=root.description,
    )
    _ModelBuilder(config).fill(root_node, root, (root.description,), ())

    model = StructuralModel(root=root_node, source="expected")
    logger.debug(
        "Built expected model for %r with %d leaves",
        root.description,
        len(model.leaf_paths()),
    )
    return model


class _ModelBuilder:
    """Walks a tree, checking shapes and naming each sibling group."""

    def __init__(self, config: BranchTreeConfig):
        self.config = config
        self.strategy = config.naming_strategy()

    def fill(
        self,
        target: StructuralNode,
        node: TreeNode,
        path: DescriptionPath,
        identifier_path: IdentifierPath,
    ) -> None:
        """Check one tree node and attach its named children to target."""
        if node.kind == NodeKind.LEAF:
            if node.children:
                _fail(
                    path,
                    identifier_path,
                    f"leaf has {len(node.children)} children",
                    self.config,
                )
            return

        if not node.children:
            _fail(path, identifier_path, "branch has no children", self.config)

        try:
            identifiers = self.strategy.assign(
                [child.description for child in node.children], path
            )
        except GenerationError as e:
            _fail(e.path, identifier_path, e.reason, self.config, cause=e)

        for identifier, child in zip(identifiers, node.children):
            structural = StructuralNode(
                identifier=identifier,
                kind=child.kind,
                description=child.description,
            )
            self.fill(
                structural,
                child,
                (*path, child.description),
                (*identifier_path, identifier),
            )
            target.children.append(structural)


def _fail(
    path: DescriptionPath,
    identifier_path: IdentifierPath,
    reason: str,
    config: BranchTreeConfig,
    cause: Exception | None = None,
) -> None:
    raise GenerationError(
        path,
        reason,
        context=ErrorContext(tree_path=path, identifier_path=identifier_path),
        error_level=config.error_level,
    ) from cause
