"""
Structure extraction from scaffolded test modules.

This module reads test source text back into a StructuralModel, recognizing
exactly the declarations the scaffold emitter produces: ``Test_<identifier>``
classes as branch scopes and ``test_<identifier>`` functions as leaves.
Imports, fixtures, helpers and other statements are ignored. Anything that
would be collected as a test but cannot be mapped onto the convention is a
ParseError; the extractor never guesses. For each test the extractor also
records whether its body expects an exception through ``pytest.raises``.
"""

import ast
import logging

from branchtree.core.tree_node import NodeKind
from branchtree.exceptions import ParseError
from branchtree.scaffold.constants import (
    BRANCH_PREFIX,
    COLLECTED_CLASS_PREFIX,
    LEAF_PREFIX,
    MODULE_DOCSTRING_PREFIX,
)
from branchtree.structure.model import StructuralModel, StructuralNode

logger = logging.getLogger(__name__)

_FUNCTION_NODES = (ast.FunctionDef, ast.AsyncFunctionDef)


class StructureExtractor:
    """
    Parses scaffolded test source text into structural models.

    Params:
        source_name: Name of the test file, used in error messages
    """

    def __init__(self, source_name: str | None = None):
        self.source_name = source_name

    def extract(self, source: str) -> StructuralModel:
        """
        Extract the structural model of a test module.

        Params:
            source: Python source text of the test module

        Returns:
            Actual StructuralModel with declarations in file order

        Raises:
            ParseError: If the text is not valid Python or does not follow
                the scaffold convention
        """
        try:
            module = ast.parse(source, filename=self.source_name or "<source>")
        except SyntaxError as e:
            raise ParseError(
                f"invalid Python syntax: {e.msg}",
                line=e.lineno,
                source_name=self.source_name,
            ) from e

        root = StructuralNode(
            identifier="",
            kind=NodeKind.BRANCH,
            description=self._module_description(module),
            line=1,
        )
        root.children = self._extract_scope(module.body, ())

        model = StructuralModel(root=root, source="actual")
        logger.debug(
            "Extracted %d leaves from %s",
            len(model.leaf_paths()),
            self.source_name or "<source>",
        )
        return model

    def _extract_scope(
        self, body: list[ast.stmt], path: tuple[str, ...]
    ) -> list[StructuralNode]:
        """Recognize the scaffold declarations directly inside one scope."""
        children = []
        first_seen: dict[str, int] = {}

        for statement in body:
            node = self._recognize(statement, path)
            if node is None:
                continue

            if node.identifier in first_seen:
                raise ParseError(
                    f"'{node.identifier}' is declared again "
                    f"(first declared at line {first_seen[node.identifier]})",
                    line=node.line,
                    path=path,
                    source_name=self.source_name,
                )
            first_seen[node.identifier] = node.line
            children.append(node)

        return children

    def _recognize(
        self, statement: ast.stmt, path: tuple[str, ...]
    ) -> StructuralNode | None:
        """Map one statement onto a structural node, or None if it is not part of the scaffold."""
        if isinstance(statement, ast.ClassDef):
            if statement.name.startswith(BRANCH_PREFIX):
                identifier = self._identifier(statement, BRANCH_PREFIX, path)
                node = StructuralNode(
                    identifier=identifier,
                    kind=NodeKind.BRANCH,
                    description=ast.get_docstring(statement),
                    line=statement.lineno,
                )
                node.children = self._extract_scope(
                    statement.body, (*path, identifier)
                )
                return node

            if statement.name.startswith(COLLECTED_CLASS_PREFIX):
                raise ParseError(
                    f"test class '{statement.name}' does not follow the "
                    f"'{BRANCH_PREFIX}<identifier>' convention",
                    line=statement.lineno,
                    path=path,
                    source_name=self.source_name,
                )
            return None

        if isinstance(statement, _FUNCTION_NODES) and statement.name.startswith(
            LEAF_PREFIX
        ):
            return StructuralNode(
                identifier=self._identifier(statement, LEAF_PREFIX, path),
                kind=NodeKind.LEAF,
                description=ast.get_docstring(statement),
                line=statement.lineno,
                raises=_expects_exception(statement),
            )

        return None

    def _identifier(
        self,
        statement: ast.ClassDef | ast.FunctionDef | ast.AsyncFunctionDef,
        prefix: str,
        path: tuple[str, ...],
    ) -> str:
        identifier = statement.name[len(prefix) :]
        if not identifier:
            raise ParseError(
                f"'{statement.name}' has no identifier after the '{prefix}' prefix",
                line=statement.lineno,
                path=path,
                source_name=self.source_name,
            )
        return identifier

    @staticmethod
    def _module_description(module: ast.Module) -> str | None:
        docstring = ast.get_docstring(module)
        if docstring is None:
            return None
        if docstring.startswith(MODULE_DOCSTRING_PREFIX):
            docstring = docstring[len(MODULE_DOCSTRING_PREFIX) :]
            if docstring.endswith("."):
                docstring = docstring[:-1]
        return docstring


def extract_structure(source: str, source_name: str | None = None) -> StructuralModel:
    """Extract the structural model of a test module with a one-off extractor."""
    return StructureExtractor(source_name).extract(source)


def _expects_exception(function: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Check if a test body contains a ``with pytest.raises(...)`` block."""
    for node in ast.walk(function):
        if isinstance(node, (ast.With, ast.AsyncWith)) and any(
            _is_raises_call(item.context_expr) for item in node.items
        ):
            return True
    return False


def _is_raises_call(expression: ast.expr) -> bool:
    if not isinstance(expression, ast.Call):
        return False
    func = expression.func
    if isinstance(func, ast.Attribute):
        return (
            func.attr == "raises"
            and isinstance(func.value, ast.Name)
            and func.value.id == "pytest"
        )
    return isinstance(func, ast.Name) and func.id == "raises"
