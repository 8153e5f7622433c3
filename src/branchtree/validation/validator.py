"""
Structural comparison of expected and actual scaffold models.

The validator walks both models scope by scope from the root, matching
children by identifier, and reports every discrepancy in one pass:
missing and unexpected declarations, kind changes, reordering and,
optionally, renames and tests that no longer expect an error. Entries come
out in tree pre-order so reports are deterministic and read top to bottom
like the test file.
"""

import logging

from branchtree.config import DEFAULT_CONFIG, BranchTreeConfig
from branchtree.core.tree_node import NodeKind
from branchtree.core.types import IdentifierPath, Severity
from branchtree.exceptions import MalformedModelError
from branchtree.scaffold.comment import collapse_whitespace, expects_error
from branchtree.structure.model import StructuralModel, StructuralNode
from branchtree.validation.diff import DiffEntry, DiffKind
from branchtree.validation.report import ValidationReport

logger = logging.getLogger(__name__)

_KIND_NOUNS = {NodeKind.BRANCH: "scope", NodeKind.LEAF: "test"}


class StructuralValidator:
    """
    Compares an expected structural model against an actual one.

    Params:
        config: Configuration supplying reorder severity and the optional checks
    """

    def __init__(self, config: BranchTreeConfig = DEFAULT_CONFIG):
        self.config = config

    def validate(
        self,
        expected: StructuralModel,
        actual: StructuralModel,
        source_name: str | None = None,
    ) -> ValidationReport:
        """
        Enumerate every structural discrepancy between two models.

        Params:
            expected: Model built from the tree specification
            actual: Model extracted from the test file
            source_name: Name of the test file, attached to the report

        Returns:
            ValidationReport whose entries are empty when the models match

        Raises:
            MalformedModelError: If either model has a non-branch root or
                duplicate identifiers under one parent
        """
        for model in (expected, actual):
            if model.root.kind != NodeKind.BRANCH:
                raise MalformedModelError((), f"{model.source} root is not a branch")

        entries: list[DiffEntry] = []
        self._compare_scope(expected.root, actual.root, (), entries)

        report = ValidationReport(tuple(entries), source_name)
        logger.info(
            "Checked %s: %s", source_name or "<source>", report.summary()
        )
        return report

    def _compare_scope(
        self,
        expected: StructuralNode,
        actual: StructuralNode,
        path: IdentifierPath,
        entries: list[DiffEntry],
    ) -> None:
        """Compare the children of two matched scopes and recurse into matched branches."""
        expected_index = _index_children(expected, path, "expected")
        actual_index = _index_children(actual, path, "actual")

        missing = [n for n in expected.children if n.identifier not in actual_index]
        extras = [n for n in actual.children if n.identifier not in expected_index]
        renames = self._pair_renames(missing, extras) if self.config.detect_renames else {}
        renamed = {node.identifier for node in renames.values()}
        out_of_order = _out_of_order(
            [n.identifier for n in expected.children],
            [n.identifier for n in actual.children],
        )

        for position, child in enumerate(expected.children):
            child_path = (*path, child.identifier)
            noun = _KIND_NOUNS[child.kind]

            if child.identifier not in actual_index:
                replacement = renames.get(child.identifier)
                if replacement is None:
                    entries.append(
                        DiffEntry(
                            kind=DiffKind.MISSING,
                            path=child_path,
                            expected=child.identifier,
                            detail=f"{noun} '{child.identifier}' is missing"
                            + _quoted(child.description),
                        )
                    )
                    continue

                entries.append(
                    DiffEntry(
                        kind=DiffKind.RENAMED,
                        path=child_path,
                        expected=child.identifier,
                        actual=replacement.identifier,
                        detail=f"{noun} '{child.identifier}' was renamed to "
                        f"'{replacement.identifier}'",
                        line=replacement.line,
                    )
                )
                self._check_error_expectation(child, replacement, child_path, entries)
                if child.kind == NodeKind.BRANCH:
                    self._compare_scope(child, replacement, child_path, entries)
                continue

            actual_position, counterpart = actual_index[child.identifier]
            if counterpart.kind != child.kind:
                entries.append(
                    DiffEntry(
                        kind=DiffKind.KIND_MISMATCH,
                        path=child_path,
                        expected=child.kind.value,
                        actual=counterpart.kind.value,
                        detail=f"'{child.identifier}' should be a {noun}, "
                        f"found a {_KIND_NOUNS[counterpart.kind]}",
                        line=counterpart.line,
                    )
                )
                continue

            if child.identifier in out_of_order:
                entries.append(
                    DiffEntry(
                        kind=DiffKind.REORDERED,
                        path=child_path,
                        expected=str(position),
                        actual=str(actual_position),
                        severity=self.config.reorder_severity,
                        detail=f"{noun} '{child.identifier}' is out of order "
                        f"(expected position {position}, found {actual_position})",
                        line=counterpart.line,
                    )
                )

            self._check_error_expectation(child, counterpart, child_path, entries)
            if child.kind == NodeKind.BRANCH:
                self._compare_scope(child, counterpart, child_path, entries)

        for extra in extras:
            if extra.identifier in renamed:
                continue
            entries.append(
                DiffEntry(
                    kind=DiffKind.EXTRA,
                    path=(*path, extra.identifier),
                    actual=extra.identifier,
                    detail=f"unexpected {_KIND_NOUNS[extra.kind]} '{extra.identifier}'",
                    line=extra.line,
                )
            )

    def _check_error_expectation(
        self,
        expected: StructuralNode,
        actual: StructuralNode,
        path: IdentifierPath,
        entries: list[DiffEntry],
    ) -> None:
        """Report a test that should expect an error but has no pytest.raises block."""
        if not self.config.check_error_expectations:
            return
        if expected.kind != NodeKind.LEAF or actual.kind != NodeKind.LEAF:
            return
        if actual.raises or not expects_error(expected.description or ""):
            return

        entries.append(
            DiffEntry(
                kind=DiffKind.ERROR_EXPECTATION,
                path=path,
                expected="pytest.raises",
                actual="none",
                detail=f"test '{actual.identifier}' should expect an error "
                "but has no pytest.raises block",
                line=actual.line,
            )
        )

    @staticmethod
    def _pair_renames(
        missing: list[StructuralNode], extras: list[StructuralNode]
    ) -> dict[str, StructuralNode]:
        """Pair missing and unexpected children that share kind and description."""
        pairs: dict[str, StructuralNode] = {}
        available = list(extras)

        for node in missing:
            key = _description_key(node.description)
            if key is None:
                continue
            for candidate in available:
                if candidate.kind == node.kind and _description_key(
                    candidate.description
                ) == key:
                    pairs[node.identifier] = candidate
                    available.remove(candidate)
                    break

        return pairs


def validate(
    expected: StructuralModel,
    actual: StructuralModel,
    config: BranchTreeConfig = DEFAULT_CONFIG,
    source_name: str | None = None,
) -> ValidationReport:
    """Compare two structural models with a one-off validator."""
    return StructuralValidator(config).validate(expected, actual, source_name)


def _index_children(
    node: StructuralNode, path: IdentifierPath, side: str
) -> dict[str, tuple[int, StructuralNode]]:
    """Map child identifiers to (position, node), rejecting duplicates."""
    index: dict[str, tuple[int, StructuralNode]] = {}
    for position, child in enumerate(node.children):
        if child.identifier in index:
            raise MalformedModelError(
                path, f"duplicate identifier '{child.identifier}' in {side} model"
            )
        index[child.identifier] = (position, child)
    return index


def _out_of_order(expected_ids: list[str], actual_ids: list[str]) -> set[str]:
    """
    Find shared identifiers whose relative order differs between two sides.

    Identifiers outside one longest common subsequence of the shared
    identifiers are out of order. Ties prefer keeping later expected
    identifiers in place, so a swap flags the earlier one.
    """
    shared = set(expected_ids) & set(actual_ids)
    left = [identifier for identifier in expected_ids if identifier in shared]
    right = [identifier for identifier in actual_ids if identifier in shared]

    rows, cols = len(left), len(right)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(rows - 1, -1, -1):
        for j in range(cols - 1, -1, -1):
            if left[i] == right[j]:
                table[i][j] = table[i + 1][j + 1] + 1
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])

    in_order = set()
    i = j = 0
    while i < rows and j < cols:
        if left[i] == right[j]:
            in_order.add(left[i])
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            i += 1
        else:
            j += 1

    return shared - in_order


def _description_key(description: str | None) -> str | None:
    if description is None:
        return None
    key = collapse_whitespace(description).rstrip(".!?").casefold()
    return key or None


def _quoted(description: str | None) -> str:
    return f" ({description})" if description else ""
