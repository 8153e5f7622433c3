"""
Discrepancy records produced by the structural validator.
"""

from dataclasses import dataclass
from enum import Enum

from branchtree.core.types import Severity


class DiffKind(Enum):
    """Kind of structural discrepancy between expected and actual models."""

    MISSING = "missing"
    EXTRA = "extra"
    RENAMED = "renamed"
    REORDERED = "reordered"
    KIND_MISMATCH = "kind_mismatch"
    ERROR_EXPECTATION = "error_expectation"


@dataclass(frozen=True)
class DiffEntry:
    """
    One discrepancy between an expected and an actual structural model.

    Params:
        kind: Kind of discrepancy
        path: Identifiers from the root scope down to the discrepant node
        expected: Expected value (identifier, kind or position), if any
        actual: Actual value (identifier, kind or position), if any
        severity: ERROR entries fail a check, WARNING entries do not
        detail: Human-readable explanation
        line: Line of the actual declaration in the test file, if known
    """

    kind: DiffKind
    path: tuple[str, ...]
    expected: str | None = None
    actual: str | None = None
    severity: Severity = Severity.ERROR
    detail: str = ""
    line: int | None = None

    @property
    def scope(self) -> tuple[str, ...]:
        """Identifiers of the scope that holds the discrepant node."""
        return self.path[:-1]

    @property
    def is_error(self) -> bool:
        """Check if this entry fails a check."""
        return self.severity == Severity.ERROR

    def __str__(self) -> str:
        """Return ``<path>: <detail>``, with the line when known."""
        location = ".".join(self.path) or "<root>"
        if self.line is not None:
            location = f"{location} (line {self.line})"
        return f"{self.severity.value}: {location}: {self.detail}"
