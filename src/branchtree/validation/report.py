"""
Validation results.

A check never raises for structural drift: discrepancies are returned as a
ValidationReport, and a report with error-level entries exposes them as a
ValidationFailure result.
"""

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field

from branchtree.validation.diff import DiffEntry, DiffKind


@dataclass(frozen=True)
class ValidationFailure:
    """
    Result describing why a test file failed its structural check.

    Params:
        entries: Error-level entries, in report order
        source_name: Name of the checked test file, when known
    """

    entries: tuple[DiffEntry, ...]
    source_name: str | None = None

    @property
    def message(self) -> str:
        """One line per failing entry, prefixed with the file name when known."""
        prefix = f"{self.source_name}: " if self.source_name else ""
        return "\n".join(f"{prefix}{entry}" for entry in self.entries)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationReport:
    """
    Ordered discrepancies between an expected and an actual structural model.

    Params:
        entries: Every discrepancy found, in tree pre-order
        source_name: Name of the checked test file, when known
    """

    entries: tuple[DiffEntry, ...] = field(default_factory=tuple)
    source_name: str | None = None

    @property
    def errors(self) -> list[DiffEntry]:
        """Entries that fail the check."""
        return [entry for entry in self.entries if entry.is_error]

    @property
    def warnings(self) -> list[DiffEntry]:
        """Entries that are reported without failing the check."""
        return [entry for entry in self.entries if not entry.is_error]

    @property
    def conformant(self) -> bool:
        """Check if the file matches its specification exactly."""
        return not self.entries

    @property
    def passed(self) -> bool:
        """Check if no entry fails the check."""
        return not self.errors

    @property
    def failure(self) -> ValidationFailure | None:
        """The failure result for this report, or None when it passed."""
        if self.passed:
            return None
        return ValidationFailure(tuple(self.errors), self.source_name)

    def of_kind(self, kind: DiffKind) -> list[DiffEntry]:
        """Entries of one discrepancy kind, in report order."""
        return [entry for entry in self.entries if entry.kind == kind]

    def summary(self) -> str:
        """
        Summarize the report in one line.

        Examples:
            "All checks passed"
            "3 discrepancies (2 missing, 1 reordered): 2 errors, 1 warning"
        """
        if self.conformant:
            return "All checks passed"

        counts = Counter(entry.kind for entry in self.entries)
        by_kind = ", ".join(
            f"{counts[kind]} {kind.value.replace('_', ' ')}"
            for kind in DiffKind
            if counts[kind]
        )
        return (
            f"{_plural(len(self.entries), 'discrepancy', 'discrepancies')} ({by_kind}): "
            f"{_plural(len(self.errors), 'error', 'errors')}, "
            f"{_plural(len(self.warnings), 'warning', 'warnings')}"
        )

    def __iter__(self) -> Iterator[DiffEntry]:
        return iter(self.entries)


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"
