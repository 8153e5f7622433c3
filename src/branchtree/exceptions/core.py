"""
Exception classes for branching tree scaffolding and structural checks.

This module defines specific exception types for the error conditions that
can occur while emitting scaffolds from a tree specification, extracting
structure from an existing test file, and comparing structural models.
"""

from dataclasses import dataclass, field
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Tree descriptions only
    DEVELOPER = "developer"  # Adds identifier paths and source lines


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where an error occurred in tree terms (the chain of
    descriptions from the root) and in source terms (identifier path and
    line within the test file). Supports formatting at different detail
    levels for user-facing vs developer debugging.

    Params:
        tree_path: Descriptions from the root down to the faulty node
        identifier_path: Identifiers from the root scope down to the faulty node
        line: Line number in the test file, when the fault came from source text
        source_name: Name of the test file, when known
    """

    tree_path: tuple[str, ...] = field(default_factory=tuple)
    identifier_path: tuple[str, ...] = field(default_factory=tuple)
    line: int | None = None
    source_name: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.tree_path:
            lines.append(f"  at {' > '.join(repr(d) for d in self.tree_path)}")

        if error_level == ErrorLevel.DEVELOPER:
            if self.identifier_path:
                lines.append(f"  identifier path: {'.'.join(self.identifier_path)}")
            if self.line is not None:
                where = self.source_name or "<source>"
                lines.append(f"  source at {where}:{self.line}")

        return "\n".join(lines)


class BranchTreeError(Exception):
    """Base exception for all branchtree errors."""

    pass


class GenerationError(BranchTreeError):
    """Raised when a tree cannot be turned into a scaffold."""

    def __init__(
        self,
        path: tuple[str, ...],
        reason: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            path: Descriptions from the root down to the malformed node
            reason: Why the node cannot be emitted
            context: ErrorContext with additional location information
            error_level: Level of detail to show in error message
        """
        self.path = tuple(path)
        self.reason = reason
        self.context = context or ErrorContext(tree_path=self.path)
        self.error_level = error_level

        primary_error = f"Cannot generate scaffold: {reason}"
        location_info = self.context.format_location(error_level)
        if location_info:
            super().__init__(f"{primary_error}\n{location_info}")
        else:
            super().__init__(primary_error)


class ParseError(BranchTreeError):
    """Raised when a test file does not follow the scaffold convention."""

    def __init__(
        self,
        reason: str,
        line: int | None = None,
        path: tuple[str, ...] = (),
        source_name: str | None = None,
    ):
        """
        Initialize the exception.

        Params:
            reason: Why the source text is not recognizable
            line: Line number of the offending declaration, if any
            path: Identifiers of the enclosing scopes
            source_name: Name of the test file, when known
        """
        self.reason = reason
        self.line = line
        self.path = tuple(path)
        self.source_name = source_name

        location = source_name or "<source>"
        if line is not None:
            location = f"{location}:{line}"
        if self.path:
            location = f"{location} (in {'.'.join(self.path)})"
        super().__init__(f"Cannot parse {location}: {reason}")


class MalformedModelError(BranchTreeError):
    """Raised when a structural model handed to the validator is itself broken."""

    def __init__(self, path: tuple[str, ...], reason: str):
        """
        Initialize the exception.

        Params:
            path: Identifiers of the scope holding the fault
            reason: What is wrong with the model
        """
        self.path = tuple(path)
        self.reason = reason
        scope = ".".join(self.path) or "<root>"
        super().__init__(f"Malformed structural model at {scope}: {reason}")
