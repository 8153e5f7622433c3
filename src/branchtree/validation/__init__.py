"""
Structural validation of test files against tree specifications.

This package provides the discrepancy records, the validator that produces
them and the report that collects them.
"""

from branchtree.core.types import Severity
from branchtree.validation.diff import DiffEntry, DiffKind
from branchtree.validation.report import ValidationFailure, ValidationReport
from branchtree.validation.validator import StructuralValidator, validate

__all__ = [
    "DiffEntry",
    "DiffKind",
    "Severity",
    "StructuralValidator",
    "ValidationFailure",
    "ValidationReport",
    "validate",
]
