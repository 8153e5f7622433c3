"""
branchtree exception classes.

This package provides all exception types used throughout branchtree for
consistent error handling and reporting.
"""

from branchtree.exceptions.core import (
    BranchTreeError,
    ErrorContext,
    ErrorLevel,
    GenerationError,
    MalformedModelError,
    ParseError,
)

__all__ = [
    "BranchTreeError",
    "ErrorContext",
    "ErrorLevel",
    "GenerationError",
    "MalformedModelError",
    "ParseError",
]
