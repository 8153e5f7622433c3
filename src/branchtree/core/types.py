"""
Core type definitions for branchtree.

This module contains type aliases and small enums used throughout
branchtree for type safety and consistency.
"""

from enum import Enum
from typing import Literal

IdentifierPath = tuple[str, ...]

DescriptionPath = tuple[str, ...]

ModelSource = Literal["expected", "actual"]


class Severity(Enum):
    """Whether a discrepancy fails a check or is only reported."""

    ERROR = "error"
    WARNING = "warning"
