"""
Identifier naming shared by scaffold generation and structural checks.
"""

from branchtree.naming.strategy import (
    DEFAULT_MAX_IDENTIFIER_LENGTH,
    NamingStrategy,
    identifier_for,
    normalize_description,
)

__all__ = [
    "DEFAULT_MAX_IDENTIFIER_LENGTH",
    "NamingStrategy",
    "identifier_for",
    "normalize_description",
]
