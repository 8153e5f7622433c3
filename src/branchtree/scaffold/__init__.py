"""
Scaffold generation from branching tree specifications.
"""

from branchtree.scaffold.comment import expects_error, format_description
from branchtree.scaffold.emitter import Emitter, emit

__all__ = [
    "Emitter",
    "emit",
    "expects_error",
    "format_description",
]
