"""
Parsing of existing scaffolded test files back into structural models.
"""

from branchtree.parsing.extractor import StructureExtractor, extract_structure

__all__ = [
    "StructureExtractor",
    "extract_structure",
]
