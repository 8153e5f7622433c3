"""
Identifier naming for scaffold scopes and test functions.

The same strategy is used when emitting a scaffold and when building the
expected structural model for a check, so generated names and expected
names can never drift apart.

Names are derived from descriptions in three steps: normalization (BDD
keyword stripping, ASCII folding, camelCase splitting, snake_case joining),
truncation to a safe length, and escaping of names Python reserves.
Colliding siblings are disambiguated with numeric suffixes in sibling
order, which keeps names readable and collisions reproducible.

The length limit covers the whole identifier, including the reserved-word
prefix and any collision suffix, but not the ``Test_``/``test_``
declaration prefix added by the emitter.
"""

import keyword
import re
from collections.abc import Sequence
from dataclasses import dataclass

from inflection import transliterate, underscore

from branchtree.exceptions import GenerationError

DEFAULT_MAX_IDENTIFIER_LENGTH = 64
MAX_DISAMBIGUATOR = 9999
PLACEHOLDER_IDENTIFIER = "unnamed"
RESERVED_PREFIX = "x_"

_BDD_PREFIX_RE = re.compile(r"^(?:when|given|it)\s+", re.IGNORECASE)
_APOSTROPHE_RE = re.compile(r"['’`]")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def normalize_description(
    description: str, max_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH
) -> str:
    """
    Reduce a description to a snake_case word sequence.

    Params:
        description: Branch condition or leaf assertion text
        max_length: Maximum length of the result

    Returns:
        Normalized text, possibly empty

    Examples:
        "when first arg is smaller" -> "first_arg_is_smaller"
        "It should match hash(a, b)" -> "should_match_hash_a_b"
        "ConditionA" -> "condition_a"
    """
    text = _BDD_PREFIX_RE.sub("", description.strip(), count=1)
    text = _APOSTROPHE_RE.sub("", text)
    text = underscore(transliterate(text))
    text = _NON_ALNUM_RE.sub("_", text).strip("_")
    return truncate_identifier(text, max_length)


def truncate_identifier(text: str, max_length: int) -> str:
    """Cut text to max_length, preferring the last word boundary."""
    if len(text) <= max_length:
        return text

    cut = text[:max_length]
    if text[max_length] != "_":
        boundary = cut.rfind("_")
        if boundary > 0:
            cut = cut[:boundary]
    return cut.rstrip("_")


def with_suffix(stem: str, suffix: str, max_length: int) -> str:
    """Append suffix to stem, cutting the stem so the result fits max_length."""
    return stem[: max_length - len(suffix)].rstrip("_") + suffix


def is_reserved(name: str) -> bool:
    """Check if a name cannot stand alone as a Python identifier."""
    return (
        keyword.iskeyword(name)
        or keyword.issoftkeyword(name)
        or not name[:1].isalpha()
    )


def identifier_for(
    description: str,
    sibling_index: int,
    max_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH,
) -> str:
    """
    Derive the base identifier of a node from its description.

    The result depends only on the arguments. It is not yet disambiguated
    against siblings; see NamingStrategy.assign.

    Params:
        description: Branch condition or leaf assertion text
        sibling_index: Zero-based position among the node's siblings
        max_length: Maximum length of the identifier

    Returns:
        A non-empty identifier of at most max_length characters
    """
    name = normalize_description(description, max_length)
    if not name:
        return with_suffix(PLACEHOLDER_IDENTIFIER, f"_{sibling_index + 1}", max_length)
    if is_reserved(name):
        room = max_length - len(RESERVED_PREFIX)
        return f"{RESERVED_PREFIX}{truncate_identifier(name, room)}"
    return name


@dataclass(frozen=True)
class NamingStrategy:
    """
    Naming policy shared by the scaffold emitter and the structural checks.

    Params:
        max_length: Maximum length of generated identifiers
    """

    max_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH

    def identifier_for(self, description: str, sibling_index: int) -> str:
        """Derive the base identifier for one node."""
        return identifier_for(description, sibling_index, self.max_length)

    def assign(
        self, descriptions: Sequence[str], path: tuple[str, ...] = ()
    ) -> list[str]:
        """
        Assign unique identifiers to an ordered list of siblings.

        The first sibling with a given base identifier keeps it; later ones
        receive ``_2``, ``_3``... in sibling order, skipping names that are
        already in use. The base is shortened when a suffix would push the
        name past the length limit.

        Params:
            descriptions: Sibling descriptions in tree order
            path: Descriptions of the enclosing nodes, for error reporting

        Returns:
            Identifiers in the same order as descriptions

        Raises:
            GenerationError: If no free suffix is left for a colliding name
        """
        taken: set[str] = set()
        identifiers = []

        for index, description in enumerate(descriptions):
            base = self.identifier_for(description, index)
            candidate = base
            suffix = 2
            while candidate in taken:
                if suffix > MAX_DISAMBIGUATOR:
                    raise GenerationError(
                        (*path, description),
                        f"unresolvable description collision for '{base}'",
                    )
                candidate = with_suffix(base, f"_{suffix}", self.max_length)
                suffix += 1

            taken.add(candidate)
            identifiers.append(candidate)

        return identifiers
