"""
Description formatting for emitted docstrings and comments.
"""

import re

from branchtree.scaffold.constants import ERROR_KEYWORDS

_WORD_RE = re.compile(r"[a-z]+")


def collapse_whitespace(text: str) -> str:
    """Join all whitespace runs into single spaces and trim the ends."""
    return " ".join(text.split())


def format_description(text: str) -> str:
    """
    Capitalize a description and make sure it ends with punctuation.

    Params:
        text: Description text

    Returns:
        Formatted text, or an empty string for blank input

    Examples:
        "should return sum" -> "Should return sum."
        "should panic!" -> "Should panic!"
    """
    text = collapse_whitespace(text)
    if not text:
        return ""

    text = text[0].upper() + text[1:]
    if text.endswith((".", "!", "?")):
        return text
    return f"{text}."


def expects_error(description: str) -> bool:
    """Check if a leaf description says the unit under test should raise."""
    return any(word in ERROR_KEYWORDS for word in _WORD_RE.findall(description.lower()))


def escape_unprintable(text: str) -> str:
    """Replace characters that cannot appear raw in source text with escape sequences."""
    return "".join(
        char if char.isprintable() else char.encode("unicode_escape").decode("ascii")
        for char in text
    )


def docstring_literal(text: str) -> str:
    """Render text as a triple-quoted docstring literal that parses back to text."""
    escaped = escape_unprintable(text.replace("\\", "\\\\").replace('"', '\\"'))
    return f'"""{escaped}"""'
