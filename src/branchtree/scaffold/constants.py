"""
Lexical conventions of emitted scaffolds.

The structure extractor recognizes exactly these conventions, so they are
defined once for both sides.
"""

# Branch scopes are classes, leaves are test functions
BRANCH_PREFIX = "Test_"
LEAF_PREFIX = "test_"

# Any other class with this prefix would be collected by pytest but cannot be mapped
COLLECTED_CLASS_PREFIX = "Test"

MODULE_DOCSTRING_PREFIX = "Tests for "

INDENTATION = "    "

PLACEHOLDER_STATEMENT = 'pytest.skip("not implemented")'

ERROR_EXPECTATION = "with pytest.raises(Exception):"

# Words in a leaf description that indicate the unit under test should raise
ERROR_KEYWORDS = frozenset(
    {
        "error",
        "errors",
        "fail",
        "fails",
        "panic",
        "panics",
        "raise",
        "raises",
        "revert",
        "reverts",
        "throw",
        "throws",
    }
)
