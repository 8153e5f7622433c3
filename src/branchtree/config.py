"""
Configuration for scaffold generation and structural checks.

A single immutable configuration object is threaded through the emitter,
the expected-model builder and the validator so that both sides of a check
agree on naming and on how discrepancies are graded.
"""

from pydantic import BaseModel, ConfigDict, Field

from branchtree.core.types import Severity
from branchtree.exceptions import ErrorLevel
from branchtree.naming.strategy import DEFAULT_MAX_IDENTIFIER_LENGTH, NamingStrategy


class BranchTreeConfig(BaseModel):
    """
    Options shared by ``scaffold`` and ``check``.

    Params:
        format_descriptions: Capitalize and punctuate emitted descriptions
        max_identifier_length: Upper bound for generated identifiers, including
            reserved-word prefixes and collision suffixes
        reorder_severity: Severity of REORDERED entries (ERROR fails the check)
        detect_renames: Collapse matching MISSING/EXTRA pairs into RENAMED
        check_error_expectations: Report tests whose description expects an
            error but whose body has no pytest.raises block
        error_level: Detail level of GenerationError messages
    """

    model_config = ConfigDict(frozen=True)

    format_descriptions: bool = False
    max_identifier_length: int = Field(default=DEFAULT_MAX_IDENTIFIER_LENGTH, ge=8)
    reorder_severity: Severity = Severity.ERROR
    detect_renames: bool = False
    check_error_expectations: bool = False
    error_level: ErrorLevel = ErrorLevel.USER

    def naming_strategy(self) -> NamingStrategy:
        """Return the naming strategy both emitter and validator must use."""
        return NamingStrategy(max_length=self.max_identifier_length)


DEFAULT_CONFIG = BranchTreeConfig()
