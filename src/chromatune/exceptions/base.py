"""Base exception class and recovery categories for Chromatune.

Every pipeline failure falls into one of three recovery categories, and the
category decides what the pipeline substitutes:

- MALFORMED_INPUT: bad hex, missing or non-numeric features, bad config
  values. Recovered locally with neutral defaults.
- LOOKUP: unknown preset or genre. Recovered with the STANDARD preset.
- UNEXPECTED: anything else. Recovered by the coordinator's fallback result.
"""

from enum import Enum
from typing import Optional


class RecoveryCategory(str, Enum):
    """How the pipeline recovers from a failure."""
    MALFORMED_INPUT = "malformed-input"
    LOOKUP = "lookup"
    UNEXPECTED = "unexpected"


class ChromatuneError(Exception):
    """
    Base exception for all Chromatune errors.

    Subclasses set `category`; the base class is UNEXPECTED.

    Attributes:
        user_message: Human-friendly message for display
        technical_message: Detailed message for logging
        recovery_hint: Optional hint for how to fix the issue
    """

    category: RecoveryCategory = RecoveryCategory.UNEXPECTED

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    @property
    def recoverable(self) -> bool:
        """True when the pipeline has a local substitute for this failure."""
        return self.category is not RecoveryCategory.UNEXPECTED

    def __str__(self) -> str:
        return self.user_message


def categorize(error: BaseException) -> RecoveryCategory:
    """Recovery category for any exception; foreign exceptions are UNEXPECTED."""
    if isinstance(error, ChromatuneError):
        return error.category
    return RecoveryCategory.UNEXPECTED
