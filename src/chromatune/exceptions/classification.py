"""Classification-related exceptions.

Raised when a genre or preset lookup cannot be satisfied. The pipeline
recovers from these by substituting the STANDARD preset.
"""

from .base import ChromatuneError, RecoveryCategory


class ClassificationError(ChromatuneError):
    """A genre, emotion or preset lookup failed."""

    category = RecoveryCategory.LOOKUP


class UnknownPresetError(ClassificationError):
    """Requested enhancement preset name is not a built-in preset."""

    def __init__(self, name: str, available: list[str]):
        """
        Initialize unknown preset error.

        Args:
            name: The requested preset name
            available: Names of the built-in presets
        """
        super().__init__(
            user_message=f"Unknown enhancement preset: {name!r}",
            technical_message=f"Preset lookup failed for {name!r}; available={available}",
            recovery_hint=f"Choose one of: {', '.join(available)}",
        )
        self.name = name
        self.available = available
