"""Color-related exceptions.

- ColorError: Base class for color parsing and processing errors
- InvalidHexColorError: A string is not a `#RGB` / `#RRGGBB` hex color
- InterpolationError: Interpolation endpoints or step counts are invalid
"""

from typing import Any

from .base import ChromatuneError, RecoveryCategory


class ColorError(ChromatuneError):
    """Color input could not be parsed or processed."""

    category = RecoveryCategory.MALFORMED_INPUT


class InvalidHexColorError(ColorError):
    """Value is not a valid hex color string."""

    def __init__(self, value: Any):
        """
        Initialize invalid hex color error.

        Args:
            value: The rejected input
        """
        super().__init__(
            user_message=f"Invalid hex color: {value!r}",
            technical_message=f"Hex parse failed for {value!r} (type={type(value).__name__})",
            recovery_hint="Use '#RGB' or '#RRGGBB' with hexadecimal digits, e.g. '#89b4fa'",
        )
        self.value = value


class InterpolationError(ColorError):
    """Interpolation between two colors cannot be performed."""

    def __init__(self, start: Any, end: Any, reason: str):
        """
        Initialize interpolation error.

        Args:
            start: Start color as supplied
            end: End color as supplied
            reason: Why interpolation failed
        """
        super().__init__(
            user_message=f"Cannot interpolate {start!r} -> {end!r}: {reason}",
            technical_message=f"Interpolation failed start={start!r} end={end!r}: {reason}",
        )
        self.start = start
        self.end = end
        self.reason = reason
