"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Config file has invalid syntax
- ConfigValidationError: Config values fail validation
"""

from typing import Any

from .base import ChromatuneError, RecoveryCategory


class ConfigurationError(ChromatuneError):
    """Configuration is invalid or cannot be loaded."""

    category = RecoveryCategory.MALFORMED_INPUT


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        user_msg = "Configuration file has invalid syntax"
        recovery = (
            "Check the file for trailing commas, missing quotes or unclosed braces\n"
            f"Edit: {file_path}\n"
            "Or regenerate it with 'chromatune config init --force'"
        )

        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
        elif "empty" in parse_error.lower():
            user_msg = "Configuration file is empty"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recovery_hint=recovery
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if "preset" in field.lower():
            recovery += "\nRun 'chromatune presets' to see valid preset names"
        elif "accent" in field.lower():
            recovery += "\nAccent colors must be '#RGB' or '#RRGGBB'"
        elif "cache" in field.lower():
            recovery += "\nCache capacity must be >= 1 and the TTL > 0 seconds"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value}: {error_msg}",
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.file_path = file_path
