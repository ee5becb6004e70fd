"""
Recovery and display helpers.

The pipeline never lets a failure escape to the caller. Strict helpers raise
typed ChromatuneError subclasses; component boundaries run them inside an
ErrorContext, which logs by recovery category and hands back the substitute.

| Pattern | Code |
|---------|------|
| Step with a substitute value | `with ErrorContext("look up preset", fallback=STANDARD) as ctx: ctx.value = get_preset(name)` |
| Convert pydantic errors from a config file | `raise wrap_pydantic_error(e, str(path)) from e` |
| Show an error in the CLI | `message, hint = format_error_for_display(e)` |
"""

import logging
from typing import Optional

from .base import ChromatuneError, RecoveryCategory, categorize
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


class ErrorContext[T]:
    """
    Run one pipeline step and substitute `fallback` if it fails.

    The body stores its product in `ctx.value`. On failure the exception is
    suppressed, `value` is reset to the fallback and `error` / `category`
    record what happened. Malformed-input and lookup failures log a WARNING
    with the technical message; unexpected failures log an ERROR with the
    traceback.

    Example:
        ```python
        with ErrorContext("enhance calm base color", fallback=None) as ctx:
            ctx.value = enhancer.process_color(base_hex, preset)

        if ctx.failed:
            ...
        ```
    """

    def __init__(
        self,
        operation: str,
        fallback: T,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.operation = operation
        self.fallback = fallback
        self.logger = logger_instance or logger
        self.value: T = fallback
        self.error: Optional[Exception] = None
        self.category: Optional[RecoveryCategory] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def __enter__(self) -> "ErrorContext[T]":
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        # KeyboardInterrupt / SystemExit are not pipeline failures
        if not isinstance(exc_val, Exception):
            return False

        self.error = exc_val
        self.category = categorize(exc_val)
        self.value = self.fallback

        if self.category is RecoveryCategory.UNEXPECTED:
            self.logger.error(
                f"Failed to {self.operation} ({self.category.value}): {exc_val}; using fallback",
                exc_info=True,
            )
        else:
            detail = exc_val.technical_message if isinstance(exc_val, ChromatuneError) else str(exc_val)
            self.logger.warning(
                f"Failed to {self.operation} ({self.category.value}): {detail}; using fallback"
            )
        return True


def wrap_pydantic_error(error: Exception, file_path: str) -> ChromatuneError:
    """
    Convert a pydantic error raised while loading a config file.

    JSON syntax problems become ConfigFileInvalidError. Field errors become a
    ConfigValidationError naming the first failing field.
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # "Invalid JSON: <detail> [type=json_invalid, ..."
    if "json_invalid" in error_msg:
        parse_error = error_msg.split("Invalid JSON:")[-1].split("[type=")[0].strip()
        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError) and error.errors():
        errors = error.errors()
        first = errors[0]
        message = first.get("msg", "validation failed")
        if len(errors) > 1:
            message += f" (and {len(errors) - 1} more)"
        return ConfigValidationError(
            field=".".join(str(loc) for loc in first.get("loc", ("unknown",))),
            value=first.get("input"),
            error_msg=message,
            file_path=file_path,
        )

    return ConfigValidationError(field="unknown", value=None, error_msg=error_msg, file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """(user message, recovery hint or None) for CLI output."""
    if isinstance(error, ChromatuneError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
