"""
Custom exception hierarchy for Chromatune.

## Exception Hierarchy

```
ChromatuneError (base)
├── ColorError
│   ├── InvalidHexColorError
│   └── InterpolationError
├── ClassificationError
│   └── UnknownPresetError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ChromatuneError`, which provides
`user_message`, `technical_message` and `recovery_hint`. Each branch carries a
`RecoveryCategory`: color and config errors are MALFORMED_INPUT,
classification errors are LOOKUP, anything else is UNEXPECTED.

Strict helpers (`hex_to_rgb`, `interpolate_oklab`, `get_preset`) raise these;
component boundaries convert them into fallbacks through `ErrorContext`.
"""

from .base import ChromatuneError, RecoveryCategory, categorize
from .classification import ClassificationError, UnknownPresetError
from .color import ColorError, InterpolationError, InvalidHexColorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    # Base
    "ChromatuneError",
    "RecoveryCategory",
    "categorize",
    # Classification
    "ClassificationError",
    "UnknownPresetError",
    # Color
    "ColorError",
    "InterpolationError",
    "InvalidHexColorError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
]
