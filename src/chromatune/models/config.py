"""Pipeline configuration model."""

import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from chromatune.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".chromatune" / "config.json"

_HEX_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


class PipelineConfig(BaseModel):
    """Settings for a ProcessingCoordinator instance."""

    cache_capacity: int = Field(default=20, ge=1, description="Maximum cached results (LRU)")
    cache_ttl_seconds: float = Field(
        default=300.0, gt=0, description="Lifetime of a cached result in seconds"
    )
    default_accent_hex: str = Field(
        default="#cba6f7", description="Accent used when no color could be processed"
    )
    default_preset: str = Field(
        default="STANDARD", description="Preset used by the fallback strategy"
    )
    accent_priority: list[str] = Field(
        default_factory=lambda: ["VIBRANT", "PROMINENT", "DARK_VIBRANT", "LIGHT_VIBRANT"],
        description="Color keys tried in order when choosing the accent",
    )
    debug: bool = Field(default=False, description="Log per-request details at INFO")

    @field_validator("default_accent_hex")
    @classmethod
    def validate_accent_hex(cls, v: str) -> str:
        if not _HEX_PATTERN.match(v.strip()):
            raise ValueError("must be '#RGB' or '#RRGGBB'")
        return v.strip().lower()

    @field_validator("default_preset")
    @classmethod
    def validate_default_preset(cls, v: str) -> str:
        from chromatune.models.preset import PRESETS

        name = v.strip().upper()
        if name not in PRESETS:
            raise ValueError(f"must be one of {', '.join(PRESETS)}")
        return name

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "PipelineConfig":
        """
        Load config from file or return defaults.

        Args:
            path: Path to config file. If None, uses ~/.chromatune/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (atomic write, previous file kept as .bak)."""
        if path is None:
            path = DEFAULT_CONFIG_PATH
        PydanticPersistence.save_json(self, path)
