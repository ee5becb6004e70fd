"""Audio-analysis features consumed by the classifiers."""

import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Neutral values substituted for absent features by `with_defaults()`.
NEUTRAL_FEATURES: dict[str, float | int] = {
    "energy": 0.5,
    "valence": 0.5,
    "danceability": 0.5,
    "tempo": 120.0,
    "loudness": -10.0,
    "acousticness": 0.5,
    "instrumentalness": 0.5,
    "speechiness": 0.5,
    "mode": 1,
    "key": 0,
}


class MusicAnalysisData(BaseModel):
    """Audio features for one track, every field optional.

    Non-numeric or non-finite feature values are dropped to None at
    construction, so `has_core_features` reflects whether the analysis
    service actually delivered energy and valence.
    """

    model_config = ConfigDict(frozen=True)

    energy: float | None = Field(default=None, description="0-1")
    valence: float | None = Field(default=None, description="0-1, negative to positive")
    danceability: float | None = Field(default=None, description="0-1")
    tempo: float | None = Field(default=None, description="Beats per minute")
    loudness: float | None = Field(default=None, description="dB")
    acousticness: float | None = Field(default=None, description="0-1")
    instrumentalness: float | None = Field(default=None, description="0-1")
    speechiness: float | None = Field(default=None, description="0-1")
    mode: int | None = Field(default=None, description="0 = minor, 1 = major")
    key: int | None = Field(default=None, description="Pitch class 0-11")
    genre: str | None = Field(default=None, description="Genre label from an external source")

    @field_validator(
        "energy", "valence", "danceability", "tempo", "loudness",
        "acousticness", "instrumentalness", "speechiness", "mode", "key",
        mode="before",
    )
    @classmethod
    def drop_non_numeric(cls, v: Any, info) -> Any:
        if v is None:
            return None
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
            logger.debug(f"Ignoring non-numeric {info.field_name}={v!r}")
            return None
        if info.field_name in ("mode", "key"):
            return int(v)
        return v

    @field_validator("genre", mode="before")
    @classmethod
    def drop_non_string_genre(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        logger.debug(f"Ignoring non-string genre={v!r}")
        return None

    @property
    def has_core_features(self) -> bool:
        """True when both energy and valence are present."""
        return self.energy is not None and self.valence is not None

    def with_defaults(self) -> "MusicAnalysisData":
        """Return a copy with every absent numeric feature set to its neutral value."""
        filled = {
            name: neutral if getattr(self, name) is None else getattr(self, name)
            for name, neutral in NEUTRAL_FEATURES.items()
        }
        return self.model_copy(update=filled)

    def cache_token(self) -> str:
        """Canonical serialization used in cache keys."""
        return self.model_dump_json()
