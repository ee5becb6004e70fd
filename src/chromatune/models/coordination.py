"""Request, response and interop records for the processing coordinator."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .color import RGBColor
from .emotion import EmotionalTemperatureResult
from .music import MusicAnalysisData
from .preset import EnhancementPreset
from .processing import OKLABProcessingResult


class CoordinationStrategy(str, Enum):
    """How the enhancement preset for a request was chosen."""

    GENRE_PRIMARY = "genre-primary"
    EMOTION_PRIMARY = "emotion-primary"
    BALANCED = "balanced"
    FALLBACK = "fallback"


class VibrancyLevel(str, Enum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    VIBRANT = "vibrant"
    COSMIC = "cosmic"


class EmotionalRange(str, Enum):
    NARROW = "narrow"
    MODERATE = "moderate"
    WIDE = "wide"
    EXTREME = "extreme"


class ColorTemperature(str, Enum):
    COOL = "cool"
    NEUTRAL = "neutral"
    WARM = "warm"
    DYNAMIC = "dynamic"


class GenreCharacteristics(BaseModel):
    """Color guidance attached to a genre."""

    model_config = ConfigDict(frozen=True)

    vibrancy_level: VibrancyLevel = VibrancyLevel.STANDARD
    emotional_range: EmotionalRange = EmotionalRange.MODERATE
    color_temperature: ColorTemperature = ColorTemperature.NEUTRAL


class MusicalColorContext(BaseModel):
    """One processing request."""

    model_config = ConfigDict(frozen=True)

    music_data: MusicAnalysisData = Field(default_factory=MusicAnalysisData)
    raw_colors: dict[str, Any] = Field(
        default_factory=dict, description="Named colors; non-hex values are skipped"
    )
    track_id: str = ""
    timestamp: float = 0.0
    mode_label: str | None = None


class CoordinationOptions(BaseModel):
    """Caller overrides for a single request."""

    model_config = ConfigDict(frozen=True)

    prefer_genre_over_emotion: bool | None = Field(
        default=None,
        description="True forces genre-primary, False forces emotion-primary, None lets the coordinator decide",
    )
    intensity_multiplier: float = Field(
        default=1.0, description="Chroma multiplier applied to balanced-strategy blends"
    )


class MusicalOKLABResult(BaseModel):
    """Complete response for one request."""

    model_config = ConfigDict(frozen=True)

    enhanced_colors: dict[str, str]
    accent_hex: str
    accent_rgb: RGBColor
    preset: EnhancementPreset
    oklab_results: dict[str, OKLABProcessingResult]
    detected_genre: str
    emotional_result: EmotionalTemperatureResult
    genre_characteristics: GenreCharacteristics
    processing_time_ms: float
    music_influence_strength: float = Field(ge=0.0, le=1.0)
    strategy: CoordinationStrategy
    variables: dict[str, str]


class ColorResult(BaseModel):
    """Generic color result shape shared with other palette consumers."""

    model_config = ConfigDict(frozen=True)

    processed_colors: dict[str, str]
    accent_hex: str
    accent_rgb: str
    metadata: dict[str, Any]
    context: dict[str, Any]
