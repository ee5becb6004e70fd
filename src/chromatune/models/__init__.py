"""Data models for the music-to-color pipeline."""

from .color import OKLABColor, OKLCHColor, RGBColor
from .config import PipelineConfig
from .coordination import (
    ColorResult,
    ColorTemperature,
    CoordinationOptions,
    CoordinationStrategy,
    EmotionalRange,
    GenreCharacteristics,
    MusicalColorContext,
    MusicalOKLABResult,
    VibrancyLevel,
)
from .emotion import EmotionalState, EmotionalTemperatureResult, EmotionProfile
from .music import MusicAnalysisData
from .preset import (
    COSMIC,
    PRESETS,
    STANDARD,
    SUBTLE,
    VIBRANT,
    EnhancementPreset,
    blend_presets,
    create_custom_preset,
    get_preset,
    resolve_preset,
)
from .processing import OKLABProcessingResult

__all__ = [
    # Colors
    "OKLABColor",
    "OKLCHColor",
    "RGBColor",
    # Presets
    "COSMIC",
    "EnhancementPreset",
    "PRESETS",
    "STANDARD",
    "SUBTLE",
    "VIBRANT",
    "blend_presets",
    "create_custom_preset",
    "get_preset",
    "resolve_preset",
    # Music and emotion
    "EmotionProfile",
    "EmotionalState",
    "EmotionalTemperatureResult",
    "MusicAnalysisData",
    "OKLABProcessingResult",
    # Coordination
    "ColorResult",
    "ColorTemperature",
    "CoordinationOptions",
    "CoordinationStrategy",
    "EmotionalRange",
    "GenreCharacteristics",
    "MusicalColorContext",
    "MusicalOKLABResult",
    "VibrancyLevel",
    # Config
    "PipelineConfig",
]
