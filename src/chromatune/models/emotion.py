"""Emotional state vocabulary and the classification result record."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .preset import EnhancementPreset
from .processing import OKLABProcessingResult


class EmotionalState(str, Enum):
    """Closed set of emotional states a track can be classified into."""

    CALM = "calm"
    MELANCHOLY = "melancholy"
    ENERGETIC = "energetic"
    AGGRESSIVE = "aggressive"
    HAPPY = "happy"
    ROMANTIC = "romantic"
    MYSTERIOUS = "mysterious"
    EPIC = "epic"
    AMBIENT = "ambient"

    @property
    def style_class(self) -> str:
        """Presentation class label, e.g. 'organic-emotion-calm'."""
        return f"organic-emotion-{self.value}"


class EmotionProfile(BaseModel):
    """Fixed configuration for one emotional state."""

    model_config = ConfigDict(frozen=True)

    temperature_range: tuple[float, float] = Field(description="Legacy Kelvin range (min, max)")
    base_temperature: float
    energy_range: tuple[float, float]
    valence_range: tuple[float, float]
    intensity: float = Field(description="Base intensity before feature adjustments")
    description: str
    base_hex: str = Field(description="Representative color processed per classification")
    preset_name: str
    lightness_band: tuple[float, float] = Field(description="Target OKLAB lightness (min, max)")
    chroma_boost: float
    hue_shift: float = Field(description="Degrees")
    breathing_seconds: float = Field(description="Base breathing-cycle duration")


class EmotionalTemperatureResult(BaseModel):
    """Outcome of classifying one bundle of audio features."""

    model_config = ConfigDict(frozen=True)

    primary: EmotionalState
    secondary: EmotionalState | None = None
    intensity: float = Field(description="Soft range 0.1-1.5")
    temperature: int = Field(description="Legacy Kelvin-like scalar")
    blend_ratio: float = Field(
        default=1.0, description="Weight of the primary state when a secondary is present"
    )
    style_class: str
    preset: EnhancementPreset
    oklab_result: OKLABProcessingResult | None = None
    perceptual_hex: str | None = None
    variables: dict[str, str] = Field(default_factory=dict)
