"""Static tables for the emotional state classifier.

Both tables are built once at import time and exposed read-only.
"""

from types import MappingProxyType
from typing import NamedTuple

from chromatune.models.emotion import EmotionalState, EmotionProfile

_S = EmotionalState

EMOTION_PROFILES: MappingProxyType[EmotionalState, EmotionProfile] = MappingProxyType({
    _S.CALM: EmotionProfile(
        temperature_range=(2700, 4000),
        base_temperature=3200,
        energy_range=(0.0, 0.3),
        valence_range=(0.4, 0.8),
        intensity=0.6,
        description="Warm, soothing, meditative states",
        base_hex="#89b4fa",
        preset_name="SUBTLE",
        lightness_band=(0.6, 0.8),
        chroma_boost=0.9,
        hue_shift=15,
        breathing_seconds=6.0,
    ),
    _S.MELANCHOLY: EmotionProfile(
        temperature_range=(2200, 3500),
        base_temperature=2800,
        energy_range=(0.0, 0.4),
        valence_range=(0.0, 0.4),
        intensity=0.8,
        description="Deep, introspective, amber-golden tones",
        base_hex="#f9e2af",
        preset_name="STANDARD",
        lightness_band=(0.4, 0.6),
        chroma_boost=1.1,
        hue_shift=-10,
        breathing_seconds=8.0,
    ),
    _S.ENERGETIC: EmotionProfile(
        temperature_range=(5500, 7500),
        base_temperature=6500,
        energy_range=(0.6, 1.0),
        valence_range=(0.5, 1.0),
        intensity=1.0,
        description="Bright, vibrant, high-energy states",
        base_hex="#a6e3a1",
        preset_name="VIBRANT",
        lightness_band=(0.7, 0.9),
        chroma_boost=1.3,
        hue_shift=5,
        breathing_seconds=2.0,
    ),
    _S.AGGRESSIVE: EmotionProfile(
        temperature_range=(8000, 12000),
        base_temperature=10000,
        energy_range=(0.7, 1.0),
        valence_range=(0.0, 0.6),
        intensity=1.2,
        description="Cool, intense, high-energy negative valence",
        base_hex="#f38ba8",
        preset_name="COSMIC",
        lightness_band=(0.5, 0.7),
        chroma_boost=1.4,
        hue_shift=-5,
        breathing_seconds=1.5,
    ),
    _S.HAPPY: EmotionProfile(
        temperature_range=(4500, 6500),
        base_temperature=5500,
        energy_range=(0.4, 0.8),
        valence_range=(0.6, 1.0),
        intensity=0.9,
        description="Balanced, joyful, warm-white tones",
        base_hex="#fab387",
        preset_name="STANDARD",
        lightness_band=(0.75, 0.85),
        chroma_boost=1.15,
        hue_shift=8,
        breathing_seconds=3.0,
    ),
    _S.ROMANTIC: EmotionProfile(
        temperature_range=(2500, 3500),
        base_temperature=3000,
        energy_range=(0.2, 0.6),
        valence_range=(0.5, 0.9),
        intensity=0.7,
        description="Soft, intimate, warm tones with pink accent",
        base_hex="#f5c2e7",
        preset_name="SUBTLE",
        lightness_band=(0.65, 0.8),
        chroma_boost=1.0,
        hue_shift=12,
        breathing_seconds=5.0,
    ),
    _S.MYSTERIOUS: EmotionProfile(
        temperature_range=(1800, 2800),
        base_temperature=2300,
        energy_range=(0.1, 0.5),
        valence_range=(0.1, 0.5),
        intensity=0.9,
        description="Deep, enigmatic, low temperature with purple accent",
        base_hex="#cba6f7",
        preset_name="VIBRANT",
        lightness_band=(0.3, 0.5),
        chroma_boost=1.2,
        hue_shift=-15,
        breathing_seconds=7.0,
    ),
    _S.EPIC: EmotionProfile(
        temperature_range=(7000, 15000),
        base_temperature=11000,
        energy_range=(0.6, 1.0),
        valence_range=(0.3, 0.8),
        intensity=1.3,
        description="Grand, cinematic, high contrast blue-gold",
        base_hex="#74c7ec",
        preset_name="COSMIC",
        lightness_band=(0.6, 0.9),
        chroma_boost=1.35,
        hue_shift=20,
        breathing_seconds=2.5,
    ),
    _S.AMBIENT: EmotionProfile(
        temperature_range=(3000, 5000),
        base_temperature=4000,
        energy_range=(0.1, 0.4),
        valence_range=(0.3, 0.7),
        intensity=0.5,
        description="Atmospheric, floating, neutral temperature",
        base_hex="#94e2d5",
        preset_name="SUBTLE",
        lightness_band=(0.5, 0.7),
        chroma_boost=0.8,
        hue_shift=0,
        breathing_seconds=10.0,
    ),
})


class GenreAdjustment(NamedTuple):
    """How a genre label modifies the quadrant classification."""

    override: EmotionalState | None = None
    secondary: EmotionalState | None = None
    blend_ratio: float = 0.7


# Keys are normalized: lower-case, runs of spaces/underscores/hyphens become "-".
GENRE_ADJUSTMENTS: MappingProxyType[str, GenreAdjustment] = MappingProxyType({
    # Electronic
    "edm": GenreAdjustment(secondary=_S.ENERGETIC, blend_ratio=0.8),
    "house": GenreAdjustment(secondary=_S.ENERGETIC, blend_ratio=0.7),
    "ambient": GenreAdjustment(override=_S.AMBIENT),
    "downtempo": GenreAdjustment(override=_S.CALM, secondary=_S.AMBIENT, blend_ratio=0.6),
    # Rock
    "metal": GenreAdjustment(override=_S.AGGRESSIVE),
    "hard-rock": GenreAdjustment(secondary=_S.AGGRESSIVE, blend_ratio=0.8),
    "alternative": GenreAdjustment(secondary=_S.EPIC, blend_ratio=0.7),
    # Classical and orchestral
    "classical": GenreAdjustment(override=_S.EPIC, secondary=_S.CALM, blend_ratio=0.6),
    "soundtrack": GenreAdjustment(override=_S.EPIC),
    "orchestral": GenreAdjustment(override=_S.EPIC),
    # Jazz and soul
    "jazz": GenreAdjustment(override=_S.MYSTERIOUS, secondary=_S.ROMANTIC, blend_ratio=0.7),
    "blues": GenreAdjustment(override=_S.MELANCHOLY),
    "soul": GenreAdjustment(secondary=_S.ROMANTIC, blend_ratio=0.6),
    # Folk and acoustic
    "folk": GenreAdjustment(override=_S.CALM, secondary=_S.MELANCHOLY, blend_ratio=0.6),
    "acoustic": GenreAdjustment(override=_S.ROMANTIC, secondary=_S.CALM, blend_ratio=0.7),
    # Hip-hop and urban
    "hip-hop": GenreAdjustment(secondary=_S.AGGRESSIVE, blend_ratio=0.8),
    "trap": GenreAdjustment(secondary=_S.AGGRESSIVE, blend_ratio=0.9),
    # Pop
    "pop": GenreAdjustment(secondary=_S.HAPPY, blend_ratio=0.7),
    "indie-pop": GenreAdjustment(secondary=_S.HAPPY, blend_ratio=0.6),
})
