"""Audio features -> emotional state, intensity and a representative color."""

import logging
import re

from chromatune.color.enhancer import PerceptualColorEnhancer
from chromatune.exceptions import ErrorContext
from chromatune.models.emotion import (
    EmotionalState,
    EmotionalTemperatureResult,
    EmotionProfile,
)
from chromatune.models.music import MusicAnalysisData
from chromatune.models.preset import EnhancementPreset, create_custom_preset, resolve_preset
from chromatune.models.processing import OKLABProcessingResult

from .profiles import EMOTION_PROFILES, GENRE_ADJUSTMENTS, GenreAdjustment

logger = logging.getLogger(__name__)

_S = EmotionalState
_GENRE_SEPARATORS = re.compile(r"[\s_\-]+")

MIN_INTENSITY = 0.1
MAX_INTENSITY = 1.5


def normalize_genre(genre: str) -> str:
    """'Hip Hop' / 'hip_hop' / 'HIP-HOP' -> 'hip-hop'."""
    return _GENRE_SEPARATORS.sub("-", genre.strip().lower())


def classify_quadrant(
    energy: float, valence: float, danceability: float
) -> tuple[EmotionalState, EmotionalState | None, float]:
    """
    Place a track in the energy/valence plane.

    Returns:
        (primary, secondary or None, blend ratio of the primary)
    """
    if energy >= 0.6 and valence >= 0.6:
        primary = _S.ENERGETIC if danceability > 0.7 else _S.HAPPY
        if energy > 0.8 and valence > 0.8:
            return primary, _S.EPIC, 0.7
    elif energy >= 0.6 and valence < 0.5:
        primary = _S.AGGRESSIVE if energy > 0.8 else _S.EPIC
        if valence < 0.3:
            return primary, _S.MYSTERIOUS, 0.8
    elif energy < 0.4 and valence >= 0.5:
        primary = _S.CALM if valence > 0.7 else _S.ROMANTIC
        if energy < 0.2:
            return primary, _S.AMBIENT, 0.6
    else:
        primary = _S.MELANCHOLY if valence < 0.3 else _S.MYSTERIOUS
        if energy < 0.2 and valence < 0.2:
            return primary, _S.AMBIENT, 0.8
    return primary, None, 1.0


def calculate_intensity(profile: EmotionProfile, energy: float, valence: float, tempo: float) -> float:
    tempo_influence = 0.1 if tempo > 140 else -0.1 if tempo < 80 else 0.0
    raw = profile.intensity + energy * 0.3 + abs(valence - 0.5) * 0.2 + tempo_influence
    return max(MIN_INTENSITY, min(MAX_INTENSITY, raw))


def calculate_temperature(profile: EmotionProfile, energy: float, valence: float) -> int:
    low, high = profile.temperature_range
    position = energy * 0.6 + valence * 0.4
    return round(low + (high - low) * position)


def calculate_warmth(temperature: float) -> float:
    """Warm (0.7-1.0) below 4000K, neutral (0.5-0.7) mid-range, cool (0.2-0.7) above 7000K."""
    if temperature <= 4000:
        return 0.7 + (4000 - temperature) / (4000 - 1800) * 0.3
    if temperature >= 7000:
        return max(0.2, 0.7 - (temperature - 7000) / (15000 - 7000) * 0.5)
    return 0.5 + (7000 - temperature) / (7000 - 4000) * 0.2


def calculate_breathing_cycle(profile: EmotionProfile, intensity: float) -> float:
    """Seconds per breathing cycle; higher intensity breathes faster."""
    return profile.breathing_seconds * max(0.5, min(2.0, 2.0 - intensity))


def temperature_to_hue_shift(temperature: float) -> float:
    if temperature <= 4000:
        return -15 - (4000 - temperature) / (4000 - 2000) * 15
    if temperature >= 8000:
        return 10 + (temperature - 8000) / (15000 - 8000) * 20
    return -5 + (temperature - 4000) / (8000 - 4000) * 15


def temperature_to_brightness(temperature: float) -> float:
    return 0.9 + (temperature - 2000) / (15000 - 2000) * 0.3


def intensity_to_saturation(intensity: float) -> float:
    return max(0.8, min(1.5, 1.0 + (intensity - 0.5) * 0.4))


def create_contextual_preset(
    state: EmotionalState,
    profile: EmotionProfile,
    intensity: float,
    energy: float,
    valence: float,
) -> EnhancementPreset:
    """
    Derive a one-off preset from the state's base preset and the features.

    Target lightness is placed inside the state's lightness band by
    0.2 + 0.5*energy + 0.3*valence and expressed as a boost relative to
    mid-grey; chroma scales with intensity and energy.
    """
    base = resolve_preset(profile.preset_name)
    band_low, band_high = profile.lightness_band
    lightness_factor = 0.2 + energy * 0.5 + valence * 0.3
    target_lightness = band_low + (band_high - band_low) * lightness_factor
    chroma = profile.chroma_boost * intensity * (0.8 + energy * 0.4)

    return create_custom_preset(
        f"{state.style_class}-contextual",
        f"Contextual {base.name} for {profile.description.lower()}",
        lightness_boost=target_lightness / 0.5,
        chroma_boost=chroma,
        shadow_reduction=base.shadow_reduction,
        vibrant_threshold=base.vibrant_threshold,
    )


def _fmt(value: float, digits: int = 3) -> str:
    return f"{value:.{digits}f}"


class EmotionalStateClassifier:
    """
    Maps audio features to an EmotionalTemperatureResult.

    Deterministic for identical input. Each classification runs the
    enhancer once on the state's base color to obtain a representative
    perceptual color.

    Example:
        ```python
        classifier = EmotionalStateClassifier()
        result = classifier.classify(MusicAnalysisData(energy=0.9, valence=0.9, danceability=0.9))
        result.primary, result.secondary, result.blend_ratio
        # (EmotionalState.ENERGETIC, EmotionalState.EPIC, 0.7)
        ```
    """

    def __init__(self, enhancer: PerceptualColorEnhancer | None = None, debug: bool = False):
        """
        Initialize the classifier.

        Args:
            enhancer: Enhancer used for the representative color (a new one if None)
            debug: Log every classification at INFO instead of DEBUG
        """
        self._enhancer = enhancer or PerceptualColorEnhancer()
        self._debug = debug

    def classify(self, music_data: MusicAnalysisData | None) -> EmotionalTemperatureResult:
        """Classify one bundle of audio features. Never raises for missing features."""
        raw = music_data or MusicAnalysisData()
        features = raw.with_defaults()
        energy, valence = features.energy, features.valence

        primary, secondary, blend_ratio = classify_quadrant(energy, valence, features.danceability)

        if raw.genre:
            adjustment = GENRE_ADJUSTMENTS.get(normalize_genre(raw.genre))
            if adjustment is not None:
                primary, secondary, blend_ratio = self._apply_genre(
                    adjustment, primary, secondary, blend_ratio
                )

        profile = EMOTION_PROFILES[primary]
        intensity = calculate_intensity(profile, energy, valence, features.tempo)
        temperature = calculate_temperature(profile, energy, valence)
        preset = create_contextual_preset(primary, profile, intensity, energy, valence)

        with ErrorContext(f"enhance {primary.value} base color", fallback=None, logger_instance=logger) as ctx:
            ctx.value = self._enhancer.process_color(profile.base_hex, preset)
        oklab_result = ctx.value
        perceptual_hex = oklab_result.enhanced_hex if oklab_result is not None else profile.base_hex

        variables = self.generate_variables(
            primary, secondary, intensity, temperature, blend_ratio, oklab_result
        )

        result = EmotionalTemperatureResult(
            primary=primary,
            secondary=secondary,
            intensity=intensity,
            temperature=temperature,
            blend_ratio=blend_ratio,
            style_class=primary.style_class,
            preset=preset,
            oklab_result=oklab_result,
            perceptual_hex=perceptual_hex,
            variables=variables,
        )

        log = logger.info if self._debug else logger.debug
        log(
            f"Classified energy={energy:.2f} valence={valence:.2f} genre={raw.genre!r} -> "
            f"{primary.value}"
            + (f"+{secondary.value}@{blend_ratio}" if secondary else "")
            + f" intensity={intensity:.2f} temperature={temperature}K color={perceptual_hex}"
        )
        return result

    @staticmethod
    def _apply_genre(
        adjustment: GenreAdjustment,
        primary: EmotionalState,
        secondary: EmotionalState | None,
        blend_ratio: float,
    ) -> tuple[EmotionalState, EmotionalState | None, float]:
        if adjustment.override is not None:
            primary = adjustment.override
        if adjustment.secondary is not None:
            secondary = adjustment.secondary
            blend_ratio = adjustment.blend_ratio
        return primary, secondary, blend_ratio

    @staticmethod
    def generate_variables(
        primary: EmotionalState,
        secondary: EmotionalState | None,
        intensity: float,
        temperature: int,
        blend_ratio: float,
        oklab_result: OKLABProcessingResult | None,
    ) -> dict[str, str]:
        """Flat `--organic-*` variable mapping for presentation layers."""
        profile = EMOTION_PROFILES[primary]
        variables = {
            "--organic-current-emotion": primary.value,
            "--organic-emotion-primary": primary.value,
            "--organic-emotional-intensity": _fmt(intensity),
            "--organic-current-temperature": str(temperature),
            "--organic-emotional-saturation": _fmt(max(0.5, intensity)),
            "--organic-cinematic-contrast": _fmt(max(0.8, intensity * 1.2)),
            "--organic-warmth": _fmt(calculate_warmth(temperature)),
            "--organic-breathing-cycle": f"{calculate_breathing_cycle(profile, intensity):.2f}s",
            "--organic-temperature-hue-shift": f"{temperature_to_hue_shift(temperature):.1f}deg",
            "--organic-temperature-saturation": _fmt(intensity_to_saturation(intensity)),
            "--organic-temperature-brightness": _fmt(temperature_to_brightness(temperature)),
        }
        if secondary is not None:
            variables["--organic-emotion-secondary"] = secondary.value
            variables["--organic-emotion-blend-ratio"] = _fmt(blend_ratio)

        if oklab_result is not None:
            enhanced_rgb = oklab_result.enhanced_rgb.to_css_triplet()
            variables.update({
                "--organic-emotion-oklab-hex": oklab_result.enhanced_hex,
                "--organic-emotion-oklab-rgb": enhanced_rgb,
                "--organic-emotion-oklab-l": _fmt(oklab_result.oklab_enhanced.L),
                "--organic-emotion-oklab-a": _fmt(oklab_result.oklab_enhanced.a),
                "--organic-emotion-oklab-b": _fmt(oklab_result.oklab_enhanced.b),
                "--organic-emotion-oklch-l": _fmt(oklab_result.oklch_enhanced.L),
                "--organic-emotion-oklch-c": _fmt(oklab_result.oklch_enhanced.C),
                "--organic-emotion-oklch-h": _fmt(oklab_result.oklch_enhanced.H, 1),
                "--organic-emotion-oklab-shadow-hex": oklab_result.shadow_hex,
                "--organic-emotion-oklab-shadow-rgb": oklab_result.shadow_rgb.to_css_triplet(),
                "--organic-perceptual-emotion-color": oklab_result.enhanced_hex,
                "--organic-perceptual-emotion-rgb": enhanced_rgb,
            })
        return variables

    @staticmethod
    def available_states() -> list[EmotionalState]:
        return list(EMOTION_PROFILES)

    @staticmethod
    def profile_for(state: EmotionalState) -> EmotionProfile:
        return EMOTION_PROFILES[state]
