"""Default genre classifier driven by audio features."""

import logging

from chromatune.exceptions import ErrorContext
from chromatune.models.coordination import GenreCharacteristics
from chromatune.models.music import MusicAnalysisData
from chromatune.models.preset import STANDARD, EnhancementPreset, create_custom_preset, get_preset

from .profiles import DEFAULT_GENRE, GENRE_PROFILES, GenreProfile

logger = logging.getLogger(__name__)


def detect_genre_from_features(music_data: MusicAnalysisData | None) -> str:
    """
    Rule-based genre guess from audio features.

    Rules are checked in order; the first match wins. Missing features
    take their neutral defaults (0.5, tempo 120).
    """
    if music_data is None:
        return DEFAULT_GENRE

    f = music_data.with_defaults()
    if f.instrumentalness > 0.6 and f.acousticness < 0.2 and f.energy > 0.6:
        return "techno" if f.tempo > 120 else "electronic"
    if f.danceability > 0.7 and f.energy > 0.7:
        return "dance"
    if f.acousticness > 0.7 and f.energy < 0.4:
        return "classical"
    if f.acousticness > 0.5 and f.instrumentalness < 0.1:
        return "jazz"
    if f.energy > 0.7 and f.instrumentalness < 0.1 and f.danceability > 0.5:
        return "rock"
    if f.danceability > 0.7 and f.instrumentalness < 0.2 and f.energy > 0.5 and f.tempo < 110:
        return "hiphop"
    return DEFAULT_GENRE


class GenreProfileClassifier:
    """
    Built-in GenreClassifier.

    Detects a genre from audio features and maps it to an enhancement
    preset and color characteristics. Unknown genres use the 'default'
    profile (STANDARD).
    """

    def __init__(self, debug: bool = False):
        self._debug = debug

    def _profile(self, genre: str) -> GenreProfile:
        return GENRE_PROFILES.get(genre.lower(), GENRE_PROFILES[DEFAULT_GENRE])

    def detect_genre(self, music_data: MusicAnalysisData | None) -> str:
        genre = detect_genre_from_features(music_data)
        if self._debug:
            logger.info(f"Detected genre '{genre}'")
        return genre

    def get_preset_for_genre(self, genre: str) -> EnhancementPreset:
        """Preset for a genre; falls back to STANDARD if the profile names an unknown preset."""
        profile = self._profile(genre)
        with ErrorContext(
            f"look up preset for genre '{genre}'", fallback=STANDARD, logger_instance=logger
        ) as ctx:
            ctx.value = get_preset(profile.preset_name)
        return ctx.value

    def get_preset_for_track(self, music_data: MusicAnalysisData | None) -> EnhancementPreset:
        return self.get_preset_for_genre(self.detect_genre(music_data))

    def get_characteristics_for_genre(self, genre: str) -> GenreCharacteristics:
        return self._profile(genre).characteristics

    def get_characteristics_for_track(self, music_data: MusicAnalysisData | None) -> GenreCharacteristics:
        return self.get_characteristics_for_genre(self.detect_genre(music_data))

    def create_contextual_preset(
        self,
        music_data: MusicAnalysisData,
        intensity_multiplier: float = 1.0,
        suffix: str = "contextual",
    ) -> EnhancementPreset:
        """
        Scale the genre's preset by how energetic and danceable the track is.

        combined = (energy + danceability) / 2 * intensity_multiplier;
        chroma is scaled by 0.8 + 0.4*combined and lightness by 0.9 + 0.2*combined.
        """
        genre = self.detect_genre(music_data)
        base = self.get_preset_for_genre(genre)
        features = music_data.with_defaults()
        combined = (features.energy + features.danceability) / 2 * intensity_multiplier

        preset = create_custom_preset(
            f"{genre}-{suffix}",
            f"Contextual {base.description} for {genre}",
            lightness_boost=base.lightness_boost * (0.9 + combined * 0.2),
            chroma_boost=base.chroma_boost * (0.8 + combined * 0.4),
            shadow_reduction=base.shadow_reduction,
            vibrant_threshold=base.vibrant_threshold,
        )
        logger.debug(
            f"Contextual preset for '{genre}': chroma {base.chroma_boost} -> {preset.chroma_boost:.3f}, "
            f"lightness {base.lightness_boost} -> {preset.lightness_boost:.3f}"
        )
        return preset

    @staticmethod
    def all_mappings() -> dict[str, tuple[str, GenreCharacteristics]]:
        """Every known genre with its preset name and characteristics."""
        return {genre: (p.preset_name, p.characteristics) for genre, p in GENRE_PROFILES.items()}
