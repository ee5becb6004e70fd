"""Genre -> enhancement preset and color guidance table."""

from types import MappingProxyType
from typing import NamedTuple

from chromatune.models.coordination import (
    ColorTemperature,
    EmotionalRange,
    GenreCharacteristics,
    VibrancyLevel,
)

DEFAULT_GENRE = "default"


class GenreProfile(NamedTuple):
    preset_name: str
    characteristics: GenreCharacteristics


def _profile(
    preset_name: str, vibrancy: VibrancyLevel, emotional_range: EmotionalRange, temperature: ColorTemperature
) -> GenreProfile:
    return GenreProfile(
        preset_name,
        GenreCharacteristics(
            vibrancy_level=vibrancy,
            emotional_range=emotional_range,
            color_temperature=temperature,
        ),
    )


_V, _R, _T = VibrancyLevel, EmotionalRange, ColorTemperature

GENRE_PROFILES: MappingProxyType[str, GenreProfile] = MappingProxyType({
    # Electronic
    "electronic": _profile("VIBRANT", _V.VIBRANT, _R.WIDE, _T.DYNAMIC),
    "dance": _profile("COSMIC", _V.COSMIC, _R.EXTREME, _T.DYNAMIC),
    "house": _profile("VIBRANT", _V.VIBRANT, _R.WIDE, _T.WARM),
    "techno": _profile("COSMIC", _V.COSMIC, _R.EXTREME, _T.COOL),
    "trance": _profile("VIBRANT", _V.VIBRANT, _R.WIDE, _T.DYNAMIC),
    # Guitar
    "rock": _profile("VIBRANT", _V.VIBRANT, _R.WIDE, _T.WARM),
    "metal": _profile("COSMIC", _V.COSMIC, _R.EXTREME, _T.COOL),
    "punk": _profile("VIBRANT", _V.VIBRANT, _R.WIDE, _T.DYNAMIC),
    # Hip-hop
    "hiphop": _profile("STANDARD", _V.STANDARD, _R.MODERATE, _T.WARM),
    "rap": _profile("STANDARD", _V.STANDARD, _R.MODERATE, _T.NEUTRAL),
    # Acoustic and orchestral
    "jazz": _profile("SUBTLE", _V.SUBTLE, _R.WIDE, _T.WARM),
    "classical": _profile("SUBTLE", _V.SUBTLE, _R.EXTREME, _T.NEUTRAL),
    "ambient": _profile("SUBTLE", _V.SUBTLE, _R.NARROW, _T.COOL),
    # Pop and soul
    "pop": _profile("STANDARD", _V.STANDARD, _R.MODERATE, _T.WARM),
    "rnb": _profile("STANDARD", _V.STANDARD, _R.MODERATE, _T.WARM),
    "soul": _profile("STANDARD", _V.STANDARD, _R.WIDE, _T.WARM),
    DEFAULT_GENRE: _profile("STANDARD", _V.STANDARD, _R.MODERATE, _T.NEUTRAL),
})
