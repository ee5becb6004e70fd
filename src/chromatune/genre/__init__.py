"""Genre detection and genre-driven presets."""

from .classifier import GenreProfileClassifier, detect_genre_from_features
from .profiles import DEFAULT_GENRE, GENRE_PROFILES, GenreProfile

__all__ = [
    "DEFAULT_GENRE",
    "GENRE_PROFILES",
    "GenreProfile",
    "GenreProfileClassifier",
    "detect_genre_from_features",
]
