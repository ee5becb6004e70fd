"""Emotional state classification from audio features."""

from .classifier import EmotionalStateClassifier, classify_quadrant, normalize_genre
from .profiles import EMOTION_PROFILES, GENRE_ADJUSTMENTS, GenreAdjustment

__all__ = [
    "EMOTION_PROFILES",
    "EmotionalStateClassifier",
    "GENRE_ADJUSTMENTS",
    "GenreAdjustment",
    "classify_quadrant",
    "normalize_genre",
]
