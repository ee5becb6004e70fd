"""Coordination of genre, emotion and perceptual enhancement."""

from .cache import ResultCache, make_cache_key
from .coordinator import (
    ProcessingCoordinator,
    build_fallback_result,
    calculate_music_influence,
    select_strategy,
)

__all__ = [
    "ProcessingCoordinator",
    "ResultCache",
    "build_fallback_result",
    "calculate_music_influence",
    "make_cache_key",
    "select_strategy",
]
