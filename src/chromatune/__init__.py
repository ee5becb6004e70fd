"""Chromatune - music-aware perceptual color processing in OKLAB."""

__version__ = "0.1.0"

from chromatune.color import PerceptualColorEnhancer
from chromatune.coordination import ProcessingCoordinator, ResultCache
from chromatune.emotion import EmotionalStateClassifier
from chromatune.genre import GenreProfileClassifier
from chromatune.models import (
    CoordinationOptions,
    EnhancementPreset,
    MusicAnalysisData,
    MusicalColorContext,
    MusicalOKLABResult,
    PipelineConfig,
)

__all__ = [
    "CoordinationOptions",
    "EmotionalStateClassifier",
    "EnhancementPreset",
    "GenreProfileClassifier",
    "MusicAnalysisData",
    "MusicalColorContext",
    "MusicalOKLABResult",
    "PerceptualColorEnhancer",
    "PipelineConfig",
    "ProcessingCoordinator",
    "ResultCache",
    "__version__",
]
