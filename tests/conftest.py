"""Pytest fixtures for tests."""

import pytest

from chromatune.color import PerceptualColorEnhancer
from chromatune.emotion import EmotionalStateClassifier
from chromatune.models import MusicAnalysisData, MusicalColorContext, PipelineConfig


class FakeClock:
    """Manually advanced monotonic clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """A fake clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def enhancer():
    """A default perceptual enhancer."""
    return PerceptualColorEnhancer()


@pytest.fixture
def emotion_classifier(enhancer):
    """Emotion classifier sharing the enhancer fixture."""
    return EmotionalStateClassifier(enhancer=enhancer)


@pytest.fixture
def config():
    """Default pipeline configuration."""
    return PipelineConfig()


@pytest.fixture
def energetic_music():
    """High energy, high valence, very danceable track."""
    return MusicAnalysisData(energy=0.8, valence=0.85, danceability=0.9)


@pytest.fixture
def palette():
    """Palette as produced by an album-art color extractor."""
    return {"VIBRANT": "#89b4fa", "PROMINENT": "#cba6f7"}


@pytest.fixture
def energetic_context(energetic_music, palette):
    """Request for the energetic track with the two-color palette."""
    return MusicalColorContext(
        music_data=energetic_music,
        raw_colors=palette,
        track_id="spotify:track:energetic",
        timestamp=1700000000.0,
    )
