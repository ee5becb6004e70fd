"""Tests for ProcessingCoordinator."""

from unittest.mock import Mock

import pytest

from chromatune.color import PerceptualColorEnhancer
from chromatune.coordination import (
    ProcessingCoordinator,
    build_fallback_result,
    calculate_music_influence,
    select_strategy,
)
from chromatune.genre import GenreProfileClassifier
from chromatune.models import (
    COSMIC,
    STANDARD,
    CoordinationOptions,
    CoordinationStrategy,
    EmotionalState,
    MusicAnalysisData,
    MusicalColorContext,
    PipelineConfig,
    RGBColor,
)
from chromatune.protocols import CoordinationEvent


@pytest.fixture
def counting_enhancer():
    """Real enhancer wrapped in a Mock so calls can be counted."""
    return Mock(wraps=PerceptualColorEnhancer())


@pytest.fixture
def coordinator(counting_enhancer, clock):
    return ProcessingCoordinator(enhancer=counting_enhancer, clock=clock)


def _context(music: MusicAnalysisData, colors=None, track_id="track-1") -> MusicalColorContext:
    return MusicalColorContext(
        music_data=music,
        raw_colors=colors if colors is not None else {"VIBRANT": "#89b4fa", "PROMINENT": "#cba6f7"},
        track_id=track_id,
        timestamp=1700000000.0,
    )


class TestStrategySelection:
    """Test select_strategy."""

    @pytest.mark.unit
    def test_missing_core_features(self):
        strategy = select_strategy(MusicAnalysisData(energy=0.9), CoordinationOptions(), "dance")
        assert strategy == CoordinationStrategy.FALLBACK

    @pytest.mark.unit
    def test_caller_preference(self):
        music = MusicAnalysisData(energy=0.5, valence=0.5)
        assert (
            select_strategy(music, CoordinationOptions(prefer_genre_over_emotion=True), "default")
            == CoordinationStrategy.GENRE_PRIMARY
        )
        assert (
            select_strategy(music, CoordinationOptions(prefer_genre_over_emotion=False), "rock")
            == CoordinationStrategy.EMOTION_PRIMARY
        )

    @pytest.mark.unit
    def test_extreme_emotion(self):
        music = MusicAnalysisData(energy=0.95, valence=0.1)
        assert select_strategy(music, CoordinationOptions(), "rock") == CoordinationStrategy.EMOTION_PRIMARY

    @pytest.mark.unit
    def test_known_genre(self):
        music = MusicAnalysisData(energy=0.6, valence=0.6)
        assert select_strategy(music, CoordinationOptions(), "jazz") == CoordinationStrategy.GENRE_PRIMARY

    @pytest.mark.unit
    def test_balanced(self):
        music = MusicAnalysisData(energy=0.6, valence=0.6)
        assert select_strategy(music, CoordinationOptions(), "default") == CoordinationStrategy.BALANCED


class TestInfluence:
    """Test music influence scoring."""

    @pytest.mark.unit
    def test_base_score(self):
        music = MusicAnalysisData(energy=0.6, valence=0.8)
        assert calculate_music_influence(music, 0.9) == pytest.approx((0.6 + 0.6 + 0.9) / 3)

    @pytest.mark.unit
    def test_context_boost(self):
        music = MusicAnalysisData(energy=0.3, valence=0.5, tempo=120, danceability=0.8, genre="dance")
        expected = (0.3 + 0.0 + 0.6) / 3 * 1.3
        assert calculate_music_influence(music, 0.6) == pytest.approx(expected)

    @pytest.mark.unit
    def test_genre_label_boosts_without_detection(self):
        # Neutral features detect no genre; the label alone counts
        music = MusicAnalysisData(energy=0.5, valence=0.5, genre="jazz")
        assert GenreProfileClassifier().detect_genre(music) == "default"
        assert calculate_music_influence(music, 0.7) == pytest.approx((0.5 + 0.0 + 0.7) / 3 * 1.1)

    @pytest.mark.unit
    def test_detected_genre_without_label_gets_no_boost(self):
        music = MusicAnalysisData(energy=0.9, valence=0.8, danceability=0.6, instrumentalness=0.05)
        assert GenreProfileClassifier().detect_genre(music) == "rock"
        assert calculate_music_influence(music, 0.5) == pytest.approx((0.9 + 0.6 + 0.5) / 3)

    @pytest.mark.unit
    def test_default_label_gets_no_boost(self):
        music = MusicAnalysisData(energy=0.5, valence=0.5, genre="default")
        assert calculate_music_influence(music, 0.7) == pytest.approx((0.5 + 0.0 + 0.7) / 3)

    @pytest.mark.unit
    def test_capped_at_one(self):
        music = MusicAnalysisData(energy=1.0, valence=1.0, tempo=170, danceability=0.9)
        assert calculate_music_influence(music, 1.5) == 1.0


class TestProcess:
    """Test the full coordination pipeline."""

    @pytest.mark.integration
    def test_end_to_end(self, coordinator, energetic_context):
        result = coordinator.process(energetic_context)

        emotion = result.emotional_result
        assert emotion.primary == EmotionalState.ENERGETIC
        # 0.8 is not strictly above the epic threshold
        assert emotion.secondary is None
        assert emotion.blend_ratio == 1.0

        assert set(result.enhanced_colors) == {"VIBRANT", "PROMINENT"}
        assert result.accent_hex == result.oklab_results["VIBRANT"].enhanced_hex
        assert result.accent_rgb == result.oklab_results["VIBRANT"].enhanced_rgb
        assert result.strategy == CoordinationStrategy.EMOTION_PRIMARY
        assert result.preset == emotion.preset
        assert 0.0 <= result.music_influence_strength <= 1.0
        assert result.variables["--sn-musical-oklab-coordination"] == "enabled"
        assert result.variables["--sn-vibrant-enhanced"] == result.accent_hex
        assert result.variables["--organic-current-emotion"] == "energetic"

    @pytest.mark.integration
    def test_epic_blend_above_threshold(self, coordinator):
        result = coordinator.process(_context(MusicAnalysisData(energy=0.85, valence=0.85, danceability=0.9)))

        emotion = result.emotional_result
        assert emotion.primary == EmotionalState.ENERGETIC
        assert emotion.secondary == EmotionalState.EPIC
        assert emotion.blend_ratio == 0.7
        assert result.strategy == CoordinationStrategy.EMOTION_PRIMARY

    @pytest.mark.integration
    def test_fallback_strategy_for_missing_features(self, coordinator):
        result = coordinator.process(_context(MusicAnalysisData(energy="loud", valence=None)))
        assert result.strategy == CoordinationStrategy.FALLBACK
        assert result.preset is STANDARD
        assert set(result.enhanced_colors) == {"VIBRANT", "PROMINENT"}

    @pytest.mark.integration
    def test_accent_priority(self, coordinator):
        colors = {"PROMINENT": "#cba6f7", "LIGHT_VIBRANT": "#f5c2e7", "VIBRANT": "#89b4fa"}
        result = coordinator.process(_context(MusicAnalysisData(energy=0.5, valence=0.5), colors))
        assert result.accent_hex == result.oklab_results["VIBRANT"].enhanced_hex

    @pytest.mark.integration
    def test_accent_first_available_when_no_priority_key(self, coordinator):
        colors = {"MUTED": "#6c7086", "DARK_MUTED": "#313244"}
        result = coordinator.process(_context(MusicAnalysisData(energy=0.5, valence=0.5), colors))
        assert result.accent_hex == result.oklab_results["MUTED"].enhanced_hex

    @pytest.mark.integration
    def test_accent_default_when_nothing_processed(self, coordinator):
        result = coordinator.process(_context(MusicAnalysisData(energy=0.5, valence=0.5), {"VIBRANT": "n/a"}))
        assert result.enhanced_colors == {}
        assert result.accent_hex == "#cba6f7"
        assert result.accent_rgb == RGBColor(r=203, g=166, b=247)

    @pytest.mark.integration
    def test_genre_primary(self, coordinator):
        # danceable + energetic is detected as "dance" (COSMIC); extremity 0.3 stays below 0.6
        music = MusicAnalysisData(energy=0.75, valence=0.55, danceability=0.8)
        result = coordinator.process(_context(music))
        assert result.detected_genre == "dance"
        assert result.strategy == CoordinationStrategy.GENRE_PRIMARY
        assert result.preset is COSMIC
        assert result.variables["--sn-detected-genre"] == "dance"
        assert result.variables["--sn-vibrancy-level"] == "cosmic"

    @pytest.mark.integration
    def test_balanced_blend(self, coordinator):
        result = coordinator.process(
            _context(MusicAnalysisData(energy=0.5, valence=0.5)),
            CoordinationOptions(intensity_multiplier=1.0),
        )
        assert result.strategy == CoordinationStrategy.BALANCED
        assert result.detected_genre == "default"
        assert result.preset.name == "blended-genre-emotion"
        expected_lightness = (STANDARD.lightness_boost + result.emotional_result.preset.lightness_boost) / 2
        assert result.preset.lightness_boost == pytest.approx(expected_lightness)

    @pytest.mark.integration
    def test_forced_emotion_primary(self, coordinator):
        music = MusicAnalysisData(energy=0.75, valence=0.55, danceability=0.8)
        result = coordinator.process(_context(music), CoordinationOptions(prefer_genre_over_emotion=False))
        assert result.strategy == CoordinationStrategy.EMOTION_PRIMARY
        assert result.preset == result.emotional_result.preset


class TestCaching:
    """Test result caching through the coordinator."""

    @pytest.mark.integration
    def test_cache_hit_skips_enhancer(self, coordinator, counting_enhancer, energetic_context):
        first = coordinator.process(energetic_context)
        second = coordinator.process(energetic_context)

        assert second == first
        assert counting_enhancer.process_color_palette.call_count == 1

    @pytest.mark.integration
    def test_ttl_expiry_reprocesses(self, coordinator, counting_enhancer, clock, energetic_context):
        coordinator.process(energetic_context)
        coordinator.process(energetic_context)
        clock.advance(301)
        coordinator.process(energetic_context)

        assert counting_enhancer.process_color_palette.call_count == 2

    @pytest.mark.integration
    def test_clear_cache_reprocesses(self, coordinator, counting_enhancer, energetic_context):
        first = coordinator.process(energetic_context)
        coordinator.clear_cache()
        second = coordinator.process(energetic_context)

        assert counting_enhancer.process_color_palette.call_count == 2
        assert second is not first
        assert second.enhanced_colors == first.enhanced_colors
        assert second.accent_hex == first.accent_hex
        assert second.preset == first.preset
        assert second.variables == first.variables

    @pytest.mark.integration
    def test_capacity_from_config(self, counting_enhancer, clock):
        coordinator = ProcessingCoordinator(
            config=PipelineConfig(cache_capacity=2), enhancer=counting_enhancer, clock=clock
        )
        for track in ("a", "b", "c"):
            coordinator.process(_context(MusicAnalysisData(energy=0.5, valence=0.5), track_id=track))
        assert len(coordinator.cache) == 2

        coordinator.process(_context(MusicAnalysisData(energy=0.5, valence=0.5), track_id="a"))
        assert counting_enhancer.process_color_palette.call_count == 4

    @pytest.mark.unit
    def test_metrics(self, coordinator, energetic_context):
        coordinator.process(energetic_context)
        metrics = coordinator.metrics()
        assert metrics["size"] == 1
        assert metrics["capacity"] == 20
        assert metrics["ttl_seconds"] == 300.0
        assert metrics["observers"] == 0


class TestFallback:
    """Test the never-raise contract."""

    @pytest.mark.integration
    def test_internal_error_returns_fallback(self, clock):
        genre = Mock()
        genre.detect_genre.side_effect = RuntimeError("genre service down")
        coordinator = ProcessingCoordinator(genre_classifier=genre, clock=clock)
        context = _context(MusicAnalysisData(energy=0.8, valence=0.8))

        result = coordinator.process(context)

        assert result.strategy == CoordinationStrategy.FALLBACK
        assert result.preset is STANDARD
        assert result.accent_hex == "#cba6f7"
        assert result.enhanced_colors == dict(context.raw_colors)
        assert result.oklab_results == {}
        assert result.detected_genre == "default"
        assert result.emotional_result.primary == EmotionalState.CALM
        assert result.emotional_result.temperature == 3500
        assert result.music_influence_strength == 0.5
        assert result.variables == {
            "--sn-musical-oklab-coordination": "fallback",
            "--sn-oklab-preset-name": "STANDARD",
        }

    @pytest.mark.integration
    def test_fallback_is_not_cached(self, clock):
        genre = Mock()
        genre.detect_genre.side_effect = RuntimeError("genre service down")
        coordinator = ProcessingCoordinator(genre_classifier=genre, clock=clock)
        context = _context(MusicAnalysisData(energy=0.8, valence=0.8))

        coordinator.process(context)
        coordinator.process(context)

        assert genre.detect_genre.call_count == 2
        assert len(coordinator.cache) == 0

    @pytest.mark.unit
    def test_fallback_constructor_drops_non_string_colors(self):
        context = _context(MusicAnalysisData(), {"VIBRANT": "#89b4fa", "BROKEN": 7})
        result = build_fallback_result(context, PipelineConfig(default_accent_hex="#123"))
        assert result.enhanced_colors == {"VIBRANT": "#89b4fa"}
        assert result.accent_hex == "#123"
        assert result.accent_rgb == RGBColor(r=0x11, g=0x22, b=0x33)


class TestObservers:
    """Test observer notifications."""

    @pytest.mark.integration
    def test_events(self, coordinator, energetic_context):
        observer = Mock()
        coordinator.register_observer(observer)

        first = coordinator.process(energetic_context)
        coordinator.process(energetic_context)
        coordinator.clear_cache()

        calls = observer.on_coordination_event.call_args_list
        assert [c.args[0] for c in calls] == [
            CoordinationEvent.RESULT_READY,
            CoordinationEvent.CACHE_HIT,
            CoordinationEvent.CACHE_CLEARED,
        ]
        assert calls[0].args[1] is first
        assert calls[2].args[1] is None

    @pytest.mark.integration
    def test_failing_observer_does_not_break_processing(self, coordinator, energetic_context):
        observer = Mock()
        observer.on_coordination_event.side_effect = RuntimeError("ui crashed")
        coordinator.register_observer(observer)

        result = coordinator.process(energetic_context)

        assert result.strategy != CoordinationStrategy.FALLBACK

    @pytest.mark.unit
    def test_unregister(self, coordinator, energetic_context):
        observer = Mock()
        coordinator.register_observer(observer)
        coordinator.unregister_observer(observer)
        coordinator.process(energetic_context)
        observer.on_coordination_event.assert_not_called()


class TestColorResult:
    """Test the generic ColorResult conversion."""

    @pytest.mark.unit
    def test_to_color_result(self, coordinator, energetic_context):
        result = coordinator.process(energetic_context)
        color_result = ProcessingCoordinator.to_color_result(result, energetic_context)

        assert color_result.accent_hex == result.accent_hex
        assert color_result.accent_rgb == result.accent_rgb.to_css_triplet()
        assert color_result.processed_colors["VIBRANT"] == result.enhanced_colors["VIBRANT"]
        assert color_result.processed_colors["--sn-oklab-preset-name"] == result.preset.name
        assert color_result.metadata["coordination_strategy"] == "emotion-primary"
        assert color_result.metadata["emotional_state"] == "energetic"
        assert color_result.context["track_id"] == energetic_context.track_id
        assert color_result.context["mode_label"] == "musical-oklab"
        assert color_result.context["music_data"] == {"energy": 0.8, "valence": 0.85, "danceability": 0.9}


@pytest.mark.unit
def test_default_collaborators():
    coordinator = ProcessingCoordinator()
    assert isinstance(coordinator._genre, GenreProfileClassifier)
    assert coordinator.cache.capacity == 20
