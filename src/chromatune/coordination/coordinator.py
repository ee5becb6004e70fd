"""Music-aware palette coordination.

Combines genre and emotion guidance into one enhancement preset, runs the
perceptual enhancer over a named palette and packages everything a
presentation layer needs into a MusicalOKLABResult.
"""

import logging
import time
from collections.abc import Callable

from chromatune.color import conversion
from chromatune.color.enhancer import PerceptualColorEnhancer
from chromatune.emotion import EmotionalStateClassifier
from chromatune.exceptions import ErrorContext
from chromatune.genre import DEFAULT_GENRE, GenreProfileClassifier
from chromatune.models.color import RGBColor
from chromatune.models.config import PipelineConfig
from chromatune.models.coordination import (
    ColorResult,
    CoordinationOptions,
    CoordinationStrategy,
    GenreCharacteristics,
    MusicalColorContext,
    MusicalOKLABResult,
)
from chromatune.models.emotion import EmotionalState, EmotionalTemperatureResult
from chromatune.models.music import MusicAnalysisData
from chromatune.models.preset import EnhancementPreset, blend_presets, resolve_preset
from chromatune.models.processing import OKLABProcessingResult
from chromatune.protocols import CoordinationEvent, CoordinationObserver, GenreClassifier
from chromatune.utils import ObserverManager

from .cache import ResultCache, make_cache_key

logger = logging.getLogger(__name__)

EXTREMITY_THRESHOLD = 0.6


def select_strategy(
    music_data: MusicAnalysisData,
    options: CoordinationOptions,
    detected_genre: str,
) -> CoordinationStrategy:
    """
    Decide how the enhancement preset is chosen.

    Missing energy/valence -> fallback. Otherwise a caller preference wins,
    then strongly emotional tracks go emotion-primary, tracks with a
    recognised genre go genre-primary and everything else is balanced.
    """
    if not music_data.has_core_features:
        return CoordinationStrategy.FALLBACK

    if options.prefer_genre_over_emotion is True:
        return CoordinationStrategy.GENRE_PRIMARY
    if options.prefer_genre_over_emotion is False:
        return CoordinationStrategy.EMOTION_PRIMARY

    extremity = abs(music_data.energy - 0.5) + abs(music_data.valence - 0.5)
    if extremity > EXTREMITY_THRESHOLD:
        return CoordinationStrategy.EMOTION_PRIMARY
    if detected_genre != DEFAULT_GENRE:
        return CoordinationStrategy.GENRE_PRIMARY
    return CoordinationStrategy.BALANCED


def calculate_music_influence(music_data: MusicAnalysisData, emotional_intensity: float) -> float:
    """How strongly the music shaped the palette, 0-1.

    The genre boost follows the track's own label, not feature detection.
    """
    energy = music_data.energy if music_data.energy is not None else 0.5
    valence = music_data.valence if music_data.valence is not None else 0.5
    base = (energy + abs(valence - 0.5) * 2 + emotional_intensity) / 3

    context_boost = 1.0
    if music_data.tempo is not None and music_data.tempo > 0:
        context_boost += 0.1
    if music_data.danceability is not None and music_data.danceability > 0.7:
        context_boost += 0.1
    if music_data.genre and music_data.genre != DEFAULT_GENRE:
        context_boost += 0.1

    return max(0.0, min(1.0, base * context_boost))


def build_fallback_result(
    context: MusicalColorContext, config: PipelineConfig, processing_time_ms: float = 0.0
) -> MusicalOKLABResult:
    """Structurally complete result used when the pipeline cannot run."""
    preset = resolve_preset(config.default_preset)
    accent_rgb = conversion.try_hex_to_rgb(config.default_accent_hex) or RGBColor(r=203, g=166, b=247)
    calm = EmotionalState.CALM

    return MusicalOKLABResult(
        enhanced_colors={k: v for k, v in context.raw_colors.items() if isinstance(v, str)},
        accent_hex=config.default_accent_hex,
        accent_rgb=accent_rgb,
        preset=preset,
        oklab_results={},
        detected_genre=DEFAULT_GENRE,
        emotional_result=EmotionalTemperatureResult(
            primary=calm,
            intensity=0.5,
            temperature=3500,
            blend_ratio=1.0,
            style_class=calm.style_class,
            preset=preset,
        ),
        genre_characteristics=GenreCharacteristics(),
        processing_time_ms=processing_time_ms,
        music_influence_strength=0.5,
        strategy=CoordinationStrategy.FALLBACK,
        variables={
            "--sn-musical-oklab-coordination": "fallback",
            "--sn-oklab-preset-name": preset.name,
        },
    )


class ProcessingCoordinator:
    """
    Turns (music features, named palette) into a coordinated color result.

    Each instance owns its cache and collaborators; nothing is shared
    between instances. `process()` never raises: any unexpected failure is
    logged and answered with `build_fallback_result()`.

    Example:
        ```python
        coordinator = ProcessingCoordinator()
        result = coordinator.process(MusicalColorContext(
            music_data=MusicAnalysisData(energy=0.8, valence=0.85, danceability=0.9),
            raw_colors={"VIBRANT": "#89b4fa", "PROMINENT": "#cba6f7"},
            track_id="spotify:track:123",
        ))
        result.accent_hex, result.strategy
        ```
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        enhancer: PerceptualColorEnhancer | None = None,
        emotion_classifier: EmotionalStateClassifier | None = None,
        genre_classifier: GenreClassifier | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the coordinator.

        Args:
            config: Pipeline settings (defaults if None)
            enhancer: Perceptual enhancer for the palette
            emotion_classifier: Emotion engine (shares `enhancer` if None)
            genre_classifier: Any GenreClassifier (GenreProfileClassifier if None)
            clock: Time source for cache expiry
        """
        self.config = config or PipelineConfig()
        self._enhancer = enhancer or PerceptualColorEnhancer(debug=self.config.debug)
        self._emotion = emotion_classifier or EmotionalStateClassifier(
            enhancer=self._enhancer, debug=self.config.debug
        )
        self._genre = genre_classifier or GenreProfileClassifier(debug=self.config.debug)
        self._cache = ResultCache(
            capacity=self.config.cache_capacity,
            ttl_seconds=self.config.cache_ttl_seconds,
            clock=clock,
        )
        self._observers: ObserverManager[CoordinationObserver] = ObserverManager(
            observer_type_name="coordination"
        )

    @property
    def cache(self) -> ResultCache:
        return self._cache

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: CoordinationObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: CoordinationObserver) -> None:
        self._observers.unregister(observer)

    def _notify(self, event: CoordinationEvent, result: MusicalOKLABResult | None) -> None:
        self._observers.notify("on_coordination_event", event, result)

    # =================================================================
    # Processing
    # =================================================================

    def process(
        self,
        context: MusicalColorContext,
        options: CoordinationOptions | None = None,
    ) -> MusicalOKLABResult:
        """Coordinate one request; served from the cache when possible."""
        options = options or CoordinationOptions()
        start = time.perf_counter()

        cache_key = make_cache_key(context)
        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for track '{context.track_id}'")
            self._notify(CoordinationEvent.CACHE_HIT, cached)
            return cached

        with ErrorContext(
            f"coordinate track '{context.track_id}'", fallback=None, logger_instance=logger
        ) as ctx:
            ctx.value = self._coordinate(context, options, start)

        if ctx.failed:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            fallback = build_fallback_result(context, self.config, elapsed_ms)
            self._notify(CoordinationEvent.FALLBACK_USED, fallback)
            return fallback

        result = ctx.value
        self._cache.put(cache_key, result)
        self._notify(CoordinationEvent.RESULT_READY, result)
        return result

    def _coordinate(
        self, context: MusicalColorContext, options: CoordinationOptions, start: float
    ) -> MusicalOKLABResult:
        music = context.music_data

        detected_genre = self._genre.detect_genre(music)
        emotional_result = self._emotion.classify(music)
        strategy = select_strategy(music, options, detected_genre)
        preset = self._resolve_preset(strategy, music, emotional_result, options)

        oklab_results = self._enhancer.process_color_palette(context.raw_colors, preset)
        enhanced_colors = {key: r.enhanced_hex for key, r in oklab_results.items()}

        characteristics = self._genre.get_characteristics_for_genre(detected_genre)
        influence = calculate_music_influence(music, emotional_result.intensity)
        accent_hex, accent_rgb = self.select_accent(oklab_results)

        variables = self._generate_variables(
            oklab_results, emotional_result, detected_genre, characteristics, preset
        )

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        log = logger.info if self.config.debug else logger.debug
        log(
            f"Coordinated track '{context.track_id}': strategy={strategy.value} "
            f"preset={preset.name} genre={detected_genre} emotion={emotional_result.primary.value} "
            f"accent={accent_hex} influence={influence:.2f} ({elapsed_ms:.2f}ms)"
        )

        return MusicalOKLABResult(
            enhanced_colors=enhanced_colors,
            accent_hex=accent_hex,
            accent_rgb=accent_rgb,
            preset=preset,
            oklab_results=oklab_results,
            detected_genre=detected_genre,
            emotional_result=emotional_result,
            genre_characteristics=characteristics,
            processing_time_ms=elapsed_ms,
            music_influence_strength=influence,
            strategy=strategy,
            variables=variables,
        )

    def _resolve_preset(
        self,
        strategy: CoordinationStrategy,
        music: MusicAnalysisData,
        emotional_result: EmotionalTemperatureResult,
        options: CoordinationOptions,
    ) -> EnhancementPreset:
        match strategy:
            case CoordinationStrategy.GENRE_PRIMARY:
                return self._genre.get_preset_for_track(music)
            case CoordinationStrategy.EMOTION_PRIMARY:
                return emotional_result.preset
            case CoordinationStrategy.BALANCED:
                return blend_presets(
                    self._genre.get_preset_for_track(music),
                    emotional_result.preset,
                    intensity_multiplier=options.intensity_multiplier,
                )
            case _:
                return resolve_preset(self.config.default_preset)

    def select_accent(self, oklab_results: dict[str, OKLABProcessingResult]) -> tuple[str, RGBColor]:
        """
        First configured priority key present, else the first processed
        color, else the default accent.
        """
        for key in self.config.accent_priority:
            if key in oklab_results:
                result = oklab_results[key]
                return result.enhanced_hex, result.enhanced_rgb

        for result in oklab_results.values():
            return result.enhanced_hex, result.enhanced_rgb

        default_hex = self.config.default_accent_hex
        return default_hex, conversion.hex_to_rgb(default_hex)

    @staticmethod
    def _generate_variables(
        oklab_results: dict[str, OKLABProcessingResult],
        emotional_result: EmotionalTemperatureResult,
        detected_genre: str,
        characteristics: GenreCharacteristics,
        preset: EnhancementPreset,
    ) -> dict[str, str]:
        variables: dict[str, str] = {}
        for key, result in oklab_results.items():
            name = key.lower()
            variables[f"--sn-{name}-enhanced"] = result.enhanced_hex
            variables[f"--sn-{name}-oklab-l"] = f"{result.oklab_enhanced.L:.3f}"
            variables[f"--sn-{name}-oklab-a"] = f"{result.oklab_enhanced.a:.3f}"
            variables[f"--sn-{name}-oklab-b"] = f"{result.oklab_enhanced.b:.3f}"
            variables[f"--sn-{name}-oklch-c"] = f"{result.oklch_enhanced.C:.3f}"
            variables[f"--sn-{name}-oklch-h"] = f"{result.oklch_enhanced.H:.1f}"
            variables[f"--sn-{name}-shadow"] = result.shadow_hex

        variables.update(emotional_result.variables)

        variables.update({
            "--sn-detected-genre": detected_genre,
            "--sn-vibrancy-level": characteristics.vibrancy_level.value,
            "--sn-color-temperature": characteristics.color_temperature.value,
            "--sn-emotional-range": characteristics.emotional_range.value,
            "--sn-oklab-preset-name": preset.name,
            "--sn-oklab-chroma-boost": f"{preset.chroma_boost:.3f}",
            "--sn-oklab-lightness-boost": f"{preset.lightness_boost:.3f}",
            "--sn-musical-oklab-coordination": "enabled",
            "--sn-color-processing-mode": "unified-musical-oklab",
        })
        return variables

    # =================================================================
    # Cache and interop
    # =================================================================

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.info("Coordination cache cleared")
        self._notify(CoordinationEvent.CACHE_CLEARED, None)

    def metrics(self) -> dict[str, float]:
        """Cache statistics plus observer count, for monitoring."""
        stats = self._cache.stats()
        stats["observers"] = len(self._observers)
        return stats

    @staticmethod
    def to_color_result(result: MusicalOKLABResult, context: MusicalColorContext) -> ColorResult:
        """Expose a result in the generic ColorResult shape."""
        return ColorResult(
            processed_colors={**result.enhanced_colors, **result.variables},
            accent_hex=result.accent_hex,
            accent_rgb=result.accent_rgb.to_css_triplet(),
            metadata={
                "strategy": "musical-oklab-coordinator",
                "processing_time_ms": result.processing_time_ms,
                "detected_genre": result.detected_genre,
                "emotional_state": result.emotional_result.primary.value,
                "preset": result.preset.name,
                "coordination_strategy": result.strategy.value,
                "music_influence_strength": result.music_influence_strength,
            },
            context={
                "raw_colors": dict(context.raw_colors),
                "track_id": context.track_id,
                "timestamp": context.timestamp,
                "mode_label": context.mode_label or "musical-oklab",
                "music_data": context.music_data.model_dump(exclude_none=True),
            },
        )
