"""Perceptual color enhancement in OKLAB space."""

import logging
import time
from collections.abc import Mapping
from typing import Any

import numpy as np

from chromatune.exceptions import InterpolationError, InvalidHexColorError
from chromatune.models.color import OKLABColor, RGBColor
from chromatune.models.preset import STANDARD, EnhancementPreset
from chromatune.models.processing import OKLABProcessingResult

from . import conversion

logger = logging.getLogger(__name__)

# Used when the input cannot be parsed and the caller supplied no fallback.
DEFAULT_FALLBACK_RGB = RGBColor(r=124, g=58, b=237)

MIN_SHADOW_LIGHTNESS = 0.02
SHADOW_CHROMA_FACTOR = 0.8


def enhance_oklab(oklab: OKLABColor, preset: EnhancementPreset) -> OKLABColor:
    """
    Apply a preset to one OKLAB color.

    Lightness is scaled and clamped to [0, 1]. Chroma is scaled only when the
    color is already more colorful than the preset's vibrant threshold, so
    near-neutral colors are not pushed toward oversaturation.
    """
    lightness = min(1.0, max(0.0, oklab.L * preset.lightness_boost))
    multiplier = preset.chroma_boost if oklab.chroma > preset.vibrant_threshold else 1.0
    return OKLABColor(L=lightness, a=oklab.a * multiplier, b=oklab.b * multiplier)


def shadow_oklab(oklab: OKLABColor, preset: EnhancementPreset) -> OKLABColor:
    """Much darker, slightly desaturated variant with the same hue."""
    return OKLABColor(
        L=max(MIN_SHADOW_LIGHTNESS, oklab.L * preset.shadow_reduction),
        a=oklab.a * SHADOW_CHROMA_FACTOR,
        b=oklab.b * SHADOW_CHROMA_FACTOR,
    )


class PerceptualColorEnhancer:
    """
    Enhances colors through OKLAB using named presets.

    Instances hold no per-request state; the same enhancer may be shared
    between threads.

    Example:
        ```python
        enhancer = PerceptualColorEnhancer()
        result = enhancer.process_color("#89b4fa", VIBRANT)
        result.enhanced_hex, result.shadow_hex
        ```
    """

    def __init__(self, fallback_rgb: RGBColor = DEFAULT_FALLBACK_RGB, debug: bool = False):
        """
        Initialize the enhancer.

        Args:
            fallback_rgb: Color reported for input that cannot be parsed
            debug: Log every processed color at INFO instead of DEBUG
        """
        self._fallback_rgb = fallback_rgb
        self._debug = debug

    def process_color(
        self,
        hex_color: Any,
        preset: EnhancementPreset = STANDARD,
        fallback_rgb: RGBColor | None = None,
    ) -> OKLABProcessingResult:
        """
        Enhance one color and derive its shadow.

        Never raises for bad input: an unparseable value yields a fallback
        result built from `fallback_rgb` (or the enhancer's default) with zero
        processing time.
        """
        start = time.perf_counter()
        try:
            original_rgb = conversion.hex_to_rgb(hex_color)
        except InvalidHexColorError as e:
            logger.warning(f"{e.technical_message}; returning fallback result")
            return self._fallback_result(hex_color, fallback_rgb or self._fallback_rgb, preset)

        oklab_original = conversion.rgb_to_oklab(original_rgb)
        oklab_enhanced = enhance_oklab(oklab_original, preset)
        oklab_shadow = shadow_oklab(oklab_original, preset)

        enhanced_rgb = conversion.oklab_to_rgb(oklab_enhanced)
        shadow_rgb = conversion.oklab_to_rgb(oklab_shadow)
        oklch_enhanced = conversion.oklab_to_oklch(oklab_enhanced)

        elapsed_ms = (time.perf_counter() - start) * 1000.0

        result = OKLABProcessingResult(
            original_hex=hex_color,
            original_rgb=original_rgb,
            enhanced_hex=enhanced_rgb.to_hex(),
            enhanced_rgb=enhanced_rgb,
            shadow_hex=shadow_rgb.to_hex(),
            shadow_rgb=shadow_rgb,
            oklab_original=oklab_original,
            oklab_enhanced=oklab_enhanced,
            oklab_shadow=oklab_shadow,
            oklch_enhanced=oklch_enhanced,
            processing_time_ms=elapsed_ms,
            preset_name=preset.name,
        )

        log = logger.info if self._debug else logger.debug
        log(
            f"Processed {hex_color} with {preset.name}: "
            f"enhanced={result.enhanced_hex} shadow={result.shadow_hex} ({elapsed_ms:.3f}ms)"
        )
        return result

    def process_color_palette(
        self,
        colors: Mapping[str, Any],
        preset: EnhancementPreset = STANDARD,
    ) -> dict[str, OKLABProcessingResult]:
        """
        Enhance every entry of a name -> hex mapping.

        Entries that are not valid hex colors are skipped: their keys are
        simply absent from the result.
        """
        results: dict[str, OKLABProcessingResult] = {}
        for key, hex_color in colors.items():
            if not conversion.is_hex_color(hex_color):
                logger.debug(f"Skipping non-hex palette entry {key}={hex_color!r}")
                continue
            results[key] = self.process_color(hex_color, preset)
        return results

    def interpolate_oklab(
        self,
        start_hex: str,
        end_hex: str,
        factor: float,
        preset: EnhancementPreset = STANDARD,
    ) -> OKLABProcessingResult:
        """
        Mix two colors linearly in OKLAB at `factor` and enhance the mix.

        Raises:
            InterpolationError: If either endpoint is not a hex color
        """
        try:
            start = conversion.hex_to_oklab(start_hex)
            end = conversion.hex_to_oklab(end_hex)
        except InvalidHexColorError as e:
            raise InterpolationError(start_hex, end_hex, e.user_message) from e

        mixed = OKLABColor(
            L=start.L + (end.L - start.L) * factor,
            a=start.a + (end.a - start.a) * factor,
            b=start.b + (end.b - start.b) * factor,
        )
        return self.process_color(conversion.oklab_to_hex(mixed), preset)

    def generate_oklab_gradient(
        self,
        start_hex: str,
        end_hex: str,
        stop_count: int = 5,
        preset: EnhancementPreset = STANDARD,
    ) -> list[OKLABProcessingResult]:
        """
        Evenly spaced interpolations including both endpoints.

        Raises:
            InterpolationError: If `stop_count` < 2 or an endpoint is invalid
        """
        if stop_count < 2:
            raise InterpolationError(start_hex, end_hex, f"stop_count must be >= 2, got {stop_count}")

        return [
            self.interpolate_oklab(start_hex, end_hex, float(factor), preset)
            for factor in np.linspace(0.0, 1.0, stop_count)
        ]

    def _fallback_result(
        self, hex_color: Any, fallback_rgb: RGBColor, preset: EnhancementPreset
    ) -> OKLABProcessingResult:
        fallback_oklab = conversion.rgb_to_oklab(fallback_rgb)
        display_hex = hex_color if isinstance(hex_color, str) else fallback_rgb.to_hex()
        return OKLABProcessingResult(
            original_hex=display_hex,
            original_rgb=fallback_rgb,
            enhanced_hex=display_hex,
            enhanced_rgb=fallback_rgb,
            shadow_hex="#000000",
            shadow_rgb=RGBColor.black(),
            oklab_original=fallback_oklab,
            oklab_enhanced=fallback_oklab,
            oklab_shadow=OKLABColor(L=0.05, a=0.0, b=0.0),
            oklch_enhanced=conversion.oklab_to_oklch(fallback_oklab),
            processing_time_ms=0.0,
            preset_name=preset.name,
            is_fallback=True,
        )


def generate_variables(result: OKLABProcessingResult, prefix: str = "sn-oklab") -> dict[str, str]:
    """Flatten one processing result into `--<prefix>-*` variables."""
    return {
        f"--{prefix}-enhanced-hex": result.enhanced_hex,
        f"--{prefix}-enhanced-rgb": result.enhanced_rgb.to_css_triplet(),
        f"--{prefix}-shadow-hex": result.shadow_hex,
        f"--{prefix}-shadow-rgb": result.shadow_rgb.to_css_triplet(),
        f"--{prefix}-lightness": f"{result.oklab_enhanced.L:.3f}",
        f"--{prefix}-chroma-a": f"{result.oklab_enhanced.a:.3f}",
        f"--{prefix}-chroma-b": f"{result.oklab_enhanced.b:.3f}",
        f"--{prefix}-oklch-l": f"{result.oklch_enhanced.L:.3f}",
        f"--{prefix}-oklch-c": f"{result.oklch_enhanced.C:.3f}",
        f"--{prefix}-oklch-h": f"{result.oklch_enhanced.H:.1f}",
    }
