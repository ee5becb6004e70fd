"""Enhancement presets controlling how colors are pushed in OKLAB space."""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chromatune.exceptions import ErrorContext, UnknownPresetError

logger = logging.getLogger(__name__)

LIGHTNESS_BOOST_RANGE = (0.5, 1.5)
CHROMA_BOOST_RANGE = (0.5, 2.0)
SHADOW_REDUCTION_RANGE = (0.1, 0.5)
VIBRANT_THRESHOLD_RANGE = (0.05, 0.2)


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(high, float(value)))


class EnhancementPreset(BaseModel):
    """Immutable named enhancement configuration.

    Out-of-range numbers are clamped into their documented ranges rather
    than rejected, so any caller-supplied blend is always usable.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    lightness_boost: float = Field(description="Lightness multiplier (0.5-1.5)")
    chroma_boost: float = Field(description="Chroma multiplier (0.5-2.0)")
    shadow_reduction: float = Field(
        default=0.3, description="Lightness factor for the shadow variant (0.1-0.5)"
    )
    vibrant_threshold: float = Field(
        default=0.1, description="Minimum chroma before chroma boosting applies (0.05-0.2)"
    )

    @field_validator("lightness_boost")
    @classmethod
    def clamp_lightness_boost(cls, v: float) -> float:
        return _clamp(v, LIGHTNESS_BOOST_RANGE)

    @field_validator("chroma_boost")
    @classmethod
    def clamp_chroma_boost(cls, v: float) -> float:
        return _clamp(v, CHROMA_BOOST_RANGE)

    @field_validator("shadow_reduction")
    @classmethod
    def clamp_shadow_reduction(cls, v: float) -> float:
        return _clamp(v, SHADOW_REDUCTION_RANGE)

    @field_validator("vibrant_threshold")
    @classmethod
    def clamp_vibrant_threshold(cls, v: float) -> float:
        return _clamp(v, VIBRANT_THRESHOLD_RANGE)


SUBTLE = EnhancementPreset(
    name="SUBTLE",
    description="Minimal color enhancement for conservative aesthetics",
    lightness_boost=1.05,
    chroma_boost=1.10,
    shadow_reduction=0.40,
    vibrant_threshold=0.08,
)

STANDARD = EnhancementPreset(
    name="STANDARD",
    description="Balanced color enhancement for general use",
    lightness_boost=1.10,
    chroma_boost=1.15,
    shadow_reduction=0.30,
    vibrant_threshold=0.10,
)

VIBRANT = EnhancementPreset(
    name="VIBRANT",
    description="Enhanced vibrancy for dynamic color experiences",
    lightness_boost=1.15,
    chroma_boost=1.25,
    shadow_reduction=0.25,
    vibrant_threshold=0.12,
)

COSMIC = EnhancementPreset(
    name="COSMIC",
    description="Maximum enhancement for high-energy visual experiences",
    lightness_boost=1.10,
    chroma_boost=1.20,
    shadow_reduction=0.20,
    vibrant_threshold=0.15,
)

PRESETS: dict[str, EnhancementPreset] = {
    preset.name: preset for preset in (SUBTLE, STANDARD, VIBRANT, COSMIC)
}


def get_preset(name: str) -> EnhancementPreset:
    """
    Look up a built-in preset by name (case-insensitive).

    Raises:
        UnknownPresetError: If the name is not a built-in preset
    """
    try:
        return PRESETS[name.strip().upper()]
    except (KeyError, AttributeError) as e:
        raise UnknownPresetError(str(name), list(PRESETS)) from e


def resolve_preset(name: str | None) -> EnhancementPreset:
    """Look up a built-in preset, substituting STANDARD for unknown names."""
    if name is None:
        return STANDARD
    with ErrorContext(f"look up preset {name!r}", fallback=STANDARD, logger_instance=logger) as ctx:
        ctx.value = get_preset(name)
    return ctx.value


def create_custom_preset(
    name: str,
    description: str,
    lightness_boost: float,
    chroma_boost: float,
    shadow_reduction: float = 0.3,
    vibrant_threshold: float = 0.1,
) -> EnhancementPreset:
    """Build a one-off preset; every number is clamped into its range."""
    return EnhancementPreset(
        name=name,
        description=description,
        lightness_boost=lightness_boost,
        chroma_boost=chroma_boost,
        shadow_reduction=shadow_reduction,
        vibrant_threshold=vibrant_threshold,
    )


def blend_presets(
    first: EnhancementPreset,
    second: EnhancementPreset,
    intensity_multiplier: float = 1.0,
    name: str = "blended-genre-emotion",
) -> EnhancementPreset:
    """
    Average two presets field by field.

    The averaged chroma boost is scaled by `intensity_multiplier` before
    clamping. The result can sit between named presets in character; that
    is accepted behavior.
    """
    return create_custom_preset(
        name,
        f"Blended {first.name} + {second.name}",
        lightness_boost=(first.lightness_boost + second.lightness_boost) / 2,
        chroma_boost=(first.chroma_boost + second.chroma_boost) / 2 * intensity_multiplier,
        shadow_reduction=(first.shadow_reduction + second.shadow_reduction) / 2,
        vibrant_threshold=(first.vibrant_threshold + second.vibrant_threshold) / 2,
    )
