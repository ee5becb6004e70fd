"""Per-color processing record."""

from pydantic import BaseModel, ConfigDict, Field

from .color import OKLABColor, OKLCHColor, RGBColor


class OKLABProcessingResult(BaseModel):
    """Everything produced by enhancing one color with one preset."""

    model_config = ConfigDict(frozen=True)

    original_hex: str
    original_rgb: RGBColor
    enhanced_hex: str
    enhanced_rgb: RGBColor
    shadow_hex: str
    shadow_rgb: RGBColor
    oklab_original: OKLABColor
    oklab_enhanced: OKLABColor
    oklab_shadow: OKLABColor
    oklch_enhanced: OKLCHColor
    processing_time_ms: float = Field(ge=0.0, description="Wall-clock duration of the enhancement")
    preset_name: str = Field(default="", description="Preset the color was processed with")
    is_fallback: bool = Field(default=False, description="True when the input hex could not be parsed")
