"""Color models for the three color spaces the pipeline works in."""

from pydantic import BaseModel, ConfigDict, Field


class RGBColor(BaseModel):
    """Standard 8-bit sRGB color.

    The model is frozen so results built from it stay immutable and
    hashable once produced.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def black(cls) -> "RGBColor":
        """Create black."""
        return cls(r=0, g=0, b=0)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#ff0000').

        Example:
            >>> RGBColor(r=255, g=0, b=0).to_hex()
            '#ff0000'
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_css_triplet(self) -> str:
        """Comma-joined channels as used by `rgba(var(--x-rgb), a)` consumers.

        Example:
            >>> RGBColor(r=203, g=166, b=247).to_css_triplet()
            '203,166,247'
        """
        return f"{self.r},{self.g},{self.b}"


class OKLABColor(BaseModel):
    """A color in OKLAB space.

    `L` is perceptual lightness (0-1); `a` (green-red) and `b` (blue-yellow)
    are signed chroma axes, typically within +/-0.4.
    """

    model_config = ConfigDict(frozen=True)

    L: float = Field(description="Lightness (0-1)")
    a: float = Field(description="Green-red axis")
    b: float = Field(description="Blue-yellow axis")

    @property
    def chroma(self) -> float:
        """Distance from the neutral axis, sqrt(a^2 + b^2)."""
        return (self.a * self.a + self.b * self.b) ** 0.5


class OKLCHColor(BaseModel):
    """Cylindrical restatement of an OKLAB color.

    Always derived from an OKLABColor, never stored on its own.
    """

    model_config = ConfigDict(frozen=True)

    L: float = Field(description="Lightness (0-1)")
    C: float = Field(ge=0.0, description="Chroma")
    H: float = Field(ge=0.0, lt=360.0, description="Hue in degrees [0, 360)")
