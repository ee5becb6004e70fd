"""Color-space conversion: hex <-> sRGB <-> OKLAB <-> OKLCH.

Pure functions with no state. Only hex parsing can fail; everything else is
total over its input domain.

OKLAB follows Björn Ottosson's definition: sRGB is linearized, mapped to an
LMS cone response with M1, passed through a cube root and mapped to L/a/b
with M2. The inverse applies the inverse matrices, a cube and sRGB gamma
encoding.
"""

import math
import re
from typing import Any

import numpy as np

from chromatune.exceptions import InvalidHexColorError
from chromatune.models.color import OKLABColor, OKLCHColor, RGBColor

_HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

# Linear sRGB -> LMS
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# Non-linear LMS -> OKLAB
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# OKLAB -> non-linear LMS
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS -> linear sRGB
_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def is_hex_color(value: Any) -> bool:
    """True for `#RGB` / `#RRGGBB` strings, nothing else."""
    return isinstance(value, str) and _HEX_PATTERN.fullmatch(value) is not None


def hex_to_rgb(value: str) -> RGBColor:
    """
    Parse a `#RGB` or `#RRGGBB` string.

    Raises:
        InvalidHexColorError: For anything else, including non-strings
    """
    if not isinstance(value, str):
        raise InvalidHexColorError(value)
    match = _HEX_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidHexColorError(value)

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return RGBColor(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))


def try_hex_to_rgb(value: Any) -> RGBColor | None:
    """Like `hex_to_rgb` but returns None instead of raising."""
    try:
        return hex_to_rgb(value)
    except InvalidHexColorError:
        return None


def _channel(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return max(0, min(255, round(value)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format channels as `#rrggbb`, rounding and clamping each to 0-255."""
    return f"#{_channel(r):02x}{_channel(g):02x}{_channel(b):02x}"


def _srgb_to_linear(channels: np.ndarray) -> np.ndarray:
    return np.where(
        channels <= 0.04045,
        channels / 12.92,
        ((channels + 0.055) / 1.055) ** 2.4,
    )


def _linear_to_srgb(channels: np.ndarray) -> np.ndarray:
    channels = np.clip(channels, 0.0, 1.0)
    return np.where(
        channels <= 0.0031308,
        channels * 12.92,
        1.055 * np.power(channels, 1.0 / 2.4) - 0.055,
    )


def rgb_to_oklab(rgb: RGBColor) -> OKLABColor:
    """Convert an 8-bit sRGB color to OKLAB."""
    linear = _srgb_to_linear(np.array(rgb.to_rgb_tuple(), dtype=np.float64) / 255.0)
    lms = np.cbrt(_M1 @ linear)
    L, a, b = _M2 @ lms
    return OKLABColor(L=float(L), a=float(a), b=float(b))


def oklab_to_rgb(oklab: OKLABColor) -> RGBColor:
    """Convert OKLAB to 8-bit sRGB, clipping out-of-gamut channels."""
    lms = (_M2_INV @ np.array([oklab.L, oklab.a, oklab.b], dtype=np.float64)) ** 3
    encoded = _linear_to_srgb(_M1_INV @ lms) * 255.0
    r, g, b = (_channel(float(c)) for c in encoded)
    return RGBColor(r=r, g=g, b=b)


def oklab_to_oklch(oklab: OKLABColor) -> OKLCHColor:
    """C = sqrt(a^2 + b^2); H = atan2(b, a) normalized to [0, 360)."""
    chroma = math.hypot(oklab.a, oklab.b)
    hue = math.degrees(math.atan2(oklab.b, oklab.a)) % 360.0
    if hue >= 360.0:  # -tiny % 360 can round to exactly 360.0
        hue = 0.0
    return OKLCHColor(L=oklab.L, C=chroma, H=hue)


def oklch_to_oklab(oklch: OKLCHColor) -> OKLABColor:
    """Inverse of `oklab_to_oklch`."""
    hue = math.radians(oklch.H)
    return OKLABColor(L=oklch.L, a=oklch.C * math.cos(hue), b=oklch.C * math.sin(hue))


def hex_to_oklab(value: str) -> OKLABColor:
    """Parse a hex string straight to OKLAB.

    Raises:
        InvalidHexColorError: If the string is not a hex color
    """
    return rgb_to_oklab(hex_to_rgb(value))


def oklab_to_hex(oklab: OKLABColor) -> str:
    """Convert OKLAB straight to a `#rrggbb` string."""
    return oklab_to_rgb(oklab).to_hex()
