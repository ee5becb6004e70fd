"""OKLAB color science: conversion and perceptual enhancement."""

from .conversion import (
    hex_to_oklab,
    hex_to_rgb,
    is_hex_color,
    oklab_to_hex,
    oklab_to_oklch,
    oklab_to_rgb,
    oklch_to_oklab,
    rgb_to_hex,
    rgb_to_oklab,
    try_hex_to_rgb,
)
from .enhancer import (
    DEFAULT_FALLBACK_RGB,
    PerceptualColorEnhancer,
    enhance_oklab,
    generate_variables,
    shadow_oklab,
)

__all__ = [
    "DEFAULT_FALLBACK_RGB",
    "PerceptualColorEnhancer",
    "enhance_oklab",
    "generate_variables",
    "hex_to_oklab",
    "hex_to_rgb",
    "is_hex_color",
    "oklab_to_hex",
    "oklab_to_oklch",
    "oklab_to_rgb",
    "oklch_to_oklab",
    "rgb_to_hex",
    "rgb_to_oklab",
    "shadow_oklab",
    "try_hex_to_rgb",
]
