"""CLI commands for chromatune."""

from .color import convert, gradient, presets
from .config import config
from .pipeline import classify, process

__all__ = ["classify", "config", "convert", "gradient", "presets", "process"]
