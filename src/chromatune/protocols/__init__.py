"""Protocols and events for the coordination layer."""

from .events import CoordinationEvent
from .observers import CoordinationObserver, GenreClassifier

__all__ = [
    "CoordinationEvent",
    "CoordinationObserver",
    "GenreClassifier",
]
