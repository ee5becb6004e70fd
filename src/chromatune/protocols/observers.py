"""Observer and collaborator protocols for the coordination layer.

- CoordinationObserver: reacts to coordinator events (presentation layers)
- GenreClassifier: external genre service consumed by the coordinator
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chromatune.models import (
        EnhancementPreset,
        GenreCharacteristics,
        MusicAnalysisData,
        MusicalOKLABResult,
    )

from .events import CoordinationEvent


@runtime_checkable
class CoordinationObserver(Protocol):
    """
    Observer that receives coordination results.

    This is the hook a presentation layer uses to apply `result.variables`
    to a rendering surface.
    """

    def on_coordination_event(
        self, event: CoordinationEvent, result: "MusicalOKLABResult | None"
    ) -> None:
        """
        Handle a coordinator event.

        Args:
            event: The type of event
            result: The result that was produced or served, or None for CACHE_CLEARED

        Note:
            Called on the thread that invoked `process()`. Exceptions are
            logged by the coordinator and do not affect the result.
        """
        ...


@runtime_checkable
class GenreClassifier(Protocol):
    """Genre detection service used by the coordinator."""

    def detect_genre(self, music_data: "MusicAnalysisData | None") -> str:
        """Return a genre name, or 'default' when nothing can be inferred."""
        ...

    def get_preset_for_track(self, music_data: "MusicAnalysisData | None") -> "EnhancementPreset":
        """Return the enhancement preset for the track's genre."""
        ...

    def get_characteristics_for_genre(self, genre: str) -> "GenreCharacteristics":
        """Return vibrancy / emotional range / color temperature guidance for a genre."""
        ...
