"""Generic utility modules for chromatune.

- observer: Thread-safe observer list manager
- persistence: JSON load/save for Pydantic models
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = ["ObserverManager", "PydanticPersistence"]
