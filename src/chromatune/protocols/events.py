"""Events emitted by the processing coordinator."""

from enum import Enum


class CoordinationEvent(Enum):
    """Lifecycle events of a coordination request."""

    RESULT_READY = "result_ready"      # Freshly computed result (cached afterwards)
    CACHE_HIT = "cache_hit"            # Stored result returned unchanged
    FALLBACK_USED = "fallback_used"    # Pipeline failed, fallback result returned
    CACHE_CLEARED = "cache_cleared"    # All cached results dropped
