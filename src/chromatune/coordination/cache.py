"""Bounded, time-limited result cache owned by a coordinator instance."""

import hashlib
import logging
import time
from collections import OrderedDict
from collections.abc import Callable
from threading import Lock
from typing import NamedTuple

from chromatune.models.coordination import MusicalColorContext, MusicalOKLABResult

logger = logging.getLogger(__name__)


def make_cache_key(context: MusicalColorContext) -> str:
    """SHA-256 over track id, timestamp and the canonical music data."""
    digest = hashlib.sha256()
    digest.update(context.track_id.encode("utf-8"))
    digest.update(b"\x00")
    digest.update(repr(context.timestamp).encode("ascii"))
    digest.update(b"\x00")
    digest.update(context.music_data.cache_token().encode("utf-8"))
    return digest.hexdigest()


class _Entry(NamedTuple):
    result: MusicalOKLABResult
    expires_at: float


class ResultCache:
    """
    LRU cache with a per-entry time-to-live.

    The expiry time is stored when an entry is written; expired entries
    are dropped when read and by `sweep()`. When the cache is full the
    least recently used entry is evicted.

    Thread Safety:
        All operations take an internal lock; results are immutable so
        they are shared between callers without copying.
    """

    def __init__(
        self,
        capacity: int = 20,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of entries
            ttl_seconds: Lifetime of an entry
            clock: Monotonic time source (injectable for tests)
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        self._capacity = capacity
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[str, _Entry] = OrderedDict()
        self._lock = Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> MusicalOKLABResult | None:
        """Return the live entry for `key` and mark it most recently used."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            if entry.expires_at <= self._clock():
                del self._entries[key]
                self._evictions += 1
                self._misses += 1
                logger.debug(f"Cache entry {key[:12]} expired")
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return entry.result

    def put(self, key: str, result: MusicalOKLABResult) -> None:
        """Store `result`, evicting the least recently used entry when full."""
        with self._lock:
            self._entries[key] = _Entry(result, self._clock() + self._ttl)
            self._entries.move_to_end(key)
            while len(self._entries) > self._capacity:
                evicted, _ = self._entries.popitem(last=False)
                self._evictions += 1
                logger.debug(f"Cache full, evicted {evicted[:12]}")

    def sweep(self) -> int:
        """Drop all expired entries. Returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if e.expires_at <= now]
            for key in expired:
                del self._entries[key]
            self._evictions += len(expired)
        if expired:
            logger.debug(f"Swept {len(expired)} expired cache entries")
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict[str, float]:
        with self._lock:
            return {
                "size": len(self._entries),
                "capacity": self._capacity,
                "ttl_seconds": self._ttl,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and entry.expires_at > self._clock()
