"""Tests for the coordinator result cache."""

import threading

import pytest

from chromatune.coordination import ResultCache, make_cache_key
from chromatune.models import MusicAnalysisData, MusicalColorContext


class TestCacheKey:
    """Test cache key derivation."""

    @pytest.mark.unit
    def test_same_context_same_key(self, energetic_context):
        copy = MusicalColorContext(**energetic_context.model_dump())
        assert make_cache_key(copy) == make_cache_key(energetic_context)

    @pytest.mark.unit
    def test_key_depends_on_track_timestamp_and_music(self, energetic_context):
        base = make_cache_key(energetic_context)
        other_track = energetic_context.model_copy(update={"track_id": "other"})
        other_time = energetic_context.model_copy(update={"timestamp": 1.0})
        other_music = energetic_context.model_copy(
            update={"music_data": MusicAnalysisData(energy=0.1, valence=0.1)}
        )
        keys = {base, make_cache_key(other_track), make_cache_key(other_time), make_cache_key(other_music)}
        assert len(keys) == 4

    @pytest.mark.unit
    def test_key_is_sha256_hex(self, energetic_context):
        key = make_cache_key(energetic_context)
        assert len(key) == 64
        int(key, 16)


class TestResultCache:
    """Test LRU and TTL behavior."""

    @pytest.mark.unit
    def test_put_and_get(self, clock):
        cache = ResultCache(clock=clock)
        result = object()
        cache.put("a", result)
        assert cache.get("a") is result
        assert "a" in cache
        assert len(cache) == 1

    @pytest.mark.unit
    def test_miss(self, clock):
        cache = ResultCache(clock=clock)
        assert cache.get("missing") is None
        assert cache.stats()["misses"] == 1

    @pytest.mark.unit
    def test_entry_expires_after_ttl(self, clock):
        cache = ResultCache(ttl_seconds=300, clock=clock)
        cache.put("a", object())

        clock.advance(299.9)
        assert cache.get("a") is not None

        clock.advance(0.2)
        assert cache.get("a") is None
        assert len(cache) == 0
        assert cache.stats()["evictions"] == 1

    @pytest.mark.unit
    def test_ttl_counts_from_write_not_read(self, clock):
        cache = ResultCache(ttl_seconds=10, clock=clock)
        cache.put("a", object())
        clock.advance(6)
        assert cache.get("a") is not None
        clock.advance(6)
        assert cache.get("a") is None

    @pytest.mark.unit
    def test_lru_eviction(self, clock):
        cache = ResultCache(capacity=2, clock=clock)
        cache.put("a", "A")
        cache.put("b", "B")
        cache.get("a")  # "b" is now least recently used
        cache.put("c", "C")

        assert cache.get("b") is None
        assert cache.get("a") == "A"
        assert cache.get("c") == "C"
        assert len(cache) == 2

    @pytest.mark.unit
    def test_overwrite_refreshes_expiry(self, clock):
        cache = ResultCache(ttl_seconds=10, clock=clock)
        cache.put("a", "old")
        clock.advance(8)
        cache.put("a", "new")
        clock.advance(8)
        assert cache.get("a") == "new"

    @pytest.mark.unit
    def test_sweep(self, clock):
        cache = ResultCache(ttl_seconds=10, clock=clock)
        cache.put("a", 1)
        clock.advance(5)
        cache.put("b", 2)
        clock.advance(6)

        assert cache.sweep() == 1
        assert "a" not in cache
        assert "b" in cache

    @pytest.mark.unit
    def test_clear(self, clock):
        cache = ResultCache(clock=clock)
        cache.put("a", 1)
        cache.clear()
        assert len(cache) == 0

    @pytest.mark.unit
    def test_stats(self, clock):
        cache = ResultCache(capacity=3, ttl_seconds=60, clock=clock)
        cache.put("a", 1)
        cache.get("a")
        cache.get("b")
        stats = cache.stats()
        assert stats == {
            "size": 1,
            "capacity": 3,
            "ttl_seconds": 60,
            "hits": 1,
            "misses": 1,
            "evictions": 0,
        }

    @pytest.mark.unit
    @pytest.mark.parametrize("kwargs", [dict(capacity=0), dict(ttl_seconds=0)])
    def test_invalid_construction(self, kwargs):
        with pytest.raises(ValueError):
            ResultCache(**kwargs)

    @pytest.mark.unit
    def test_concurrent_puts_respect_capacity(self):
        cache = ResultCache(capacity=20)

        def writer(prefix: str):
            for i in range(200):
                cache.put(f"{prefix}-{i}", i)
                cache.get(f"{prefix}-{i // 2}")

        threads = [threading.Thread(target=writer, args=(str(n),)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 20
