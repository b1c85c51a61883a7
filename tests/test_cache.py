"""Tests for ContentCache TTL, invalidation and read-through loading."""

from __future__ import annotations

import threading
from datetime import timedelta
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from portfolio_content.cache import DEFAULT_TTL, CacheKeys, ContentCache

if TYPE_CHECKING:
    from conftest import FakeClock

_LOAD_FAILED = "backend down"
_READERS = 8
_READS_PER_READER = 500


class TestGetSet:
    """Test basic get/set and expiry."""

    def test_default_ttl_is_five_minutes(self, cache: ContentCache) -> None:
        """Verify the default TTL."""
        assert cache.default_ttl == timedelta(minutes=5) == DEFAULT_TTL

    def test_missing_key(self, cache: ContentCache) -> None:
        """Verify absent keys return the default."""
        assert cache.get("missing") is None
        assert cache.get("missing", "fallback") == "fallback"

    def test_entry_live_until_ttl(self, cache: ContentCache, clock: FakeClock) -> None:
        """Verify an entry is served up to and including its TTL."""
        cache.set("k", "v")
        clock.advance(minutes=5)

        assert cache.get("k") == "v"

    def test_expired_entry_is_evicted_on_read(self, cache: ContentCache, clock: FakeClock) -> None:
        """Verify a read past the TTL returns absent and drops the entry."""
        cache.set("k", "v")
        clock.advance(minutes=5, microseconds=1)

        assert cache.has("k")
        assert cache.get("k") is None
        assert not cache.has("k")

    def test_per_key_ttl(self, cache: ContentCache, clock: FakeClock) -> None:
        """Verify an explicit TTL overrides the default."""
        cache.set("short", 1, ttl=timedelta(seconds=10))
        cache.set("long", 2)
        clock.advance(seconds=11)

        assert cache.get("short") is None
        assert cache.get("long") == 2  # noqa: PLR2004

    def test_set_overwrites_and_restarts_ttl(self, cache: ContentCache, clock: FakeClock) -> None:
        """Verify a second set replaces the value and its timestamp."""
        cache.set("k", "old")
        clock.advance(minutes=4)
        cache.set("k", "new")
        clock.advance(minutes=4)

        assert cache.get("k") == "new"


class TestInvalidation:
    """Test explicit invalidation."""

    def test_delete(self, cache: ContentCache) -> None:
        """Verify delete reports whether a key was present."""
        cache.set("k", "v")

        assert cache.delete("k") is True
        assert cache.delete("k") is False
        assert cache.get("k") is None

    def test_delete_cached_none(self, cache: ContentCache) -> None:
        """Verify a cached None counts as present for delete."""
        cache.set("k", None)

        assert cache.delete("k") is True

    def test_delete_prefix(self, cache: ContentCache) -> None:
        """Verify only keys with the prefix are dropped."""
        cache.set(CacheKeys.blog_post_by_slug("a"), 1)
        cache.set(CacheKeys.blog_post_by_slug("b"), 2)
        cache.set(CacheKeys.BLOG_POSTS, [])

        dropped = cache.delete_prefix(CacheKeys.BLOG_POST_SLUG_PREFIX)

        assert dropped == 2  # noqa: PLR2004
        assert cache.has(CacheKeys.BLOG_POSTS)

    def test_clear(self, cache: ContentCache) -> None:
        """Verify clear empties the cache."""
        cache.set("a", 1)
        cache.set("b", 2)

        cache.clear()

        assert cache.size() == 0


class TestGetOrLoad:
    """Test read-through loading."""

    def test_loader_called_once_within_ttl(self, cache: ContentCache) -> None:
        """Verify repeated reads hit the cache."""
        loader = MagicMock(return_value=["p1"])

        first = cache.get_or_load("k", loader)
        second = cache.get_or_load("k", loader)

        assert first == second == ["p1"]
        loader.assert_called_once()

    def test_reload_after_delete(self, cache: ContentCache) -> None:
        """Verify invalidation forces the next read to load."""
        loader = MagicMock(return_value="v")
        cache.get_or_load("k", loader)

        cache.delete("k")
        cache.get_or_load("k", loader)

        assert loader.call_count == 2  # noqa: PLR2004

    def test_reload_after_expiry(self, cache: ContentCache, clock: FakeClock) -> None:
        """Verify expiry forces the next read to load."""
        loader = MagicMock(return_value="v")
        cache.get_or_load("k", loader, ttl=timedelta(seconds=30))
        clock.advance(seconds=31)

        cache.get_or_load("k", loader)

        assert loader.call_count == 2  # noqa: PLR2004

    def test_none_result_is_cached(self, cache: ContentCache) -> None:
        """Verify a loader returning None is not re-invoked."""
        loader = MagicMock(return_value=None)

        assert cache.get_or_load("k", loader) is None
        assert cache.get_or_load("k", loader) is None
        loader.assert_called_once()

    def test_failed_load_is_not_cached(self, cache: ContentCache) -> None:
        """Verify loader errors propagate and leave no entry."""
        loader = MagicMock(side_effect=[RuntimeError(_LOAD_FAILED), "v"])

        with pytest.raises(RuntimeError, match=_LOAD_FAILED):
            cache.get_or_load("k", loader)

        assert not cache.has("k")
        assert cache.get_or_load("k", loader) == "v"


class TestMaintenance:
    """Test sweeping and statistics."""

    def test_clean_expired(self, cache: ContentCache, clock: FakeClock) -> None:
        """Verify the sweep removes only expired entries."""
        cache.set("old", 1, ttl=timedelta(seconds=1))
        cache.set("fresh", 2)
        clock.advance(seconds=2)

        assert cache.clean_expired() == 1
        assert cache.clean_expired() == 0
        assert not cache.has("old")
        assert cache.has("fresh")

    def test_stats(self, cache: ContentCache, clock: FakeClock) -> None:
        """Verify stats report size, keys, expired entries, hits and misses."""
        cache.set("a", 1, ttl=timedelta(seconds=1))
        cache.set("b", 2)
        cache.get("b")
        cache.get("missing")
        clock.advance(seconds=2)

        stats = cache.stats()

        assert stats.size == 2  # noqa: PLR2004
        assert stats.keys == ["a", "b"]
        assert stats.expired_count == 1
        assert stats.hits == 1
        assert stats.misses == 1

    def test_hit_and_miss_counts_under_concurrent_reads(self, cache: ContentCache) -> None:
        """Verify every concurrent read is counted exactly once."""
        cache.set("hit", 1)
        barrier = threading.Barrier(_READERS)

        def read() -> None:
            barrier.wait()
            for _ in range(_READS_PER_READER):
                cache.get("hit")
                cache.get("miss")

        threads = [threading.Thread(target=read) for _ in range(_READERS)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stats = cache.stats()
        assert stats.hits == _READERS * _READS_PER_READER
        assert stats.misses == _READERS * _READS_PER_READER
