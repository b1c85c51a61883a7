"""TTL cache with lazy expiry, explicit invalidation and read-through loading."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from portfolio_content.models.base import utcnow

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(minutes=5)

_MISSING: Any = object()


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    data: T
    timestamp: datetime
    ttl: timedelta

    def is_live(self, now: datetime) -> bool:
        return now - self.timestamp <= self.ttl


@dataclass(frozen=True)
class CacheStats:
    size: int
    keys: list[str] = field(default_factory=list)
    expired_count: int = 0
    hits: int = 0
    misses: int = 0


class ContentCache:
    """Key-value cache whose entries expire after a per-entry TTL.

    Expired entries are evicted lazily by ``get`` or in bulk by
    ``clean_expired``. ``None`` is a cacheable value; absence is reported
    through the ``default`` argument of ``get``.
    """

    def __init__(
        self,
        default_ttl: timedelta = DEFAULT_TTL,
        *,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry[Any]] = {}
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    @property
    def default_ttl(self) -> timedelta:
        return self._default_ttl

    def get(self, key: str, default: Any = None) -> Any:
        """Return the live value for ``key``, or ``default``."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return default
            if not entry.is_live(self._clock()):
                # A sweep may have evicted it already.
                self._entries.pop(key, None)
                self._misses += 1
                logger.debug("Cache entry %s expired", key)
                return default
            self._hits += 1
            return entry.data

    def set(self, key: str, value: Any, ttl: timedelta | None = None) -> None:
        if ttl is None:
            ttl = self._default_ttl
        entry = CacheEntry(data=value, timestamp=self._clock(), ttl=ttl)
        with self._lock:
            self._entries[key] = entry

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, _MISSING) is not _MISSING

    def delete_prefix(self, prefix: str) -> int:
        """Drop every key starting with ``prefix``. Returns the number dropped."""
        with self._lock:
            doomed = [key for key in self._entries if key.startswith(prefix)]
            for key in doomed:
                del self._entries[key]
        return len(doomed)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def has(self, key: str) -> bool:
        """Report raw presence, including entries that expired but were not swept."""
        return key in self._entries

    def size(self) -> int:
        return len(self._entries)

    def get_or_load(self, key: str, loader: Callable[[], T], ttl: timedelta | None = None) -> T:
        """Return the cached value, or load, store and return it.

        A loader exception propagates and nothing is cached.
        """
        with self._lock:
            value = self.get(key, _MISSING)
            if value is not _MISSING:
                return value
            value = loader()
            self.set(key, value, ttl)
            return value

    def clean_expired(self) -> int:
        """Evict every expired entry. Returns the number evicted."""
        now = self._clock()
        expired = [key for key, entry in list(self._entries.items()) if not entry.is_live(now)]
        for key in expired:
            self._entries.pop(key, None)
        if expired:
            logger.debug("Swept %d expired cache entries", len(expired))
        return len(expired)

    def stats(self) -> CacheStats:
        now = self._clock()
        entries = list(self._entries.items())
        return CacheStats(
            size=len(entries),
            keys=[key for key, _ in entries],
            expired_count=sum(1 for _, entry in entries if not entry.is_live(now)),
            hits=self._hits,
            misses=self._misses,
        )


class CacheKeys:
    """Cache key namespace for content reads."""

    PROJECTS = "content:projects"
    SKILLS = "content:skills"
    EXPERIENCES = "content:experiences"
    BLOG_POSTS = "content:blogPosts"
    PUBLISHED_BLOG_POSTS = "content:blogPosts:published"
    SKILL_CATEGORIES = "content:skillCategories"
    METADATA = "content:metadata"
    METADATA_LIST = "content:metadataList"
    BLOG_POST_SLUG_PREFIX = "content:blogPost:slug:"

    @staticmethod
    def project(item_id: str) -> str:
        return f"content:project:{item_id}"

    @staticmethod
    def skill(item_id: str) -> str:
        return f"content:skill:{item_id}"

    @staticmethod
    def experience(item_id: str) -> str:
        return f"content:experience:{item_id}"

    @staticmethod
    def blog_post(item_id: str) -> str:
        return f"content:blogPost:{item_id}"

    @staticmethod
    def blog_post_by_slug(slug: str) -> str:
        return f"{CacheKeys.BLOG_POST_SLUG_PREFIX}{slug}"

    @staticmethod
    def skill_category(item_id: str) -> str:
        return f"content:skillCategory:{item_id}"

    @staticmethod
    def versions(content_id: str) -> str:
        return f"content:versions:{content_id}"

    @staticmethod
    def metadata_item(item_id: str) -> str:
        return f"content:metadataItem:{item_id}"
