"""Content API — cached reads, gated writes and revert orchestration."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from portfolio_content.auth.gates import allow_all, require_write_access, token_present
from portfolio_content.cache import CacheKeys, ContentCache
from portfolio_content.models import (
    METADATA_ID,
    BlogPost,
    ContentBase,
    ContentKind,
    ContentUpdate,
    PortfolioMetadata,
    VersionRecord,
)
from portfolio_content.repositories.store import ContentStore
from portfolio_content.schema import kind_of

if TYPE_CHECKING:
    from collections.abc import Callable

    from portfolio_content.auth.gates import Authorizer, RateLimiter, Sanitizer
    from portfolio_content.cache import CacheStats
    from portfolio_content.config import Settings
    from portfolio_content.models import InitialContent

T = TypeVar("T")

logger = logging.getLogger(__name__)

_COLLECTION_KEYS: dict[ContentKind, str] = {
    ContentKind.PROJECT: CacheKeys.PROJECTS,
    ContentKind.SKILL: CacheKeys.SKILLS,
    ContentKind.EXPERIENCE: CacheKeys.EXPERIENCES,
    ContentKind.BLOG: CacheKeys.BLOG_POSTS,
    ContentKind.SKILL_CATEGORY: CacheKeys.SKILL_CATEGORIES,
    ContentKind.METADATA: CacheKeys.METADATA_LIST,
}

_ITEM_KEYS: dict[ContentKind, Callable[[str], str]] = {
    ContentKind.PROJECT: CacheKeys.project,
    ContentKind.SKILL: CacheKeys.skill,
    ContentKind.EXPERIENCE: CacheKeys.experience,
    ContentKind.BLOG: CacheKeys.blog_post,
    ContentKind.SKILL_CATEGORY: CacheKeys.skill_category,
    ContentKind.METADATA: CacheKeys.metadata_item,
}


class ContentAPI:
    """The callable surface over the store.

    Reads go through the cache. Writes pass the authorization and rate-limit
    gates, go straight to the store, and then drop every cache key that could
    still hold the pre-write state of the item.
    """

    def __init__(
        self,
        store: ContentStore,
        cache: ContentCache | None = None,
        *,
        authorize: Authorizer = token_present,
        allow_request: RateLimiter = allow_all,
    ) -> None:
        self.store = store
        self.cache = cache or ContentCache()
        self._authorize = authorize
        self._allow_request = allow_request

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        initial: InitialContent | None = None,
        *,
        sanitize: Sanitizer | None = None,
        authorize: Authorizer = token_present,
        allow_request: RateLimiter = allow_all,
    ) -> ContentAPI:
        store = ContentStore(
            initial,
            sanitize=sanitize,
            default_author=settings.ledger.default_author,
        )
        cache = ContentCache(settings.cache.default_ttl)
        return cls(store, cache, authorize=authorize, allow_request=allow_request)

    # Reads

    def list(self, kind: ContentKind | str) -> list[Any]:
        kind = ContentKind(kind)
        collection = self.store.collection(kind)
        return self._read(_COLLECTION_KEYS[kind], collection.list)

    def get(self, kind: ContentKind | str, item_id: str) -> Any | None:
        kind = ContentKind(kind)
        collection = self.store.collection(kind)
        return self._read(_ITEM_KEYS[kind](item_id), lambda: collection.get_by_id(item_id))

    def get_published_blog_posts(self) -> list[BlogPost]:
        return self._read(CacheKeys.PUBLISHED_BLOG_POSTS, self.store.blog_posts.list_published)

    def get_blog_post_by_slug(self, slug: str) -> BlogPost | None:
        return self._read(
            CacheKeys.blog_post_by_slug(slug), lambda: self.store.blog_posts.get_by_slug(slug)
        )

    def get_metadata(self) -> PortfolioMetadata | None:
        return self._read(CacheKeys.METADATA, self.store.get_metadata)

    def list_versions(self, content_id: str) -> list[VersionRecord]:
        return self._read(
            CacheKeys.versions(content_id), lambda: self.store.list_versions(content_id)
        )

    def get_version(self, content_id: str, version: int) -> VersionRecord | None:
        return self.store.get_version(content_id, version)

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()

    # Writes

    def upsert(
        self,
        item: ContentBase,
        *,
        credential: str | None,
        message: str | None = None,
        author: str | None = None,
    ) -> Any:
        """Create or replace ``item`` in the collection of its kind."""
        self._check_write(credential)
        saved = self.store.upsert(item, message=message, author=author)
        self._invalidate(kind_of(item), saved.id)
        return saved

    def update_metadata(
        self,
        metadata: PortfolioMetadata | dict[str, Any],
        *,
        credential: str | None,
        message: str | None = None,
        author: str | None = None,
    ) -> PortfolioMetadata:
        self._check_write(credential)
        saved = self.store.update_metadata(metadata, message=message, author=author)
        self._invalidate(ContentKind.METADATA, METADATA_ID)
        return saved

    def delete(
        self,
        kind: ContentKind | str,
        item_id: str,
        *,
        credential: str | None,
        author: str | None = None,
    ) -> bool:
        """Delete ``item_id``. Returns False when nothing live had that id."""
        self._check_write(credential)
        kind = ContentKind(kind)
        deleted = self.store.collection(kind).delete(item_id, author=author)
        if deleted:
            self._invalidate(kind, item_id)
        return deleted

    def revert_to_version(
        self,
        content_id: str,
        version: int,
        *,
        credential: str | None,
        author: str | None = None,
    ) -> bool:
        """Restore ``content_id`` to ``version`` as a new version.

        Returns False if the version does not exist.
        """
        self._check_write(credential)
        restored = self.store.revert_to_version(content_id, version, author=author)
        if restored is None:
            return False
        self._invalidate(kind_of(restored), content_id)
        return True

    def handle_content_update(
        self,
        update: ContentUpdate | dict[str, Any],
        *,
        credential: str | None,
        author: str | None = None,
    ) -> Any:
        """Apply a typed update request of any kind."""
        self._check_write(credential)
        if not isinstance(update, ContentUpdate):
            update = ContentUpdate.model_validate(update)
        saved = self.store.apply_update(update, author=author)
        self._invalidate(update.type, saved.id)
        return saved

    def _read(self, key: str, loader: Callable[[], T]) -> T:
        # Cached values are shared between readers; hand each caller its own copy.
        return copy.deepcopy(self.cache.get_or_load(key, loader))

    def _check_write(self, credential: str | None) -> None:
        require_write_access(credential, self._authorize, self._allow_request)

    def _invalidate(self, kind: ContentKind, item_id: str) -> None:
        keys = [_ITEM_KEYS[kind](item_id), _COLLECTION_KEYS[kind], CacheKeys.versions(item_id)]
        if kind == ContentKind.BLOG:
            keys.append(CacheKeys.PUBLISHED_BLOG_POSTS)
        elif kind == ContentKind.METADATA:
            keys.append(CacheKeys.METADATA)
        for key in keys:
            self.cache.delete(key)
        if kind == ContentKind.BLOG:
            # The post's old slug is not known here, so every slug lookup goes.
            self.cache.delete_prefix(CacheKeys.BLOG_POST_SLUG_PREFIX)
        logger.debug("Invalidated %d cache key(s) for %s %s", len(keys), kind, item_id)

