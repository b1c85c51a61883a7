"""Content store — every kind's collection over one shared version ledger."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from portfolio_content.models import (
    METADATA_ID,
    ContentBase,
    ContentKind,
    ContentUpdate,
    InitialContent,
    PortfolioMetadata,
    VersionRecord,
    VersionSource,
)
from portfolio_content.models.base import utcnow
from portfolio_content.repositories.content import (
    BlogPostCollection,
    ExperienceCollection,
    MetadataCollection,
    ProjectCollection,
    SkillCategoryCollection,
    SkillCollection,
)
from portfolio_content.repositories.versions import VersionLedger
from portfolio_content.schema import kind_of

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from portfolio_content.auth.gates import Sanitizer
    from portfolio_content.repositories.base import ContentCollection

logger = logging.getLogger(__name__)


class ContentStore:
    """Own the live collections and their history.

    One re-entrant lock guards every collection, so a revert (ledger lookup
    followed by an upsert) is atomic with respect to other writers.
    """

    def __init__(
        self,
        initial: InitialContent | None = None,
        *,
        ledger: VersionLedger | None = None,
        sanitize: Sanitizer | None = None,
        clock: Callable[[], datetime] = utcnow,
        default_author: str = "system",
    ) -> None:
        initial = initial or InitialContent()
        self._lock = threading.RLock()
        self.ledger = ledger or VersionLedger(default_author=default_author, clock=clock)

        def _options(items: Any) -> dict[str, Any]:
            return {"sanitize": sanitize, "clock": clock, "initial": items}

        self.projects = ProjectCollection(self.ledger, self._lock, **_options(initial.projects))
        self.skills = SkillCollection(self.ledger, self._lock, **_options(initial.skills))
        self.experiences = ExperienceCollection(
            self.ledger, self._lock, **_options(initial.experiences)
        )
        self.blog_posts = BlogPostCollection(
            self.ledger, self._lock, **_options(initial.blog_posts)
        )
        self.skill_categories = SkillCategoryCollection(
            self.ledger, self._lock, **_options(initial.skill_categories)
        )
        self.metadata = MetadataCollection(
            self.ledger,
            self._lock,
            **_options([initial.metadata] if initial.metadata else []),
        )
        self._collections: dict[ContentKind, ContentCollection[Any]] = {
            ContentKind.PROJECT: self.projects,
            ContentKind.SKILL: self.skills,
            ContentKind.EXPERIENCE: self.experiences,
            ContentKind.BLOG: self.blog_posts,
            ContentKind.SKILL_CATEGORY: self.skill_categories,
            ContentKind.METADATA: self.metadata,
        }

    def collection(self, kind: ContentKind | str) -> ContentCollection[Any]:
        return self._collections[ContentKind(kind)]

    def upsert(self, item: ContentBase, **kwargs: Any) -> ContentBase:
        """Upsert a typed item into the collection of its own kind."""
        return self.collection(kind_of(item)).upsert(item, **kwargs)

    def get_metadata(self) -> PortfolioMetadata | None:
        return self.metadata.get()

    def update_metadata(
        self, metadata: PortfolioMetadata | dict[str, Any], **kwargs: Any
    ) -> PortfolioMetadata:
        return self.metadata.update(metadata, **kwargs)

    def list_versions(self, content_id: str) -> list[VersionRecord]:
        return self.ledger.list_versions(content_id)

    def get_version(self, content_id: str, version: int) -> VersionRecord | None:
        return self.ledger.get_version(content_id, version)

    def revert_to_version(
        self,
        content_id: str,
        version: int,
        *,
        author: str | None = None,
    ) -> ContentBase | None:
        """Write the snapshot of ``version`` back as the newest version.

        Returns the restored item, or None when the version does not exist.
        Later versions are left untouched; the revert is one more append.
        """
        with self._lock:
            record = self.ledger.get_version(content_id, version)
            if record is None:
                return None
            restored = self.collection(record.content_type).upsert(
                {**record.data, "id": content_id},
                message=f"Reverted to version {version}",
                author=author,
                source=VersionSource.REVERT,
            )
        logger.info("Reverted %s %s to v%d", record.content_type, content_id, version)
        return restored

    def apply_update(self, update: ContentUpdate, *, author: str | None = None) -> ContentBase:
        """Dispatch a typed update request to its kind's upsert."""
        data = dict(update.data)
        if update.type == ContentKind.METADATA:
            data["id"] = METADATA_ID
        elif update.id is not None:
            data["id"] = update.id
        return self.collection(update.type).upsert(data, message=update.message, author=author)
