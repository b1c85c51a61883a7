"""Collections for each content kind."""

from __future__ import annotations

from typing import Any

from portfolio_content.models import (
    METADATA_ID,
    BlogPost,
    ContentKind,
    Experience,
    PortfolioMetadata,
    Project,
    Skill,
    SkillCategory,
)
from portfolio_content.repositories.base import ContentCollection


class ProjectCollection(ContentCollection[Project]):
    kind = ContentKind.PROJECT


class SkillCollection(ContentCollection[Skill]):
    kind = ContentKind.SKILL


class ExperienceCollection(ContentCollection[Experience]):
    kind = ContentKind.EXPERIENCE


class SkillCategoryCollection(ContentCollection[SkillCategory]):
    kind = ContentKind.SKILL_CATEGORY


class BlogPostCollection(ContentCollection[BlogPost]):
    kind = ContentKind.BLOG

    def list_published(self) -> list[BlogPost]:
        return [post for post in self.list() if post.published]

    def get_by_slug(self, slug: str) -> BlogPost | None:
        """Return the first live post with ``slug``, in insertion order."""
        with self._lock:
            post = next((p for p in self._items.values() if p.slug == slug), None)
            return post.model_copy(deep=True) if post else None


class MetadataCollection(ContentCollection[PortfolioMetadata]):
    """The metadata singleton, stored under the fixed ``METADATA_ID``."""

    kind = ContentKind.METADATA

    def get(self) -> PortfolioMetadata | None:
        return self.get_by_id(METADATA_ID)

    def update(
        self,
        metadata: PortfolioMetadata | dict[str, Any],
        *,
        message: str | None = None,
        author: str | None = None,
    ) -> PortfolioMetadata:
        if isinstance(metadata, dict):
            metadata = {**metadata, "id": METADATA_ID}
        return self.upsert(metadata, message=message, author=author)
