"""In-memory repositories for content and its version history."""

from portfolio_content.repositories.base import ContentCollection
from portfolio_content.repositories.content import (
    BlogPostCollection,
    ExperienceCollection,
    MetadataCollection,
    ProjectCollection,
    SkillCategoryCollection,
    SkillCollection,
)
from portfolio_content.repositories.store import ContentStore
from portfolio_content.repositories.versions import VersionLedger

__all__ = [
    "BlogPostCollection",
    "ContentCollection",
    "ContentStore",
    "ExperienceCollection",
    "MetadataCollection",
    "ProjectCollection",
    "SkillCategoryCollection",
    "SkillCollection",
    "VersionLedger",
]
