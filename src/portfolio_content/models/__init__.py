"""Data models for portfolio content and its version history."""

from portfolio_content.models.base import ContentBase, ContentKind
from portfolio_content.models.blog_post import BlogAuthor, BlogPost
from portfolio_content.models.experience import Experience
from portfolio_content.models.initial import InitialContent
from portfolio_content.models.metadata import METADATA_ID, PortfolioMetadata, SocialLinks, Theme
from portfolio_content.models.project import Project, ProjectLinks
from portfolio_content.models.skill import Skill
from portfolio_content.models.skill_category import SkillCategory
from portfolio_content.models.update import ContentUpdate
from portfolio_content.models.version import VersionRecord, VersionSource

__all__ = [
    "METADATA_ID",
    "BlogAuthor",
    "BlogPost",
    "ContentBase",
    "ContentKind",
    "ContentUpdate",
    "Experience",
    "InitialContent",
    "PortfolioMetadata",
    "Project",
    "ProjectLinks",
    "Skill",
    "SkillCategory",
    "SocialLinks",
    "Theme",
    "VersionRecord",
    "VersionSource",
]
