"""Initial store contents, seeded without history."""

from __future__ import annotations

from pydantic import BaseModel, Field

from portfolio_content.models.blog_post import BlogPost
from portfolio_content.models.experience import Experience
from portfolio_content.models.metadata import PortfolioMetadata
from portfolio_content.models.project import Project
from portfolio_content.models.skill import Skill
from portfolio_content.models.skill_category import SkillCategory


class InitialContent(BaseModel):
    projects: list[Project] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    experiences: list[Experience] = Field(default_factory=list)
    blog_posts: list[BlogPost] = Field(default_factory=list)
    skill_categories: list[SkillCategory] = Field(default_factory=list)
    metadata: PortfolioMetadata | None = None
