"""Project document model — portfolio case studies."""

from __future__ import annotations

from pydantic import Field

from portfolio_content.models.base import ContentBase, ContentModel


class ProjectLinks(ContentModel):
    github: str | None = None
    demo: str | None = None
    documentation: str | None = None


class Project(ContentBase):
    """A showcased project."""

    title: str
    description: str
    category: str
    tech: list[str] = Field(default_factory=list)
    highlights: list[str] = Field(default_factory=list)
    links: ProjectLinks | None = None
    featured: bool | None = None
