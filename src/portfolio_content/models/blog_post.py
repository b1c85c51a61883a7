"""Blog post document model."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from portfolio_content.models.base import ContentBase, ContentModel


class BlogAuthor(ContentModel):
    name: str = Field(min_length=1)
    avatar: str | None = None


class BlogPost(ContentBase):
    """A blog post addressable by id or by its URL slug."""

    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    excerpt: str = ""
    content: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    published: bool = False
    featured: bool | None = None
    cover_image: str | None = None
    author: BlogAuthor
    published_at: datetime | None = None
