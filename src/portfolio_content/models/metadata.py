"""Portfolio metadata — the singleton describing the whole site."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from portfolio_content.models.base import ContentBase, ContentModel

METADATA_ID = "portfolio"


class SocialLinks(ContentModel):
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    email: str | None = None


class Theme(ContentModel):
    primary_color: str
    secondary_color: str


class PortfolioMetadata(ContentBase):
    """Site-wide title, author and theme. Always stored under ``METADATA_ID``."""

    id: Literal["portfolio"] = METADATA_ID
    title: str
    description: str
    author: str
    keywords: list[str] = Field(default_factory=list)
    social: SocialLinks | None = None
    theme: Theme | None = None
