"""Skill document model."""

from __future__ import annotations

from pydantic import Field

from portfolio_content.models.base import ContentBase


class Skill(ContentBase):
    """A single skill with a proficiency level between 0 and 100."""

    name: str
    level: int = Field(ge=0, le=100)
    category: str
    description: str | None = None
    icon: str | None = None
