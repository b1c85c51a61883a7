"""Experience document model — roles and positions."""

from __future__ import annotations

from pydantic import Field

from portfolio_content.models.base import ContentBase


class Experience(ContentBase):
    title: str
    company: str
    period: str
    location: str
    description: str
    highlights: list[str] = Field(default_factory=list)
    current: bool | None = None
