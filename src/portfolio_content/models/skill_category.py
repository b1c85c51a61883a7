"""Skill category document model — groups skills for display."""

from __future__ import annotations

from portfolio_content.models.base import ContentBase


class SkillCategory(ContentBase):
    title: str
    description: str | None = None
    color: str
