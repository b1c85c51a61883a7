"""Shared base for every content document."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(UTC)


class ContentKind(StrEnum):
    """Enumerate the content kinds the store manages."""

    PROJECT = "project"
    SKILL = "skill"
    EXPERIENCE = "experience"
    BLOG = "blog"
    SKILL_CATEGORY = "skillCategory"
    METADATA = "metadata"


class ContentModel(BaseModel):
    """Accept camelCase input alongside snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentBase(ContentModel):
    """Fields every stored item carries; timestamps are server-controlled."""

    id: str = Field(default_factory=lambda: str(uuid4()), min_length=1)
    created_at: datetime | None = None
    updated_at: datetime | None = None
