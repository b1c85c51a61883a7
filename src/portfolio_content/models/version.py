"""Version record model — immutable content snapshots in the ledger."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import ConfigDict, Field

from portfolio_content.models.base import ContentKind, ContentModel, utcnow


class VersionSource(StrEnum):
    """Enumerate the write operations that append a version."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    REVERT = "revert"


class VersionRecord(ContentModel):
    """A snapshot of one content item at a point in its history."""

    model_config = ConfigDict(frozen=True)

    id: str
    content_id: str
    content_type: ContentKind
    data: dict[str, Any] = Field(default_factory=dict)
    version: int = Field(ge=1)
    author: str
    created_at: datetime = Field(default_factory=utcnow)
    message: str | None = None
    source: VersionSource = VersionSource.UPDATE

    @property
    def is_tombstone(self) -> bool:
        return self.source == VersionSource.DELETE
