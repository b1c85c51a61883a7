"""Typed content update request — one payload for any kind."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from portfolio_content.models.base import ContentKind, ContentModel


class ContentUpdate(ContentModel):
    """Request to upsert ``data`` as a ``type`` item.

    ``id`` overrides the id carried inside ``data`` when both are given.
    """

    type: ContentKind
    data: dict[str, Any] = Field(default_factory=dict)
    id: str | None = None
    message: str | None = None
