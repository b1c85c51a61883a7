"""Append-only version ledger, one gapless version sequence per content id."""

from __future__ import annotations

import copy
import itertools
import logging
import threading
from collections import defaultdict
from typing import TYPE_CHECKING, Any

from portfolio_content.models import ContentBase, ContentKind, VersionRecord, VersionSource

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from datetime import datetime

logger = logging.getLogger(__name__)


class VersionLedger:
    """Keep every snapshot ever written; records are never edited or removed.

    Version numbers are assigned per ``content_id`` regardless of kind. Reads
    hand out deep copies so no caller can reach the stored snapshots.
    """

    def __init__(
        self,
        *,
        default_author: str = "system",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._default_author = default_author
        self._clock = clock
        self._records: list[VersionRecord] = []
        self._by_content: defaultdict[str, list[VersionRecord]] = defaultdict(list)
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def append(
        self,
        content_type: ContentKind,
        content_id: str,
        data: ContentBase | Mapping[str, Any],
        message: str | None = None,
        *,
        author: str | None = None,
        source: VersionSource = VersionSource.UPDATE,
    ) -> VersionRecord:
        """Record a snapshot of ``data`` as the next version of ``content_id``."""
        snapshot = data.model_dump() if isinstance(data, ContentBase) else copy.deepcopy(dict(data))

        with self._lock:
            history = self._by_content[content_id]
            next_version = history[-1].version + 1 if history else 1
            fields: dict[str, Any] = {
                "id": f"ver_{next(self._ids)}",
                "content_id": content_id,
                "content_type": content_type,
                "data": snapshot,
                "version": next_version,
                "author": author or self._default_author,
                "message": message,
                "source": source,
            }
            if self._clock is not None:
                fields["created_at"] = self._clock()
            record = VersionRecord(**fields)
            history.append(record)
            self._records.append(record)

        logger.debug("Appended %s %s v%d (%s)", content_type, content_id, record.version, source)
        return record.model_copy(deep=True)

    def list_versions(self, content_id: str) -> list[VersionRecord]:
        """Return every version of ``content_id``, newest first."""
        with self._lock:
            history = list(self._by_content.get(content_id, ()))
        return [record.model_copy(deep=True) for record in reversed(history)]

    def get_version(self, content_id: str, version: int) -> VersionRecord | None:
        with self._lock:
            history = self._by_content.get(content_id, ())
            # history[i] holds version i + 1
            record = history[version - 1] if 1 <= version <= len(history) else None
        return record.model_copy(deep=True) if record else None

    def latest_version(self, content_id: str) -> int:
        """Return the newest version number of ``content_id``, or 0."""
        with self._lock:
            history = self._by_content.get(content_id)
            return history[-1].version if history else 0

    def count(self) -> int:
        with self._lock:
            return len(self._records)
