"""Generic in-memory collection for one content kind."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from portfolio_content.models import ContentBase, ContentKind, VersionSource
from portfolio_content.models.base import utcnow
from portfolio_content.schema import model_for, validate_content

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from datetime import datetime

    from portfolio_content.auth.gates import Sanitizer
    from portfolio_content.repositories.versions import VersionLedger

T = TypeVar("T", bound=ContentBase)

logger = logging.getLogger(__name__)

_DELETED_MESSAGE = "Deleted"


class ContentCollection(Generic[T]):
    """Live items of one kind, kept in insertion order.

    Every mutation appends to the shared ledger while holding the store lock,
    so the version number and the collection change land together.
    """

    kind: ClassVar[ContentKind]

    def __init__(
        self,
        ledger: VersionLedger,
        lock: threading.RLock,
        *,
        sanitize: Sanitizer | None = None,
        clock: Callable[[], datetime] = utcnow,
        initial: Iterable[T] = (),
    ) -> None:
        self._ledger = ledger
        self._lock = lock
        self._sanitize = sanitize
        self._clock = clock
        self._items: dict[str, T] = {}
        seeded_at = clock()
        for item in initial:
            seeded = self._validate(item)
            seeded.created_at = seeded.created_at or seeded_at
            seeded.updated_at = seeded.updated_at or seeded_at
            self._items[seeded.id] = seeded

    @property
    def model_class(self) -> type[T]:
        return model_for(self.kind)  # type: ignore[return-value]

    def list(self) -> list[T]:
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items.values()]

    def get_by_id(self, item_id: str) -> T | None:
        with self._lock:
            item = self._items.get(item_id)
            return item.model_copy(deep=True) if item else None

    def upsert(
        self,
        item: T | dict[str, Any],
        *,
        message: str | None = None,
        author: str | None = None,
        source: VersionSource | None = None,
    ) -> T:
        """Validate, timestamp and store ``item``, then append its new version.

        ``created_at`` is kept from the live item on update and set to now on
        insert; caller-supplied timestamps are ignored.
        """
        validated = self._validate(item)

        with self._lock:
            now = self._clock()
            existing = self._items.get(validated.id)
            if existing is not None:
                validated.created_at = existing.created_at
            else:
                validated.created_at = now
            validated.updated_at = now

            if source is None:
                source = VersionSource.UPDATE if existing is not None else VersionSource.CREATE
            # Replacing the value keeps the key's original insertion position.
            self._items[validated.id] = validated
            record = self._ledger.append(
                self.kind, validated.id, validated, message, author=author, source=source
            )

        logger.info("Saved %s %s v%d", self.kind, validated.id, record.version)
        return validated.model_copy(deep=True)

    def delete(self, item_id: str, *, author: str | None = None) -> bool:
        """Tombstone and remove ``item_id``. Returns False if it is not live."""
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                return False
            record = self._ledger.append(
                self.kind,
                item_id,
                item,
                _DELETED_MESSAGE,
                author=author,
                source=VersionSource.DELETE,
            )
            del self._items[item_id]

        logger.info("Deleted %s %s (tombstone v%d)", self.kind, item_id, record.version)
        return True

    def _validate(self, item: T | dict[str, Any]) -> T:
        payload = self._sanitize(item) if self._sanitize else item
        result = validate_content(self.kind, payload)
        if not result.ok:
            logger.warning(
                "Rejected %s write: %d schema violation(s)", self.kind, len(result.errors)
            )
        return result.unwrap()
