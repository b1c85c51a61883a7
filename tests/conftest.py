"""Shared fixtures: a controllable clock and fresh store/cache/API instances."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from portfolio_content.cache import ContentCache
from portfolio_content.repositories.store import ContentStore
from portfolio_content.services.content import ContentAPI

_START = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = _START) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> ContentStore:
    return ContentStore(clock=clock)


@pytest.fixture
def cache(clock: FakeClock) -> ContentCache:
    return ContentCache(clock=clock)


@pytest.fixture
def api(store: ContentStore, cache: ContentCache) -> ContentAPI:
    return ContentAPI(store, cache)
