"""Versioned portfolio content store with read-through caching."""

from portfolio_content.cache import ContentCache
from portfolio_content.repositories import ContentStore, VersionLedger
from portfolio_content.services.content import ContentAPI

__all__ = ["ContentAPI", "ContentCache", "ContentStore", "VersionLedger"]
