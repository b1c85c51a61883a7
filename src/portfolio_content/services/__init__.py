"""Service layer composing the store, the cache and the write gates."""

from portfolio_content.services.content import ContentAPI

__all__ = ["ContentAPI"]
