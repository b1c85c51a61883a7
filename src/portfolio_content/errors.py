"""Exceptions raised by the content store and its write gates."""

from __future__ import annotations

from typing import Any


class ContentStoreError(Exception):
    """Base class for recoverable content store failures."""


class ContentValidationError(ContentStoreError):
    """A write payload violates the schema of its content kind."""

    def __init__(self, kind: str, errors: list[dict[str, Any]]) -> None:
        self.kind = kind
        self.errors = errors
        details = "; ".join(
            f"{'.'.join(map(str, e['loc'])) or '<root>'}: {e['msg']}" for e in errors
        )
        super().__init__(f"Invalid {kind}: {details}")


class Unauthorized(ContentStoreError):
    """The caller's credential was rejected by the authorizer."""


class RateLimited(ContentStoreError):
    """The caller exceeded the allowed request rate."""
