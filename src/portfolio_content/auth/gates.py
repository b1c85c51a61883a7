"""Write gates — injected authorization, rate limiting and sanitizing hooks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from portfolio_content.errors import RateLimited, Unauthorized

if TYPE_CHECKING:
    from collections.abc import Callable

    Authorizer = Callable[[str | None], bool]
    RateLimiter = Callable[[str], bool]
    Sanitizer = Callable[[Any], Any]

logger = logging.getLogger(__name__)

ANONYMOUS = "anonymous"


def token_present(credential: str | None) -> bool:
    """Accept any non-empty credential."""
    return bool(credential)


def allow_all(caller_id: str) -> bool:
    return True


def require_write_access(
    credential: str | None,
    authorize: Authorizer = token_present,
    allow_request: RateLimiter = allow_all,
) -> None:
    """Raise ``Unauthorized`` or ``RateLimited`` unless the write may proceed."""
    if not authorize(credential):
        logger.warning("Rejected write: credential not authorized")
        raise Unauthorized("Admin access required")
    caller_id = credential or ANONYMOUS
    if not allow_request(caller_id):
        logger.warning("Rejected write: rate limit exceeded")
        raise RateLimited("Rate limit exceeded")
