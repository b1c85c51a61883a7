"""Tests for the write gates."""

from unittest.mock import MagicMock

import pytest

from portfolio_content.auth import ANONYMOUS, allow_all, require_write_access, token_present
from portfolio_content.errors import RateLimited, Unauthorized


def test_token_present_rejects_empty():
    assert token_present(None) is False
    assert token_present("") is False


def test_token_present_accepts_token():
    assert token_present("abc") is True


def test_allow_all():
    assert allow_all("anyone") is True


def test_require_write_access_passes():
    require_write_access("abc")


def test_unauthorized_skips_rate_limit():
    allow_request = MagicMock(return_value=True)
    with pytest.raises(Unauthorized):
        require_write_access(None, token_present, allow_request)
    allow_request.assert_not_called()


def test_rate_limited():
    with pytest.raises(RateLimited):
        require_write_access("abc", token_present, lambda caller_id: False)


def test_anonymous_caller_id():
    allow_request = MagicMock(return_value=True)
    require_write_access(None, lambda credential: True, allow_request)
    allow_request.assert_called_once_with(ANONYMOUS)
