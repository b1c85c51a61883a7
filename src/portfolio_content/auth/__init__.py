"""Write gates guarding the content API."""

from portfolio_content.auth.gates import ANONYMOUS, allow_all, require_write_access, token_present

__all__ = ["ANONYMOUS", "allow_all", "require_write_access", "token_present"]
