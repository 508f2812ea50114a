"""Access token refresh for chat credentials."""

from .client import TokenClient, TokenResult  # noqa: F401

__all__ = ["TokenClient", "TokenResult"]
