"""Root of the internal error hierarchy.

Only raise these inside the client's boundaries; raw aiohttp / JSON / pydantic
errors are wrapped and chained as ``__cause__`` instead of surfacing directly.
"""

from __future__ import annotations

from collections.abc import Mapping


class TwitchIRCError(Exception):
    """Base class for all client errors with structured context.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class RefreshAccessTokenError(TwitchIRCError):
    """Raised when exchanging the refresh token for an access token fails.

    Attributes:
        status: HTTP status returned by the token endpoint, or None when the
            request never produced a usable response (network, timeout, body).
    """

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message, data={"status": status})
        self.status = status


class ConfigError(TwitchIRCError):
    """Raised when the client configuration cannot be loaded or validated."""


__all__ = ["TwitchIRCError", "RefreshAccessTokenError", "ConfigError"]
