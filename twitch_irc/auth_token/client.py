"""OAuth refresh-token exchange for Twitch chat credentials."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import aiohttp

from ..constants import TOKEN_REFRESH_TIMEOUT_SECONDS, TWITCH_TOKEN_URL
from ..errors.internal import RefreshAccessTokenError


@dataclass
class TokenResult:
    """Result of a successful refresh.

    Attributes:
        access_token: The new short-lived access token.
        refresh_token: The refresh token to use next time (Twitch may rotate it).
        expires_in: Lifetime of the access token in seconds, if reported.
        scope: Scopes granted to the token.
    """

    access_token: str
    refresh_token: str
    expires_in: int | None = None
    scope: list[str] = field(default_factory=list)


class TokenClient:
    """Client for refreshing Twitch OAuth access tokens.

    Exchanges a long-lived refresh token for a short-lived access token at
    Twitch's token endpoint.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        http_session: aiohttp.ClientSession | None = None,
        token_url: str = TWITCH_TOKEN_URL,
    ):
        """Initialize the token client.

        Args:
            client_id: Twitch application client ID.
            client_secret: Twitch application client secret.
            http_session: HTTP session for making requests. When omitted a
                session is opened for each refresh and closed afterwards.
            token_url: OAuth2 token endpoint.
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.session = http_session
        self.token_url = token_url

    async def refresh(self, refresh_token: str) -> TokenResult:
        """Refresh an access token using the refresh token.

        Args:
            refresh_token: The refresh token to use.

        Returns:
            TokenResult holding the new access token.

        Raises:
            RefreshAccessTokenError: On any HTTP, network or payload failure.
        """
        if self.session is not None:
            return await self._refresh(self.session, refresh_token)
        async with aiohttp.ClientSession() as session:
            return await self._refresh(session, refresh_token)

    async def _refresh(
        self, session: aiohttp.ClientSession, refresh_token: str
    ) -> TokenResult:
        data = {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        timeout = aiohttp.ClientTimeout(total=TOKEN_REFRESH_TIMEOUT_SECONDS)
        try:
            async with session.post(self.token_url, data=data, timeout=timeout) as resp:
                if resp.status != 200:
                    logging.warning(
                        f"❌ Token refresh rejected (status={resp.status})"
                    )
                    raise RefreshAccessTokenError(
                        f"HTTP {resp.status} during token refresh", status=resp.status
                    )
                js = await resp.json()
        except TimeoutError as e:
            raise RefreshAccessTokenError("Token refresh timeout") from e
        except aiohttp.ClientError as e:
            raise RefreshAccessTokenError(
                f"Network error during token refresh: {e}"
            ) from e
        except ValueError as e:
            raise RefreshAccessTokenError(
                f"Invalid JSON in refresh response: {e}", status=200
            ) from e

        if not isinstance(js, dict) or not js.get("access_token"):
            raise RefreshAccessTokenError(
                "Missing access_token in refresh response", status=200
            )
        expires_in = js.get("expires_in")
        logging.info(f"🔑 Token refreshed expires_in={expires_in}")
        return TokenResult(
            access_token=js["access_token"],
            refresh_token=js.get("refresh_token") or refresh_token,
            expires_in=expires_in if isinstance(expires_in, int) else None,
            scope=list(js.get("scope") or []),
        )


__all__ = ["TokenClient", "TokenResult"]
