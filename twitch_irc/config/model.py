from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..constants import TWITCH_IRC_WS_URL
from ..irc.models import Capability


class Credentials(BaseModel):
    """Application credentials used to mint chat access tokens.

    Attributes:
        client_id: Twitch application client ID.
        client_secret: Twitch application client secret.
        refresh_token: Long-lived OAuth refresh token.
    """

    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1)
    refresh_token: str = Field(min_length=1)

    def __repr__(self) -> str:
        return f"Credentials(client_id={self.client_id!r}, client_secret='***', refresh_token='***')"


class ClientConfig(BaseModel):
    """Configuration for one chat session.

    Attributes:
        nick: Login name sent with ``NICK``.
        credentials: Credentials used to refresh the access token.
        url: Chat websocket endpoint.
        channels: Channels to join after authentication.
        capabilities: Capabilities requested with ``CAP REQ``.
        auto_pong: Answer server PINGs inside ``next_message``.
    """

    nick: str = Field(min_length=1, max_length=25)
    credentials: Credentials
    url: str = TWITCH_IRC_WS_URL
    channels: list[str] = Field(default_factory=list)
    capabilities: list[Capability] = Field(
        default_factory=lambda: [
            Capability.COMMANDS,
            Capability.MEMBERSHIP,
            Capability.TAGS,
        ]
    )
    auto_pong: bool = True

    @field_validator("nick", mode="before")
    @classmethod
    def normalize_nick(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("channels", mode="before")
    @classmethod
    def validate_channels(cls, v: Any) -> list[str]:
        """Strip whitespace and leading '#', lower-case, drop empties and duplicates.

        Order is preserved so channels are joined in the order configured.
        """
        if isinstance(v, str):
            v = v.split(",")
        if not isinstance(v, list):
            raise ValueError("channels must be a list")
        validated = []
        for c in v:
            if isinstance(c, str):
                stripped = c.strip().lstrip("#").lower()
                if stripped:
                    validated.append(stripped)
        return list(dict.fromkeys(validated))

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build a config from ``TWITCH_*`` environment variables."""
        return cls(
            nick=os.environ.get("TWITCH_NICK", ""),
            credentials=Credentials(
                client_id=os.environ.get("TWITCH_CLIENT_ID", ""),
                client_secret=os.environ.get("TWITCH_CLIENT_SECRET", ""),
                refresh_token=os.environ.get("TWITCH_REFRESH_TOKEN", ""),
            ),
            url=os.environ.get("TWITCH_IRC_WS_URL") or TWITCH_IRC_WS_URL,
            channels=os.environ.get("TWITCH_CHANNELS", ""),
        )
