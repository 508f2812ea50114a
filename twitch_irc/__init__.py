"""Client for the Twitch chat protocol (IRC over websocket).

Decodes tagged IRC lines into typed messages and drives the session:
token refresh, authentication, capability negotiation and keep-alive.
"""

from .client import TwitchIRCSession  # noqa: F401
from .config import ClientConfig, Credentials, load_config  # noqa: F401
from .errors import (  # noqa: F401
    IRCConnectionError,
    MessageParseError,
    RefreshAccessTokenError,
    TwitchIRCError,
)
from .irc import (  # noqa: F401
    Capability,
    IRCMessage,
    Notice,
    Numbered,
    Part,
    Ping,
    Privmsg,
    parse_message,
)

__all__ = [
    "TwitchIRCSession",
    "ClientConfig",
    "Credentials",
    "load_config",
    "TwitchIRCError",
    "MessageParseError",
    "IRCConnectionError",
    "RefreshAccessTokenError",
    "Capability",
    "IRCMessage",
    "Notice",
    "Numbered",
    "Part",
    "Ping",
    "Privmsg",
    "parse_message",
]
