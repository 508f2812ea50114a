"""Error hierarchy for the Twitch IRC client.

Three families share the ``TwitchIRCError`` root:

  MessageParseError        – a protocol line or one of its tags is malformed.
  IRCConnectionError       – the transport could not be opened, written or read.
  RefreshAccessTokenError  – the OAuth refresh exchange failed.
"""

from .connection import (  # noqa: F401
    ConnectionOpenError,
    IRCConnectionError,
    NotConnectedError,
    ReceiveMessageError,
    SendMessageError,
    StreamClosedError,
)
from .internal import ConfigError, RefreshAccessTokenError, TwitchIRCError  # noqa: F401
from .parsing import (  # noqa: F401
    InvalidBadgeError,
    InvalidBadgeVersionError,
    InvalidBoolValueError,
    InvalidIntValueError,
    InvalidTagError,
    InvalidUserTypeError,
    MalformedEmoteError,
    MessageParseError,
    MissingComponentError,
    MissingTagError,
    UnparseableLineError,
)

__all__ = [
    "TwitchIRCError",
    "ConfigError",
    "RefreshAccessTokenError",
    "MessageParseError",
    "MissingTagError",
    "InvalidTagError",
    "InvalidBadgeError",
    "InvalidBadgeVersionError",
    "InvalidBoolValueError",
    "InvalidIntValueError",
    "MalformedEmoteError",
    "InvalidUserTypeError",
    "UnparseableLineError",
    "MissingComponentError",
    "IRCConnectionError",
    "NotConnectedError",
    "ConnectionOpenError",
    "SendMessageError",
    "ReceiveMessageError",
    "StreamClosedError",
]
