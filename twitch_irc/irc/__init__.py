"""IRC subsystem package.

Contains the tag decoding, line grammar and message models for Twitch chat.
"""

from .models import (  # noqa: F401
    Capability,
    IRCMessage,
    Notice,
    Numbered,
    Part,
    Ping,
    Privmsg,
    SessionState,
    Source,
    Unknown,
    UserContext,
)
from .parser import parse_frame, parse_message, parse_source  # noqa: F401
from .tags import Badge, BadgeKind, Emote, TagMap, UserType, parse_tags  # noqa: F401

__all__ = [
    "Badge",
    "BadgeKind",
    "Capability",
    "Emote",
    "IRCMessage",
    "Notice",
    "Numbered",
    "Part",
    "Ping",
    "Privmsg",
    "SessionState",
    "Source",
    "TagMap",
    "Unknown",
    "UserContext",
    "UserType",
    "parse_frame",
    "parse_message",
    "parse_source",
    "parse_tags",
]
