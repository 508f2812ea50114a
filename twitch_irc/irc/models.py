"""Message and session data models for Twitch IRC."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .tags import Badge, BadgeKind, TagMap, UserType


class SessionState(Enum):
    UNAUTHENTICATED = auto()
    CONNECTED = auto()
    AUTHENTICATED = auto()
    JOINED = auto()


class Capability(str, Enum):
    """Twitch IRC capabilities requested with ``CAP REQ``."""

    COMMANDS = "twitch.tv/commands"
    MEMBERSHIP = "twitch.tv/membership"
    TAGS = "twitch.tv/tags"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Source:
    """Originator of a line: ``nick!host`` or a bare ``host``."""

    host: str
    nick: str | None = None


@dataclass(frozen=True, slots=True)
class UserContext:
    """Chatter details decoded from the tags of a ``PRIVMSG``."""

    username: str
    user_id: str
    user_type: UserType
    is_mod: bool
    is_returning_chatter: bool
    is_first_message: bool
    is_subscriber: bool
    is_turbo: bool
    badges: tuple[Badge, ...] = ()

    @property
    def is_broadcaster(self) -> bool:
        return any(b.kind is BadgeKind.BROADCASTER for b in self.badges)

    @classmethod
    def from_tags(cls, tags: TagMap) -> UserContext:
        badges = tags.get_badges()
        return cls(
            username=tags.get_string("display-name"),
            user_id=tags.get_string("user-id"),
            user_type=tags.get_user_type(),
            is_turbo=tags.get_bool("turbo"),
            is_subscriber=tags.get_bool("subscriber"),
            is_mod=tags.get_bool("mod"),
            is_first_message=tags.get_bool("first-msg"),
            is_returning_chatter=tags.get_bool("returning-chatter"),
            badges=tuple(badges),
        )


@dataclass(frozen=True, slots=True)
class Ping:
    message: str


@dataclass(frozen=True, slots=True)
class Notice:
    source: Source
    message: str


@dataclass(frozen=True, slots=True)
class Part:
    source: Source
    message: str


@dataclass(frozen=True, slots=True)
class Privmsg:
    tags: TagMap
    user_context: UserContext
    source: Source
    message: str
    # Target of the post without the leading '#', when the line names one.
    channel: str | None = field(default=None)


@dataclass(frozen=True, slots=True)
class Numbered:
    number: int
    source: Source
    message: str


@dataclass(frozen=True, slots=True)
class Unknown:
    command: str


IRCMessage = Ping | Notice | Part | Privmsg | Numbered | Unknown


__all__ = [
    "SessionState",
    "Capability",
    "Source",
    "UserContext",
    "Ping",
    "Notice",
    "Part",
    "Privmsg",
    "Numbered",
    "Unknown",
    "IRCMessage",
]
