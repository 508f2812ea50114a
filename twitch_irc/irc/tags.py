"""Typed access to the IRCv3 tag blob of a Twitch chat line.

The raw blob (``badges=broadcaster/1;mod=0;user-type=``) is decoded into a
``TagMap`` of plain strings. Conversions to booleans, integers, badges, emotes
and user roles go through explicit accessors that raise a specific
``MessageParseError`` instead of returning a partial value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..errors.parsing import (
    InvalidBadgeError,
    InvalidBadgeVersionError,
    InvalidBoolValueError,
    InvalidIntValueError,
    InvalidTagError,
    InvalidUserTypeError,
    MalformedEmoteError,
    MissingTagError,
)

U32_MAX = 2**32 - 1
_U32_PATTERN = re.compile(r"\+?[0-9]+", re.ASCII)


def parse_u32(text: str) -> int | None:
    if not _U32_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= U32_MAX else None


class UserType(Enum):
    """Global role of the chatter, from the ``user-type`` tag."""

    USER = ""
    ADMIN = "admin"
    GLOBAL_MOD = "global_mod"
    STAFF = "staff"

    @classmethod
    def parse(cls, value: str) -> UserType:
        try:
            return cls(value)
        except ValueError:
            raise InvalidUserTypeError(value) from None


class BadgeKind(Enum):
    ADMIN = "admin"
    BITS = "bits"
    BROADCASTER = "broadcaster"
    MODERATOR = "moderator"
    SUBSCRIBER = "subscriber"
    STAFF = "staff"
    TURBO = "turbo"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> BadgeKind:
        if name == cls.OTHER.value:
            return cls.OTHER
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Badge:
    """A ``name/version`` entry of the ``badges`` tag.

    ``name`` keeps the raw badge name so badges folded into ``BadgeKind.OTHER``
    (``premium``, ``vip``, ...) can still be told apart.
    """

    kind: BadgeKind
    version: int
    name: str = ""

    @classmethod
    def parse(cls, value: str) -> Badge:
        name, sep, raw_version = value.partition("/")
        if not sep:
            raise InvalidBadgeError(value)
        # Only the first version segment is significant.
        version = parse_u32(raw_version.split("/", 1)[0])
        if version is None:
            raise InvalidBadgeVersionError(value)
        return cls(BadgeKind.from_name(name), version, name)


@dataclass(frozen=True, slots=True)
class Emote:
    """An ``id:start-end`` entry of the ``emotes`` tag (inclusive positions)."""

    id: str
    start: int
    end: int

    @classmethod
    def parse(cls, value: str) -> Emote:
        emote_id, sep, span = value.partition(":")
        if not sep:
            raise MalformedEmoteError(value)
        raw_start, sep, raw_end = span.partition("-")
        if not sep:
            raise MalformedEmoteError(value)
        start = parse_u32(raw_start)
        end = parse_u32(raw_end)
        if start is None or end is None:
            raise MalformedEmoteError(value)
        return cls(emote_id, start, end)


class TagMap(dict[str, str]):
    """Tag name to raw tag value.

    A key present without a value maps to ``""``; absence and emptiness are
    never conflated. The map is read-only once built, so messages holding it
    stay immutable and hashable.
    """

    def _read_only(self, *args: object, **kwargs: object) -> None:
        raise TypeError("TagMap is read-only")

    __setitem__ = __delitem__ = _read_only
    clear = pop = popitem = setdefault = update = _read_only
    __ior__ = _read_only

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(frozenset(self.items()))

    def __reduce__(self) -> tuple[type[TagMap], tuple[dict[str, str]]]:
        return (self.__class__, (dict(self),))

    def get_string(self, key: str) -> str:
        try:
            return self[key]
        except KeyError:
            raise MissingTagError(key) from None

    def get_bool(self, key: str) -> bool:
        value = self.get_string(key)
        if value == "1":
            return True
        if value == "0":
            return False
        raise InvalidBoolValueError(key, value)

    def get_int(self, key: str) -> int:
        value = self.get_string(key)
        parsed = parse_u32(value)
        if parsed is None:
            raise InvalidIntValueError(key, value)
        return parsed

    def get_int_list(self, key: str) -> list[int]:
        value = self.get_string(key)
        result: list[int] = []
        for item in value.split(","):
            parsed = parse_u32(item)
            if parsed is None:
                raise InvalidIntValueError(key, value)
            result.append(parsed)
        return result

    def get_badges(self) -> list[Badge]:
        value = self.get_string("badges")
        return [Badge.parse(item) for item in value.split(",") if item]

    def get_emotes(self) -> list[Emote]:
        value = self.get_string("emotes")
        return [Emote.parse(item) for item in value.split(",") if item]

    def get_user_type(self) -> UserType:
        value = self.get_string("user-type")
        try:
            return UserType.parse(value)
        except InvalidUserTypeError as e:
            raise InvalidTagError(value, tag="user-type") from e


def parse_tags(blob: str, *, strict: bool = True) -> TagMap:
    """Split a tag blob (without the leading ``@``) into a ``TagMap``.

    Each ``;``-separated entry is split on its first ``=``. In strict mode an
    entry without ``=`` (or with an empty key) raises ``InvalidTagError``; with
    ``strict=False`` the legacy behaviour applies and such an entry maps to
    the empty string.
    """
    tags: dict[str, str] = {}
    for entry in blob.split(";"):
        key, sep, value = entry.partition("=")
        if strict and (not key or not sep):
            raise InvalidTagError(entry)
        if key:
            tags[key] = value
    return TagMap(tags)


def get_bool(tags: TagMap, key: str) -> bool:
    return tags.get_bool(key)


def get_int(tags: TagMap, key: str) -> int:
    return tags.get_int(key)


def get_int_list(tags: TagMap, key: str) -> list[int]:
    return tags.get_int_list(key)


def get_badges(tags: TagMap) -> list[Badge]:
    return tags.get_badges()


def get_emotes(tags: TagMap) -> list[Emote]:
    return tags.get_emotes()


def get_user_type(tags: TagMap) -> UserType:
    return tags.get_user_type()


__all__ = [
    "U32_MAX",
    "parse_u32",
    "UserType",
    "BadgeKind",
    "Badge",
    "Emote",
    "TagMap",
    "parse_tags",
    "get_bool",
    "get_int",
    "get_int_list",
    "get_badges",
    "get_emotes",
    "get_user_type",
]
