"""IRC line grammar for Twitch chat.

A line is split into four components::

    @<tags> :<source(<nick>!<host>)> <command> :<parameters>

e.g. ``@mod=0;badges= :abc!abc@abc.tmi.twitch.tv PRIVMSG #xyz :hello world``.
The command keyword then selects which ``IRCMessage`` variant is built.
"""

from __future__ import annotations

import re

from ..errors.parsing import (
    MessageParseError,
    MissingComponentError,
    UnparseableLineError,
)
from .models import (
    IRCMessage,
    Notice,
    Numbered,
    Part,
    Ping,
    Privmsg,
    Source,
    Unknown,
    UserContext,
)
from .tags import TagMap, parse_tags, parse_u32

MESSAGE_PATTERN = re.compile(
    r"(?:@(?P<tags>\S+)\s)?"
    r"(?::(?P<source>\S+)\s)?"
    r"(?P<command>[^:]+[^:\s])"
    r"(?:\s:(?P<parameters>.*))?"
)
# Only CRLF and LF end a line; other Unicode line breaks are chat content.
LINE_SEPARATOR = re.compile(r"\r?\n")


def parse_source(source_component: str) -> Source:
    if "!" in source_component:
        nick, host = source_component.split("!", 1)
        return Source(host=host, nick=nick)
    return Source(host=source_component)


def _require(value: str | None, component: str, line: str) -> str:
    if value is None:
        raise MissingComponentError(component, line)
    return value


def _privmsg_channel(command: str) -> str | None:
    parts = command.split()
    if len(parts) < 2:
        return None
    return parts[1].lstrip("#").lower()


def parse_message(line: str, *, strict_tags: bool = True) -> IRCMessage:
    """Decode one protocol line (no trailing newline) into a message.

    Raises:
        MessageParseError: The line or one of the tags it requires is
            malformed. No partial message is ever returned.
    """
    match = MESSAGE_PATTERN.fullmatch(line)
    if match is None:
        raise UnparseableLineError(line)

    raw_tags = match.group("tags")
    tags = parse_tags(raw_tags, strict=strict_tags) if raw_tags is not None else TagMap()
    raw_source = match.group("source")
    source = parse_source(raw_source) if raw_source is not None else None
    command = match.group("command")
    parameters = match.group("parameters")

    if command.startswith("PING"):
        return Ping(_require(parameters, "trailing parameter", line))

    if command.startswith("PRIVMSG"):
        user_context = UserContext.from_tags(tags)
        return Privmsg(
            tags=tags,
            user_context=user_context,
            source=_require_source(source, line),
            message=_require(parameters, "trailing parameter", line),
            channel=_privmsg_channel(command),
        )

    if command.startswith("NOTICE"):
        return Notice(
            source=_require_source(source, line),
            message=_require(parameters, "trailing parameter", line),
        )

    if command.startswith("PART"):
        return Part(
            source=_require_source(source, line),
            message=_require(parameters, "trailing parameter", line),
        )

    number = parse_u32(command.split(" ", 1)[0])
    if number is not None:
        return Numbered(
            number=number,
            source=_require_source(source, line),
            message=_require(parameters, "trailing parameter", line),
        )

    return Unknown(command=command)


def _require_source(source: Source | None, line: str) -> Source:
    if source is None:
        raise MissingComponentError("source", line)
    return source


def parse_frame(
    text: str, *, strict_tags: bool = True
) -> list[IRCMessage | MessageParseError]:
    """Decode every line of a websocket text frame, in order.

    A line that fails to parse yields its error in place of a message so the
    remaining lines are still delivered. Blank lines are skipped.
    """
    results: list[IRCMessage | MessageParseError] = []
    for line in LINE_SEPARATOR.split(text):
        if not line.strip():
            continue
        try:
            results.append(parse_message(line, strict_tags=strict_tags))
        except MessageParseError as e:
            results.append(e)
    return results


__all__ = ["MESSAGE_PATTERN", "parse_source", "parse_message", "parse_frame"]
