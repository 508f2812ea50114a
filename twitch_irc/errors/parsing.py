"""Errors raised while decoding protocol lines and their tags.

Every class carries the offending tag name and/or raw value so a caller can
log a useful diagnostic without re-parsing the line.
"""

from __future__ import annotations

from .internal import TwitchIRCError


class MessageParseError(TwitchIRCError):
    """Base class for line and tag decoding failures."""

    def __init__(
        self, message: str, *, tag: str | None = None, value: str | None = None
    ) -> None:
        super().__init__(message, data={"tag": tag, "value": value})
        self.tag = tag
        self.value = value


class MissingTagError(MessageParseError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"no value for tag: {tag}", tag=tag)


class InvalidTagError(MessageParseError):
    def __init__(self, value: str, *, tag: str | None = None) -> None:
        super().__init__(f"tag is invalid: {value}", tag=tag, value=value)


class InvalidBadgeError(MessageParseError):
    def __init__(self, value: str) -> None:
        super().__init__(f"badge is invalid: {value}", tag="badges", value=value)


class InvalidBadgeVersionError(MessageParseError):
    def __init__(self, value: str) -> None:
        super().__init__(
            f"badge version is invalid: {value}", tag="badges", value=value
        )


class InvalidBoolValueError(MessageParseError):
    def __init__(self, tag: str, value: str) -> None:
        super().__init__(
            f"value for tag {tag} could not be converted to boolean: {value}",
            tag=tag,
            value=value,
        )


class InvalidIntValueError(MessageParseError):
    def __init__(self, tag: str, value: str) -> None:
        super().__init__(
            f"value for tag {tag} could not be converted to u32: {value}",
            tag=tag,
            value=value,
        )


class MalformedEmoteError(MessageParseError):
    def __init__(self, value: str) -> None:
        super().__init__(f"emote is invalid: {value}", tag="emotes", value=value)


class InvalidUserTypeError(MessageParseError):
    def __init__(self, value: str) -> None:
        super().__init__(
            f"user type {value} is invalid", tag="user-type", value=value
        )


class UnparseableLineError(MessageParseError):
    """The line grammar could not isolate a command token."""

    def __init__(self, line: str) -> None:
        super().__init__(f"line has no command: {line!r}", value=line)
        self.line = line


class MissingComponentError(MessageParseError):
    """A command requires a line component (source, trailing) that is absent."""

    def __init__(self, component: str, line: str) -> None:
        super().__init__(f"line is missing its {component}: {line!r}", value=line)
        self.component = component
        self.line = line


__all__ = [
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
]
