"""Transport error hierarchy for the chat session.

All exceptions carry the operation that failed (``connect``, ``send`` or
``receive``); the underlying transport exception is chained as ``__cause__``.
"""

from __future__ import annotations

from .internal import TwitchIRCError


class IRCConnectionError(TwitchIRCError):
    """Base exception for transport failures.

    Args:
        message (str): Error message.
        operation_type (str | None): Operation that failed (e.g. 'send').

    Example:
        >>> raise IRCConnectionError("Socket reset", operation_type="receive")
    """

    def __init__(self, message: str, operation_type: str | None = None) -> None:
        super().__init__(message, data={"operation_type": operation_type})
        self.operation_type = operation_type


class NotConnectedError(IRCConnectionError):
    """Raised when an operation needs the transport before ``connect()``."""

    def __init__(self, operation_type: str | None = None) -> None:
        super().__init__("websocket is not connected", operation_type)


class ConnectionOpenError(IRCConnectionError):
    """Raised when the websocket handshake fails."""

    def __init__(self, message: str) -> None:
        super().__init__(
            f"error opening websocket connection: {message}", "connect"
        )


class SendMessageError(IRCConnectionError):
    def __init__(self, message: str) -> None:
        super().__init__(f"error sending message: {message}", "send")


class ReceiveMessageError(IRCConnectionError):
    def __init__(self, message: str) -> None:
        super().__init__(f"error receiving message: {message}", "receive")


class StreamClosedError(IRCConnectionError):
    """Raised when the remote end has closed the stream; stop polling."""

    def __init__(self, message: str = "websocket stream ended") -> None:
        super().__init__(message, "receive")


__all__ = [
    "IRCConnectionError",
    "NotConnectedError",
    "ConnectionOpenError",
    "SendMessageError",
    "ReceiveMessageError",
    "StreamClosedError",
]
