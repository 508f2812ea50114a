"""Protocol definitions for the transport collaborator.

The session only needs to open a streaming connection, write text frames and
read frames back; any object implementing ``TransportProtocol`` can stand in
for the aiohttp websocket transport.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol


class FrameKind(Enum):
    TEXT = auto()
    BINARY = auto()
    OTHER = auto()


@dataclass(frozen=True, slots=True)
class Frame:
    """One frame read from the transport. Only TEXT frames carry IRC lines."""

    kind: FrameKind
    data: Any = None

    @property
    def is_text(self) -> bool:
        return self.kind is FrameKind.TEXT


class TransportProtocol(Protocol):
    """Protocol for the streaming transport used by ``TwitchIRCSession``."""

    async def open(self, url: str) -> Any:
        """Open a connection to ``url`` and return its handle."""
        ...

    async def send(self, handle: Any, text: str) -> None:
        """Write one text frame."""
        ...

    async def receive(self, handle: Any) -> Frame | None:
        """Read one frame; ``None`` means the stream has ended."""
        ...

    async def close(self, handle: Any) -> None:
        """Close the handle, if any, and release transport resources."""
        ...


__all__ = ["Frame", "FrameKind", "TransportProtocol"]
