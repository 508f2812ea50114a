"""Transport layer: frame model, protocol and the aiohttp websocket implementation."""

from .protocols import Frame, FrameKind, TransportProtocol  # noqa: F401
from .websocket import WebSocketTransport  # noqa: F401

__all__ = ["Frame", "FrameKind", "TransportProtocol", "WebSocketTransport"]
