"""aiohttp websocket transport for Twitch IRC."""

from __future__ import annotations

import logging

import aiohttp

from ..constants import WEBSOCKET_HEARTBEAT_SECONDS
from .protocols import Frame, FrameKind

_END_OF_STREAM = (
    aiohttp.WSMsgType.CLOSE,
    aiohttp.WSMsgType.CLOSING,
    aiohttp.WSMsgType.CLOSED,
)


class WebSocketTransport:
    """Opens websocket connections with an aiohttp ``ClientSession``.

    Attributes:
        session (aiohttp.ClientSession | None): HTTP session used for
            ``ws_connect``. Created lazily and owned by the transport when
            none is supplied.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self.session = session
        self._owns_session = session is None

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
            self._owns_session = True
        return self.session

    async def open(self, url: str) -> aiohttp.ClientWebSocketResponse:
        session = self._ensure_session()
        heartbeat = WEBSOCKET_HEARTBEAT_SECONDS or None
        try:
            ws = await session.ws_connect(url, heartbeat=heartbeat, autoping=True)
        except Exception:
            await self._release_session()
            raise
        logging.debug(f"🔌 WebSocket handshake completed url={url}")
        return ws

    async def send(self, handle: aiohttp.ClientWebSocketResponse, text: str) -> None:
        await handle.send_str(text)

    async def receive(self, handle: aiohttp.ClientWebSocketResponse) -> Frame | None:
        msg = await handle.receive()
        if msg.type == aiohttp.WSMsgType.TEXT:
            return Frame(FrameKind.TEXT, msg.data)
        if msg.type == aiohttp.WSMsgType.BINARY:
            return Frame(FrameKind.BINARY, msg.data)
        if msg.type == aiohttp.WSMsgType.ERROR:
            # aiohttp reports a failed read as a message carrying the exception.
            if isinstance(msg.data, Exception):
                raise msg.data
            raise aiohttp.ClientError(f"websocket read failed: {msg.data!r}")
        if msg.type in _END_OF_STREAM:
            logging.debug(
                f"🔌 WebSocket stream ended type={msg.type.name} close_code={handle.close_code}"
            )
            return None
        return Frame(FrameKind.OTHER, msg.data)

    async def close(self, handle: aiohttp.ClientWebSocketResponse | None) -> None:
        try:
            if handle is not None and not handle.closed:
                await handle.close()
        finally:
            await self._release_session()

    async def _release_session(self) -> None:
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None


__all__ = ["WebSocketTransport"]
