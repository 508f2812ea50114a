"""Twitch IRC chat session.

``TwitchIRCSession`` owns one transport handle and drives the chat protocol
over it: token refresh, PASS/NICK authentication, capability negotiation,
JOIN/PART/PRIVMSG, and a pull-based ``next_message`` that buffers every line
of a websocket frame and answers server PINGs on the caller's behalf.

A session is single-consumer: drive it from one task only.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import AsyncIterator, Iterable
from typing import TYPE_CHECKING, Any

from .auth_token.client import TokenClient
from .constants import TWITCH_IRC_WS_URL
from .errors.connection import (
    ConnectionOpenError,
    NotConnectedError,
    ReceiveMessageError,
    SendMessageError,
    StreamClosedError,
)
from .errors.internal import RefreshAccessTokenError
from .errors.parsing import MessageParseError
from .irc.models import Capability, IRCMessage, Ping, SessionState
from .irc.parser import parse_frame
from .logs.logger import logger
from .transport.protocols import TransportProtocol
from .transport.websocket import WebSocketTransport

if TYPE_CHECKING:  # pragma: no cover
    from .config.model import ClientConfig, Credentials


class TwitchIRCSession:
    """Client side of one Twitch chat connection.

    Attributes:
        credentials (Credentials): Client id/secret and refresh token.
        nick (str): Login name sent with ``NICK``.
        url (str): Chat websocket endpoint.
        auto_pong (bool): Answer PINGs inside ``next_message`` instead of
            returning them.
        strict_tags (bool): Reject tag entries without ``=``; ``False``
            restores the legacy behaviour of mapping them to ``""``.
        transport (TransportProtocol): Opens and drives the connection.
        token_client (TokenClient): Performs the refresh-token exchange.
    """

    def __init__(
        self,
        credentials: Credentials,
        nick: str,
        *,
        url: str = TWITCH_IRC_WS_URL,
        transport: TransportProtocol | None = None,
        token_client: TokenClient | None = None,
        auto_pong: bool = True,
        strict_tags: bool = True,
    ) -> None:
        self.credentials = credentials
        self.nick = nick
        self.url = url
        self.auto_pong = auto_pong
        self.strict_tags = strict_tags
        self.transport: TransportProtocol = transport or WebSocketTransport()
        self.token_client = token_client or TokenClient(
            credentials.client_id, credentials.client_secret
        )
        self._access_token = ""
        self._handle: Any = None
        self._pending: deque[IRCMessage | MessageParseError] = deque()
        self._state = SessionState.UNAUTHENTICATED
        self._channels: set[str] = set()

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        transport: TransportProtocol | None = None,
        token_client: TokenClient | None = None,
    ) -> TwitchIRCSession:
        return cls(
            config.credentials,
            config.nick,
            url=config.url,
            transport=transport,
            token_client=token_client,
            auto_pong=config.auto_pong,
        )

    async def __aenter__(self) -> TwitchIRCSession:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def channels(self) -> frozenset[str]:
        """Channels joined through this session and not parted since."""
        return frozenset(self._channels)

    @property
    def pending(self) -> int:
        """Number of decoded entries waiting to be returned by ``next_message``."""
        return len(self._pending)

    @property
    def is_connected(self) -> bool:
        return self._handle is not None

    async def refresh_access_token(self) -> str:
        """Exchange the refresh token for a new access token.

        The connection state is left untouched. A rotated refresh token
        returned by Twitch replaces the stored one.

        Raises:
            RefreshAccessTokenError: If the exchange fails.
        """
        logger.log_event("token", "refresh_start", level=logging.DEBUG, user=self.nick)
        try:
            result = await self.token_client.refresh(self.credentials.refresh_token)
        except RefreshAccessTokenError as e:
            logger.log_event(
                "token", "refresh_failed", level=logging.ERROR, user=self.nick, error=str(e)
            )
            raise
        self._access_token = result.access_token
        if result.refresh_token and result.refresh_token != self.credentials.refresh_token:
            self.credentials.refresh_token = result.refresh_token
        logger.log_event("token", "refresh_success", user=self.nick)
        return self._access_token

    async def connect(self) -> None:
        """Open the transport and store its handle.

        A second call replaces the stored handle without closing the first.

        Raises:
            ConnectionOpenError: If the websocket handshake fails.
        """
        logger.log_event("irc", "connecting", level=logging.DEBUG, user=self.nick, url=self.url)
        try:
            handle = await self.transport.open(self.url)
        except Exception as e:
            logger.log_event(
                "irc", "connect_failed", level=logging.ERROR, user=self.nick, error=str(e)
            )
            raise ConnectionOpenError(str(e)) from e
        self._handle = handle
        self._state = SessionState.CONNECTED
        logger.log_event("irc", "connected", user=self.nick)

    async def close(self) -> None:
        """Close the transport handle. Buffered messages are kept.

        The transport is closed even without a handle so resources left by a
        failed ``connect()`` are released.
        """
        handle, self._handle = self._handle, None
        self._state = SessionState.UNAUTHENTICATED
        self._channels.clear()
        try:
            await self.transport.close(handle)
        except Exception as e:  # noqa: BLE001
            logging.warning(f"⚠️ WebSocket close error: {str(e)}")
        if handle is not None:
            logger.log_event("irc", "disconnected", user=self.nick)

    async def send_raw(self, line: str) -> None:
        """Send one protocol line as a text frame.

        Raises:
            NotConnectedError: If ``connect()`` has not been called.
            SendMessageError: If the transport write fails.
        """
        if self._handle is None:
            raise NotConnectedError("send")
        try:
            await self.transport.send(self._handle, line)
        except Exception as e:
            logger.log_event(
                "irc", "send_failed", level=logging.ERROR, user=self.nick, error=str(e)
            )
            raise SendMessageError(str(e)) from e

    async def send_pass(self) -> None:
        await self.send_raw(f"PASS oauth:{self._access_token}")

    async def send_nick(self) -> None:
        await self.send_raw(f"NICK {self.nick}")

    async def authenticate(self) -> None:
        """Send PASS then NICK; the first failure aborts the sequence."""
        await self.send_pass()
        await self.send_nick()
        self._state = SessionState.AUTHENTICATED
        logger.log_event("irc", "authenticate", user=self.nick)

    async def request_capabilities(
        self, capabilities: Iterable[Capability | str]
    ) -> None:
        cap_str = " ".join(str(c) for c in capabilities)
        await self.send_raw(f"CAP REQ :{cap_str}")
        logger.log_event("irc", "cap_request", user=self.nick, capabilities=cap_str)

    async def join(self, channel: str) -> None:
        channel = channel.lstrip("#")
        await self.send_raw(f"JOIN #{channel}")
        self._channels.add(channel)
        self._state = SessionState.JOINED
        logger.log_event("irc", "join", user=self.nick, channel=channel)

    async def part(self, channel: str) -> None:
        channel = channel.lstrip("#")
        await self.send_raw(f"PART #{channel}")
        self._channels.discard(channel)
        if not self._channels and self._state is SessionState.JOINED:
            self._state = SessionState.AUTHENTICATED
        logger.log_event("irc", "part", user=self.nick, channel=channel)

    async def pong(self, ping_message: str) -> None:
        await self.send_raw(f"PONG :{ping_message}")

    async def send_chat(self, channel: str, message: str) -> None:
        """Post ``message`` to ``channel``.

        The text is sent as-is; it must not contain CR or LF.
        """
        await self.send_raw(f"PRIVMSG #{channel.lstrip('#')} :{message}")

    privmsg = send_chat

    async def _read_frame(self) -> bool:
        """Read one frame and queue its lines. Returns False for a non-text frame."""
        if self._handle is None:
            raise NotConnectedError("receive")
        try:
            frame = await self.transport.receive(self._handle)
        except Exception as e:
            logger.log_event(
                "irc", "receive_failed", level=logging.ERROR, user=self.nick, error=str(e)
            )
            raise ReceiveMessageError(str(e)) from e

        if frame is None:
            logger.log_event("irc", "stream_ended", user=self.nick)
            raise StreamClosedError()
        if not frame.is_text:
            logger.log_event(
                "irc", "frame_skipped", level=logging.DEBUG, user=self.nick, kind=frame.kind.name
            )
            return False

        results = parse_frame(frame.data, strict_tags=self.strict_tags)
        logger.log_event(
            "irc", "frame_received", level=logging.DEBUG, user=self.nick, lines=len(results)
        )
        self._pending.extend(results)
        return bool(results)

    async def next_message(self) -> IRCMessage | None:
        """Return the next decoded message.

        Buffered entries are returned first without touching the transport.
        Otherwise one frame is read and every line in it is decoded and
        queued in arrival order. With ``auto_pong`` enabled a PING is answered
        and the next entry is derived instead.

        Returns:
            The next message, or None when the frame read carried no lines
            (binary/control frame); call again.

        Raises:
            MessageParseError: The next queued line could not be decoded. The
                session stays usable.
            StreamClosedError: The server closed the stream; stop polling.
            NotConnectedError: ``connect()`` has not been called.
            ReceiveMessageError: Reading from the transport failed.
            SendMessageError: Answering a PING failed.
        """
        while True:
            if not self._pending and not await self._read_frame():
                return None
            entry = self._pending.popleft()
            if isinstance(entry, MessageParseError):
                raise entry
            if self.auto_pong and isinstance(entry, Ping):
                await self.pong(entry.message)
                logger.log_event(
                    "irc", "auto_pong", level=logging.DEBUG, user=self.nick, payload=entry.message
                )
                continue
            return entry

    async def messages(self, *, skip_invalid: bool = True) -> AsyncIterator[IRCMessage]:
        """Iterate over messages until the server closes the stream.

        Args:
            skip_invalid: Log and skip lines that fail to parse instead of
                raising their ``MessageParseError``.
        """
        while True:
            try:
                message = await self.next_message()
            except StreamClosedError:
                return
            except MessageParseError as e:
                if not skip_invalid:
                    raise
                logger.log_event(
                    "irc", "parse_failed", level=logging.WARNING, user=self.nick, error=str(e)
                )
                continue
            if message is not None:
                yield message


__all__ = ["TwitchIRCSession"]
