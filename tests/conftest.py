from __future__ import annotations

import pytest

from tests.fixtures.irc_fixtures import FakeTransport
from twitch_irc.client import TwitchIRCSession
from twitch_irc.config.model import Credentials


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id="cid", client_secret="csec", refresh_token="rtok")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def session(credentials: Credentials, transport: FakeTransport) -> TwitchIRCSession:
    return TwitchIRCSession(
        credentials, "bytebot", url="wss://example.test", transport=transport
    )
