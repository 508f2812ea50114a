"""
Tests for the error hierarchy.
"""

import pytest

from twitch_irc.errors import (
    ConfigError,
    ConnectionOpenError,
    InvalidBoolValueError,
    IRCConnectionError,
    MessageParseError,
    MissingComponentError,
    MissingTagError,
    NotConnectedError,
    ReceiveMessageError,
    RefreshAccessTokenError,
    SendMessageError,
    StreamClosedError,
    TwitchIRCError,
    UnparseableLineError,
)


@pytest.mark.parametrize(
    "error",
    [
        MissingTagError("badges"),
        UnparseableLineError(":x"),
        ConnectionOpenError("refused"),
        RefreshAccessTokenError("nope", status=401),
        ConfigError("bad"),
    ],
)
def test_all_errors_share_root(error):
    assert isinstance(error, TwitchIRCError)


def test_data_is_copied():
    context = {"k": "v"}
    error = TwitchIRCError("boom", data=context)
    context["k"] = "changed"
    assert error.data == {"k": "v"}
    assert TwitchIRCError("boom").data == {}


def test_parse_errors_carry_tag_and_value():
    error = InvalidBoolValueError("mod", "2")
    assert isinstance(error, MessageParseError)
    assert error.tag == "mod"
    assert error.value == "2"
    assert error.data == {"tag": "mod", "value": "2"}
    assert "mod" in str(error)


def test_missing_component_keeps_line():
    error = MissingComponentError("source", "001 x :y")
    assert error.component == "source"
    assert error.line == "001 x :y"


@pytest.mark.parametrize(
    ("error", "operation"),
    [
        (NotConnectedError("send"), "send"),
        (ConnectionOpenError("refused"), "connect"),
        (SendMessageError("reset"), "send"),
        (ReceiveMessageError("reset"), "receive"),
        (StreamClosedError(), "receive"),
    ],
)
def test_connection_errors_name_operation(error, operation):
    assert isinstance(error, IRCConnectionError)
    assert error.operation_type == operation
    assert error.data["operation_type"] == operation


def test_refresh_error_status():
    assert RefreshAccessTokenError("timeout").status is None
    assert RefreshAccessTokenError("HTTP 500", status=500).data == {"status": 500}
