"""Tests for logging_config.py module."""

import logging

import colorlog
import pytest

from twitch_irc.logging_config import LoggerConfigurator, log_structured_error


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


class TestLoggerConfigurator:
    """Tests for LoggerConfigurator."""

    def test_level_from_debug_env(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "yes")
        assert LoggerConfigurator().resolve_level() == logging.DEBUG

    def test_level_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        assert LoggerConfigurator().resolve_level() == logging.INFO

    def test_level_override(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        assert LoggerConfigurator({"level": logging.WARNING}).resolve_level() == logging.WARNING

    def test_formatter_colors_errors(self):
        formatter = LoggerConfigurator().build_formatter()
        assert isinstance(formatter, colorlog.ColoredFormatter)
        record = logging.LogRecord(
            name="test", level=logging.ERROR, pathname="", lineno=0, msg="boom", args=(), exc_info=None
        )
        formatted = formatter.format(record)
        assert "\033[31m" in formatted  # Red color code
        assert "ERROR" in formatted
        assert "boom" in formatted

    def test_configure_replaces_root_handlers(self, restore_root_logger, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        root = restore_root_logger
        stale = logging.NullHandler()
        root.addHandler(stale)

        handler = LoggerConfigurator().configure()

        assert root.handlers == [handler]
        assert isinstance(handler.formatter, colorlog.ColoredFormatter)
        assert root.level == logging.INFO
        assert logging.getLogger("aiohttp").level == logging.INFO


def test_log_structured_error(caplog):
    caplog.set_level(logging.ERROR)
    log_structured_error(
        "network",
        "send failed",
        exception=ConnectionResetError("reset"),
        context={"channel": "xyz"},
    )
    message = caplog.records[-1].getMessage()
    assert message == (
        "[NETWORK] send failed | Exception: ConnectionResetError: reset | Context: channel=xyz"
    )
