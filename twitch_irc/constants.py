"""
Configuration constants for the Twitch IRC client

Each constant can be overridden by setting an environment variable with the same name.
"""

import logging
import os


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Attempts to parse the environment variable as a float. If the variable
    is not set or cannot be parsed, logs a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            logging.warning(
                f"Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Endpoints
TWITCH_IRC_WS_URL = _get_env_str(
    "TWITCH_IRC_WS_URL", "wss://irc-ws.chat.twitch.tv:443"
)  # Chat websocket endpoint
TWITCH_TOKEN_URL = _get_env_str(
    "TWITCH_TOKEN_URL", "https://id.twitch.tv/oauth2/token"
)  # OAuth2 token endpoint used for refresh

# Timeouts
TOKEN_REFRESH_TIMEOUT_SECONDS = _get_env_float(
    "TOKEN_REFRESH_TIMEOUT_SECONDS", 30.0
)  # Total timeout for the refresh exchange
WEBSOCKET_HEARTBEAT_SECONDS = _get_env_float(
    "WEBSOCKET_HEARTBEAT_SECONDS", 0.0
)  # Websocket-level ping interval; 0 disables it (IRC PING/PONG keeps the link alive)

# Config
DEFAULT_CONFIG_FILE = "twitch_irc.conf"  # Used when TWITCH_IRC_CONF_FILE is unset
