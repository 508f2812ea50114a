"""Configuration loading utilities."""

from __future__ import annotations

import json
import logging
import os

from pydantic import ValidationError

from ..constants import DEFAULT_CONFIG_FILE
from ..errors.internal import ConfigError
from .model import ClientConfig


def config_path(path: str | os.PathLike[str] | None = None) -> str:
    if path is not None:
        return os.fspath(path)
    return os.environ.get("TWITCH_IRC_CONF_FILE", DEFAULT_CONFIG_FILE)


def load_config(path: str | os.PathLike[str] | None = None) -> ClientConfig:
    """Load and validate the client configuration from a JSON file.

    Args:
        path: Path to the configuration file. Defaults to the
            ``TWITCH_IRC_CONF_FILE`` environment variable.

    Returns:
        The validated ClientConfig.

    Raises:
        ConfigError: If the file is missing, not JSON, or fails validation.
    """
    resolved = config_path(path)
    try:
        with open(resolved, encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {resolved}", data={"path": resolved}) from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file is not valid JSON: {e}", data={"path": resolved}) from e

    try:
        config = ClientConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration: {e.error_count()} error(s)",
            data={"path": resolved, "errors": e.errors()},
        ) from e
    logging.info(
        f"✅ Configuration loaded nick={config.nick} channels={len(config.channels)}"
    )
    return config
