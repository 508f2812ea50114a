"""Configuration package: pydantic models and the JSON file loader."""

from .loader import config_path, load_config  # noqa: F401
from .model import ClientConfig, Credentials  # noqa: F401

__all__ = ["ClientConfig", "Credentials", "config_path", "load_config"]
