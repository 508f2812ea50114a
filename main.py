#!/usr/bin/env python3
"""
Main entry point for the Twitch IRC client

Connects with the configured credentials, joins the configured channels and
logs chat traffic until the server closes the stream.
"""

import asyncio
import logging
import os
import sys

from twitch_irc.client import TwitchIRCSession
from twitch_irc.config import ClientConfig, load_config
from twitch_irc.errors import ConfigError, TwitchIRCError
from twitch_irc.irc.models import Notice, Privmsg
from twitch_irc.logging_config import LoggerConfigurator, log_structured_error
from twitch_irc.logs.logger import logger


def get_configuration() -> ClientConfig:
    """Load the config file, falling back to TWITCH_* environment variables."""
    if os.environ.get("TWITCH_IRC_CONF_FILE") or os.path.exists("twitch_irc.conf"):
        return load_config()
    try:
        return ClientConfig.from_env()
    except ValueError as e:
        raise ConfigError(f"No config file and incomplete environment: {e}") from e


async def run(config: ClientConfig) -> None:
    session = TwitchIRCSession.from_config(config)
    await session.refresh_access_token()
    async with session:
        await session.request_capabilities(config.capabilities)
        await session.authenticate()
        for channel in config.channels:
            await session.join(channel)

        async for message in session.messages():
            if isinstance(message, Privmsg):
                logger.log_event(
                    "chat",
                    "privmsg",
                    user=config.nick,
                    channel=message.channel,
                    author=message.user_context.username,
                    message=message.message,
                )
            elif isinstance(message, Notice):
                logger.log_event("chat", "notice", level=logging.WARNING, message=message.message)


async def main() -> None:
    """Main function"""
    try:
        logger.log_event("app", "start")
        config = get_configuration()
        await run(config)
    except ConfigError as e:
        logger.log_event("app", "config_error", level=logging.ERROR, error=str(e))
        sys.exit(1)
    except TwitchIRCError as e:
        log_structured_error("irc", "Session ended with an error", e, e.data)
        sys.exit(1)
    finally:
        logger.log_event("app", "shutdown")


if __name__ == "__main__":
    LoggerConfigurator().configure()

    # Simple config check mode
    if len(sys.argv) > 1 and sys.argv[1] == "--check-config":
        try:
            cfg = get_configuration()
            logging.info(f"✅ Config check passed - nick={cfg.nick} channels={len(cfg.channels)}")
            sys.exit(0)
        except ConfigError as e:
            logging.error(f"❌ Config check failed: {e}")
            sys.exit(1)

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logging.info("Application terminated by user")
        sys.exit(0)
