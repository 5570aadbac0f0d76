"""Launcher for the Discord → webhook relay."""

import asyncio
import sys

from relay.adapters.discord.bot import create_bot
from relay.adapters.webhook.dispatcher import WebhookDispatcher
from relay.config import RelayConfig


def _log(msg: str):
    print(msg, file=sys.stderr)


async def launch_bot(config: RelayConfig):
    dispatcher = WebhookDispatcher()
    bot = create_bot(dispatcher, forward_edits=config.forward_edits)
    if config.forward_edits:
        _log("Forwarding message edits")
    async with bot:
        await bot.start(config.discord_bot_token)


def main():
    config = RelayConfig.from_env()
    if not config.has_token:
        _log("Error: DISCORD_BOT_TOKEN is not defined in .env file")
        sys.exit(1)
    if not config.has_webhook:
        _log("Warning: N8N_WEBHOOK_URL is not defined; events will be dropped")
    try:
        asyncio.run(launch_bot(config))
    except KeyboardInterrupt:
        _log("Shutting down")


if __name__ == "__main__":
    main()
