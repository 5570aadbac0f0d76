"""RelayBot: thin discord.Client that forwards messages to EventRelay."""

import sys

import discord

from relay.adapters.discord.convert import DiscordMessageFetcher, to_inbound_event
from relay.domain.pipeline import EventRelay
from relay.ports.inbound import EVENT_EDITED
from relay.ports.outbound import WebhookPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def relay_intents() -> discord.Intents:
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.dm_messages = True
    intents.message_content = True
    return intents


class RelayBot(discord.Client):
    """Discord client that converts messages and delegates to EventRelay.

    Bot-authored messages (including our own) never reach the pipeline.
    """

    def __init__(self, dispatcher: WebhookPort, forward_edits: bool = False, **discord_kwargs):
        super().__init__(intents=relay_intents(), **discord_kwargs)
        self._webhook = dispatcher
        self._forward_edits = forward_edits
        self.relay = EventRelay(DiscordMessageFetcher(self), dispatcher)

    async def on_ready(self):
        _log(f"[discord] logged in as {self.user}")
        if not self._webhook.is_configured:
            _log("[discord] warning: N8N_WEBHOOK_URL is not set, events will be dropped")

    def _should_ignore(self, message: discord.Message) -> bool:
        return message.author.bot or (self.user is not None and message.author == self.user)

    async def on_message(self, message: discord.Message):
        if self._should_ignore(message):
            return
        await self.relay.handle(to_inbound_event(message))

    async def on_message_edit(self, before: discord.Message, after: discord.Message):
        if not self._forward_edits or self._should_ignore(after):
            return
        # Embed unfurls also fire edits; only forward real content changes
        if before.content == after.content:
            return
        await self.relay.handle(to_inbound_event(after, kind=EVENT_EDITED))


def create_bot(dispatcher: WebhookPort, forward_edits: bool = False) -> RelayBot:
    return RelayBot(dispatcher=dispatcher, forward_edits=forward_edits)
