"""discord.Message → InboundEvent conversion, plus the reply fetcher.

This is the only module that knows discord.py object shapes; the domain
layer only sees the frozen dataclasses from relay.ports.inbound.
"""

from typing import Any, Optional

import discord

from relay.ports.inbound import (
    EVENT_CREATED,
    EVENT_SYSTEM,
    AttachmentRef,
    AuthorInfo,
    ChannelOrigin,
    EmbedAuthorRef,
    EmbedFieldRef,
    EmbedRef,
    InboundEvent,
    MediaRef,
    ReplyRef,
    StickerRef,
)
from relay.ports.outbound import FetchedMessage

_USER_MESSAGE_TYPES = (discord.MessageType.default, discord.MessageType.reply)


def _sid(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def to_author(user: Any) -> AuthorInfo:
    return AuthorInfo(
        id=str(user.id),
        username=user.name,
        display_name=getattr(user, "display_name", None) or user.name,
        bot=bool(getattr(user, "bot", False)),
    )


def to_origin(message: Any) -> ChannelOrigin:
    channel = message.channel
    guild = message.guild
    if guild is None:
        return ChannelOrigin(is_private=True, channel_id=str(channel.id))
    return ChannelOrigin(
        is_private=False,
        channel_id=str(channel.id),
        channel_name=getattr(channel, "name", None),
        guild_id=str(guild.id),
        guild_name=getattr(guild, "name", None),
    )


def to_attachment(attachment: Any) -> AttachmentRef:
    return AttachmentRef(
        id=str(attachment.id),
        url=attachment.url,
        proxy_url=attachment.proxy_url,
        filename=attachment.filename,
        content_type=getattr(attachment, "content_type", None),
        size=attachment.size or 0,
        width=getattr(attachment, "width", None),
        height=getattr(attachment, "height", None),
        ephemeral=bool(getattr(attachment, "ephemeral", False)),
        description=getattr(attachment, "description", None),
    )


def _media(proxy: Any) -> Optional[MediaRef]:
    # discord.py hands back an empty proxy (all attributes None) when unset
    if proxy is None or getattr(proxy, "url", None) is None:
        return None
    return MediaRef(
        url=proxy.url,
        proxy_url=getattr(proxy, "proxy_url", None),
        width=getattr(proxy, "width", None),
        height=getattr(proxy, "height", None),
    )


def _embed_author(proxy: Any) -> Optional[EmbedAuthorRef]:
    if proxy is None or getattr(proxy, "name", None) is None:
        return None
    return EmbedAuthorRef(
        name=proxy.name,
        url=getattr(proxy, "url", None),
        icon_url=getattr(proxy, "icon_url", None),
    )


def to_embed(embed: Any) -> EmbedRef:
    color = embed.color
    return EmbedRef(
        type=embed.type or "rich",
        title=embed.title,
        description=embed.description,
        url=embed.url,
        color=color.value if color is not None else None,
        timestamp=embed.timestamp,
        image=_media(embed.image),
        video=_media(embed.video),
        thumbnail=_media(embed.thumbnail),
        author=_embed_author(embed.author),
        fields=tuple(
            EmbedFieldRef(name=f.name, value=f.value, inline=bool(f.inline))
            for f in embed.fields
        ),
    )


def to_sticker(sticker: Any) -> StickerRef:
    fmt = sticker.format
    return StickerRef(
        id=str(sticker.id),
        name=sticker.name,
        format_code=int(getattr(fmt, "value", fmt)),
        url=str(sticker.url),
        description=getattr(sticker, "description", None),
        tags=tuple(getattr(sticker, "tags", None) or ()),
    )


def to_reply_ref(message: Any) -> Optional[ReplyRef]:
    ref = message.reference
    if ref is None or ref.message_id is None:
        return None
    return ReplyRef(
        message_id=str(ref.message_id),
        channel_id=str(ref.channel_id),
        guild_id=_sid(ref.guild_id),
    )


def event_kind(message: Any) -> str:
    return EVENT_CREATED if message.type in _USER_MESSAGE_TYPES else EVENT_SYSTEM


def to_inbound_event(message: Any, kind: Optional[str] = None) -> InboundEvent:
    """Convert a discord.Message into an InboundEvent."""
    return InboundEvent(
        id=str(message.id),
        author=to_author(message.author),
        origin=to_origin(message),
        content=message.content or "",
        created_at=message.created_at,
        kind=kind or event_kind(message),
        edited_at=message.edited_at,
        reference=to_reply_ref(message),
        attachments=tuple(to_attachment(a) for a in message.attachments),
        embeds=tuple(to_embed(e) for e in message.embeds),
        stickers=tuple(to_sticker(s) for s in message.stickers),
    )


def to_fetched_message(message: Any) -> FetchedMessage:
    return FetchedMessage(
        id=str(message.id),
        author=to_author(message.author),
        content=message.content or "",
        created_at=message.created_at,
        attachment_count=len(message.attachments),
        sticker_count=len(message.stickers),
    )


class DiscordMessageFetcher:
    """MessageFetcherPort implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def fetch_message(self, channel_id: str, message_id: str) -> FetchedMessage:
        channel = self._client.get_channel(int(channel_id))
        if channel is None:
            channel = await self._client.fetch_channel(int(channel_id))
        message = await channel.fetch_message(int(message_id))
        return to_fetched_message(message)
