"""Outbound payload models: pure Python dataclasses.

Each model knows its own JSON wire shape via ``to_dict()``. Keys are
camelCase because the downstream automation (n8n) consumes them as-is.
"""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from relay.ports.inbound import AuthorInfo


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class Attachment:
    id: str
    url: str
    proxy_url: str
    name: Optional[str]
    content_type: Optional[str]
    size: int
    width: Optional[int]
    height: Optional[int]
    category: str
    ephemeral: bool
    description: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "proxyUrl": self.proxy_url,
            "name": self.name,
            "contentType": self.content_type,
            "size": self.size,
            "width": self.width,
            "height": self.height,
            "category": self.category,
            "ephemeral": self.ephemeral,
            "description": self.description,
        }


@dataclass(frozen=True)
class Sticker:
    id: str
    name: str
    description: Optional[str]
    url: str
    format: str
    tags: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "format": self.format,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class MediaBlock:
    url: Optional[str]
    proxy_url: Optional[str]
    width: Optional[int]
    height: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "proxyUrl": self.proxy_url,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class EmbedAuthor:
    name: Optional[str]
    url: Optional[str]
    icon_url: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "url": self.url, "iconUrl": self.icon_url}


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


@dataclass(frozen=True)
class RichContentBlock:
    type: str
    title: Optional[str]
    description: Optional[str]
    url: Optional[str]
    color: Optional[int]
    timestamp: Optional[datetime]
    image: Optional[MediaBlock]
    video: Optional[MediaBlock]
    thumbnail: Optional[MediaBlock]
    author: Optional[EmbedAuthor]
    fields: Tuple[EmbedField, ...]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "color": self.color,
            "timestamp": _iso(self.timestamp),
        }
        # Media and author blocks are left out entirely when the embed lacks them
        for key in ("image", "video", "thumbnail", "author"):
            block = getattr(self, key)
            if block is not None:
                data[key] = block.to_dict()
        data["fields"] = [f.to_dict() for f in self.fields]
        return data


@dataclass(frozen=True)
class ResolvedReply:
    message_id: str
    channel_id: str
    guild_id: Optional[str]
    author: AuthorInfo
    content: str
    created_at: datetime
    attachment_count: int
    sticker_count: int

    fetch_failed: ClassVar[bool] = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "messageId": self.message_id,
            "channelId": self.channel_id,
            "guildId": self.guild_id,
            "author": {
                "id": self.author.id,
                "username": self.author.username,
                "displayName": self.author.display_name,
                "isBot": self.author.bot,
            },
            "content": self.content,
            "createdAt": _iso(self.created_at),
            "hasAttachments": self.attachment_count > 0,
            "attachmentCount": self.attachment_count,
            "hasStickers": self.sticker_count > 0,
            "stickerCount": self.sticker_count,
            "fetchFailed": False,
        }


@dataclass(frozen=True)
class UnresolvedReply:
    """Reply reference that could not be fetched; ids only."""

    message_id: str
    channel_id: str
    guild_id: Optional[str]

    fetch_failed: ClassVar[bool] = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "messageId": self.message_id,
            "channelId": self.channel_id,
            "guildId": self.guild_id,
            "fetchFailed": True,
        }


ReplyResolution = Union[ResolvedReply, UnresolvedReply]


@dataclass(frozen=True)
class _PayloadBase:
    """Fields shared by both payload variants."""

    message_id: str
    event_kind: str
    author: AuthorInfo
    content: str
    created_at: datetime
    edited_at: Optional[datetime]
    attachments: Tuple[Attachment, ...]
    stickers: Tuple[Sticker, ...]
    embeds: Tuple[RichContentBlock, ...]
    reply: Optional[ReplyResolution]

    type: ClassVar[str] = ""

    def _location(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.type,
            "messageId": self.message_id,
            "eventKind": self.event_kind,
            "userId": self.author.id,
            "username": self.author.username,
            "displayName": self.author.display_name,
            "isBot": self.author.bot,
            "message": self.content,
        }
        data.update(self._location())
        data.update({
            "createdAt": _iso(self.created_at),
            "editedAt": _iso(self.edited_at),
            "attachments": [a.to_dict() for a in self.attachments],
            "stickers": [s.to_dict() for s in self.stickers],
            "embeds": [e.to_dict() for e in self.embeds],
        })
        if self.reply is not None:
            data["replyTo"] = self.reply.to_dict()
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


@dataclass(frozen=True)
class DirectPayload(_PayloadBase):
    type: ClassVar[str] = "direct_message"


@dataclass(frozen=True)
class ChannelPayload(_PayloadBase):
    channel_id: str
    channel_name: Optional[str]
    guild_id: Optional[str]
    guild_name: Optional[str]

    type: ClassVar[str] = "channel_message"

    def _location(self) -> Dict[str, Any]:
        location: Dict[str, Any] = {
            "channelId": self.channel_id,
            "channelName": self.channel_name,
            "guildId": self.guild_id,
        }
        if self.guild_name is not None:
            location["guildName"] = self.guild_name
        return location


OutboundPayload = Union[DirectPayload, ChannelPayload]
