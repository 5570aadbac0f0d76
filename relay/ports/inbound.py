"""Inbound port: platform-agnostic chat event representation.

Everything here is immutable: the Discord adapter builds one InboundEvent
per message and nothing downstream mutates it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

EVENT_CREATED = "created"
EVENT_EDITED = "edited"
EVENT_SYSTEM = "system"


@dataclass(frozen=True)
class AuthorInfo:
    id: str
    username: str
    display_name: str
    bot: bool = False


@dataclass(frozen=True)
class ChannelOrigin:
    """Where the event happened. Private = DM, no guild."""

    is_private: bool
    channel_id: str
    channel_name: Optional[str] = None
    guild_id: Optional[str] = None
    guild_name: Optional[str] = None


@dataclass(frozen=True)
class AttachmentRef:
    id: str
    url: str
    proxy_url: str
    filename: Optional[str]
    content_type: Optional[str] = None
    size: int = 0
    width: Optional[int] = None
    height: Optional[int] = None
    ephemeral: bool = False
    description: Optional[str] = None


@dataclass(frozen=True)
class MediaRef:
    url: Optional[str]
    proxy_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class EmbedAuthorRef:
    name: Optional[str]
    url: Optional[str] = None
    icon_url: Optional[str] = None


@dataclass(frozen=True)
class EmbedFieldRef:
    name: str
    value: str
    inline: bool = False


@dataclass(frozen=True)
class EmbedRef:
    type: str = "rich"  # rich, image, video, gifv, article, link
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    color: Optional[int] = None
    timestamp: Optional[datetime] = None
    image: Optional[MediaRef] = None
    video: Optional[MediaRef] = None
    thumbnail: Optional[MediaRef] = None
    author: Optional[EmbedAuthorRef] = None
    fields: Tuple[EmbedFieldRef, ...] = ()


@dataclass(frozen=True)
class StickerRef:
    id: str
    name: str
    format_code: int
    url: str
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ReplyRef:
    """Pointer to the message this event replies to."""

    message_id: str
    channel_id: str
    guild_id: Optional[str] = None


@dataclass(frozen=True)
class InboundEvent:
    id: str
    author: AuthorInfo
    origin: ChannelOrigin
    content: str
    created_at: datetime
    kind: str = EVENT_CREATED
    edited_at: Optional[datetime] = None
    reference: Optional[ReplyRef] = None
    attachments: Tuple[AttachmentRef, ...] = ()
    embeds: Tuple[EmbedRef, ...] = ()
    stickers: Tuple[StickerRef, ...] = ()
