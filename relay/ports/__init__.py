"""Port interfaces (Hexagonal Architecture)."""

from relay.ports.inbound import (
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
from relay.ports.outbound import DispatchResult, FetchedMessage, MessageFetcherPort, WebhookPort

__all__ = [
    "AttachmentRef",
    "AuthorInfo",
    "ChannelOrigin",
    "EmbedAuthorRef",
    "EmbedFieldRef",
    "EmbedRef",
    "InboundEvent",
    "MediaRef",
    "ReplyRef",
    "StickerRef",
    "DispatchResult",
    "FetchedMessage",
    "MessageFetcherPort",
    "WebhookPort",
]
