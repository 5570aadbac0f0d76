"""Domain layer: pure Python, no framework dependencies."""

from relay.domain.categorizer import CATEGORIES, categorize
from relay.domain.flattener import STICKER_FORMATS, flatten_embeds, flatten_stickers
from relay.domain.models import (
    Attachment,
    ChannelPayload,
    DirectPayload,
    OutboundPayload,
    ResolvedReply,
    RichContentBlock,
    Sticker,
    UnresolvedReply,
)
from relay.domain.normalizer import build_payload, normalize_event
from relay.domain.pipeline import EventRelay
from relay.domain.reply import resolve_reply

__all__ = [
    "CATEGORIES",
    "categorize",
    "STICKER_FORMATS",
    "flatten_embeds",
    "flatten_stickers",
    "Attachment",
    "ChannelPayload",
    "DirectPayload",
    "OutboundPayload",
    "ResolvedReply",
    "RichContentBlock",
    "Sticker",
    "UnresolvedReply",
    "build_payload",
    "normalize_event",
    "EventRelay",
    "resolve_reply",
]
