"""Event normalization: InboundEvent → DirectPayload / ChannelPayload."""

from typing import Iterable, List, Optional

from relay.domain.categorizer import categorize
from relay.domain.flattener import flatten_embeds, flatten_stickers
from relay.domain.models import (
    Attachment,
    ChannelPayload,
    DirectPayload,
    OutboundPayload,
    ReplyResolution,
)
from relay.domain.reply import resolve_reply
from relay.ports.inbound import AttachmentRef, InboundEvent
from relay.ports.outbound import MessageFetcherPort


def categorize_attachment(ref: AttachmentRef) -> Attachment:
    return Attachment(
        id=ref.id,
        url=ref.url,
        proxy_url=ref.proxy_url,
        name=ref.filename,
        content_type=ref.content_type,
        size=ref.size,
        width=ref.width,
        height=ref.height,
        category=categorize(ref.content_type, ref.filename),
        ephemeral=ref.ephemeral,
        description=ref.description,
    )


def categorize_attachments(attachments: Iterable[AttachmentRef]) -> List[Attachment]:
    return [categorize_attachment(a) for a in attachments]


def build_payload(event: InboundEvent, reply: Optional[ReplyResolution] = None) -> OutboundPayload:
    """Assemble the outbound payload for an event whose reply is already resolved.

    Both variants share every field; only ChannelPayload adds the
    channel and guild location.
    """
    common = dict(
        message_id=event.id,
        event_kind=event.kind,
        author=event.author,
        content=event.content,
        created_at=event.created_at,
        edited_at=event.edited_at,
        attachments=tuple(categorize_attachments(event.attachments)),
        stickers=tuple(flatten_stickers(event.stickers)),
        embeds=tuple(flatten_embeds(event.embeds)),
        reply=reply,
    )
    origin = event.origin
    if origin.is_private:
        return DirectPayload(**common)
    return ChannelPayload(
        **common,
        channel_id=origin.channel_id,
        channel_name=origin.channel_name,
        guild_id=origin.guild_id,
        guild_name=origin.guild_name,
    )


async def normalize_event(event: InboundEvent, fetcher: MessageFetcherPort) -> OutboundPayload:
    """Resolve the reply reference (if any) and build the payload."""
    reply = None
    if event.reference is not None:
        reply = await resolve_reply(event.reference, fetcher)
    return build_payload(event, reply)
