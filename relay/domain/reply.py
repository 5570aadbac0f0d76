"""Reply resolution: fetch the replied-to message or degrade to its ids.

The fetch is the only place in normalization that touches the network.
Whatever goes wrong there (deleted message, missing permission, HTTP
error) ends up as an UnresolvedReply, never as an exception.
"""

import sys

from relay.domain.models import ReplyResolution, ResolvedReply, UnresolvedReply
from relay.ports.inbound import ReplyRef
from relay.ports.outbound import MessageFetcherPort


def _log(msg: str):
    print(msg, file=sys.stderr)


async def resolve_reply(reference: ReplyRef, fetcher: MessageFetcherPort) -> ReplyResolution:
    """Fetch the referenced message and summarize it.

    The original's own attachments and stickers are only counted, never
    expanded, so chained replies cannot recurse.
    """
    try:
        original = await fetcher.fetch_message(reference.channel_id, reference.message_id)
    except Exception as e:
        _log(
            f"[reply] warning: could not fetch message {reference.message_id} "
            f"in ch={reference.channel_id}: {e}"
        )
        return UnresolvedReply(
            message_id=reference.message_id,
            channel_id=reference.channel_id,
            guild_id=reference.guild_id,
        )

    return ResolvedReply(
        message_id=reference.message_id,
        channel_id=reference.channel_id,
        guild_id=reference.guild_id,
        author=original.author,
        content=original.content,
        created_at=original.created_at,
        attachment_count=original.attachment_count,
        sticker_count=original.sticker_count,
    )
