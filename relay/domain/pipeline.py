"""EventRelay: per-event pipeline, no framework dependencies.

Ties normalization to delivery. One call to ``handle`` per inbound
event; calls share no state, so concurrent events never wait on each
other and their webhook deliveries may land in any order.
"""

import sys
from typing import Optional

from relay.domain.normalizer import normalize_event
from relay.ports.inbound import InboundEvent
from relay.ports.outbound import DispatchResult, MessageFetcherPort, WebhookPort

_PREVIEW_CHARS = 80


def _log(msg: str):
    print(msg, file=sys.stderr)


def _preview(content: str) -> str:
    text = " ".join(content.split())
    if len(text) <= _PREVIEW_CHARS:
        return text
    return text[: _PREVIEW_CHARS - 3] + "..."


class EventRelay:
    """Normalize inbound events and hand them to the webhook."""

    def __init__(self, fetcher: MessageFetcherPort, dispatcher: WebhookPort):
        self._fetcher = fetcher
        self._dispatcher = dispatcher

    async def handle(self, event: InboundEvent) -> Optional[DispatchResult]:
        """Process one event. Returns None when the event was filtered out."""
        if event.author.bot:
            return None

        author = event.author.username
        if event.origin.is_private:
            _log(f"[relay] DM from {author}: {_preview(event.content)}")
        else:
            _log(
                f"[relay] message in ch={event.origin.channel_id} by {author}: "
                f"{_preview(event.content)}"
            )

        payload = await normalize_event(event, self._fetcher)
        result = await self._dispatcher.dispatch(payload)
        if result.success:
            _log(f"[relay] forwarded {payload.type} {event.id} from {author}")
        return result
