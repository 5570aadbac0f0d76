"""Outbound ports: interfaces for external system adapters."""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from relay.ports.inbound import AuthorInfo

if TYPE_CHECKING:
    from relay.domain.models import OutboundPayload


@dataclass
class DispatchResult:
    """Outcome of a single webhook delivery attempt."""

    success: bool
    status: Optional[int] = None
    error: Optional[str] = None
    skipped: bool = False  # no destination configured


@dataclass(frozen=True)
class FetchedMessage:
    """Snapshot of a previously sent message, as returned by a fetcher."""

    id: str
    author: AuthorInfo
    content: str
    created_at: datetime
    attachment_count: int = 0
    sticker_count: int = 0


@runtime_checkable
class MessageFetcherPort(Protocol):
    """Interface for looking up an earlier message by id."""

    async def fetch_message(self, channel_id: str, message_id: str) -> FetchedMessage: ...


@runtime_checkable
class WebhookPort(Protocol):
    """Interface for delivering a payload downstream."""

    @property
    def is_configured(self) -> bool: ...

    async def dispatch(self, payload: "OutboundPayload") -> DispatchResult: ...
