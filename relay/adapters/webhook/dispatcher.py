"""Webhook dispatcher using aiohttp: implements WebhookPort.

One POST per payload. No retries: success and failure are both final
for the event, and failures are reported through DispatchResult.
"""

import sys
from typing import Dict

import aiohttp

from relay.config import CONFIG
from relay.domain.models import OutboundPayload
from relay.ports.outbound import DispatchResult


def _log(msg: str):
    print(msg, file=sys.stderr)


class WebhookDispatcher:
    """POST normalized payloads to the configured webhook URL."""

    @property
    def is_configured(self) -> bool:
        return bool(CONFIG["webhook_url"])

    @staticmethod
    def _headers() -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = CONFIG.get("webhook_auth_token")
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def dispatch(self, payload: OutboundPayload) -> DispatchResult:
        url = CONFIG["webhook_url"]
        if not url:
            _log("[webhook] warning: N8N_WEBHOOK_URL is not set, dropping event")
            return DispatchResult(success=False, skipped=True)

        timeout = aiohttp.ClientTimeout(total=CONFIG["webhook_timeout_seconds"])
        try:
            # Lone surrogates in message text are sent as "?"
            body = payload.to_json().encode("utf-8", errors="replace")
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(url, data=body, headers=self._headers()) as resp:
                    if resp.status >= 300:
                        text = await resp.text()
                        _log(f"[webhook] error: HTTP {resp.status} for {payload.message_id}: {text[:200]}")
                        return DispatchResult(
                            success=False, status=resp.status, error=f"HTTP {resp.status}: {text}"
                        )
                    return DispatchResult(success=True, status=resp.status)
        except Exception as e:
            _log(f"[webhook] error: delivery of {payload.message_id} failed: {e}")
            return DispatchResult(success=False, error=str(e))
