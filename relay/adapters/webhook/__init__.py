"""Webhook adapter: aiohttp-based payload delivery."""

from relay.adapters.webhook.dispatcher import WebhookDispatcher

__all__ = ["WebhookDispatcher"]
