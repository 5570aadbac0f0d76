"""Adapters: Discord client wiring and webhook delivery."""
