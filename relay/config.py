"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_WEBHOOK_TIMEOUT_SECONDS = 10.0

_PLACEHOLDER_TOKENS = ("", "your_token_here")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_timeout(name: str) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return DEFAULT_WEBHOOK_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0:
        _stderr_print(
            f"Invalid {name}={raw!r}, falling back to {DEFAULT_WEBHOOK_TIMEOUT_SECONDS}"
        )
        return DEFAULT_WEBHOOK_TIMEOUT_SECONDS
    return value


_token = os.getenv("DISCORD_BOT_TOKEN", "").strip()
if _token in _PLACEHOLDER_TOKENS:
    _token = ""

CONFIG = {
    # Discord
    "discord_bot_token": _token,
    # Webhook destination, empty means every event is dropped with a warning
    "webhook_url": (os.getenv("N8N_WEBHOOK_URL") or os.getenv("WEBHOOK_URL", "")).strip(),
    "webhook_auth_token": os.getenv("WEBHOOK_AUTH_TOKEN", "").strip(),
    "webhook_timeout_seconds": _env_timeout("WEBHOOK_TIMEOUT_SECONDS"),
    # Message edits are only forwarded when explicitly enabled
    "forward_edits": _env_flag("FORWARD_EDITS"),
}


@dataclass
class RelayConfig:
    """Typed view of CONFIG for the launcher."""

    discord_bot_token: str = ""
    webhook_url: str = ""
    webhook_auth_token: str = ""
    webhook_timeout_seconds: float = DEFAULT_WEBHOOK_TIMEOUT_SECONDS
    forward_edits: bool = False

    @property
    def has_token(self) -> bool:
        return self.discord_bot_token not in _PLACEHOLDER_TOKENS

    @property
    def has_webhook(self) -> bool:
        return bool(self.webhook_url)

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """Create RelayConfig from the environment-derived CONFIG."""
        return cls(
            discord_bot_token=CONFIG["discord_bot_token"],
            webhook_url=CONFIG["webhook_url"],
            webhook_auth_token=CONFIG["webhook_auth_token"],
            webhook_timeout_seconds=CONFIG["webhook_timeout_seconds"],
            forward_edits=CONFIG["forward_edits"],
        )
