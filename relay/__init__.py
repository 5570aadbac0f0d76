"""Discord → webhook relay package."""

from relay.config import CONFIG, RelayConfig

__all__ = ["CONFIG", "RelayConfig"]
