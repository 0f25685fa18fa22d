# =============================================================================
# core/config.py  -  Runtime Settings
# =============================================================================
#
# Settings come from environment variables (optionally loaded from a .env
# file by the entry points).  Every value has a default, so the server runs
# with no configuration at all:
#
#   REDDIT_BASE_URL         upstream host         (https://www.reddit.com)
#   REDDIT_USER_AGENT       User-Agent header     (reddit-mcp/1.0.0)
#   REDDIT_MIN_INTERVAL_MS  throttle interval     (1000)
#   REDDIT_TIMEOUT_SECONDS  per-request timeout   (15)
#
# The User-Agent header is sent on every request; Reddit blocks or degrades
# clients without one.
# =============================================================================

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.reddit.com"
DEFAULT_USER_AGENT = "reddit-mcp/1.0.0"
DEFAULT_MIN_INTERVAL_MS = 1000
DEFAULT_TIMEOUT_SECONDS = 15.0


def _env_number(name: str, default, cast):
    """Read a numeric env var, falling back to `default` if unset or invalid."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number), using %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r (negative), using %s", name, raw, default)
        return default
    return value


@dataclass(frozen=True)
class Settings:
    """Connection settings shared by every gateway call."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    min_interval_ms: int = DEFAULT_MIN_INTERVAL_MS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def min_interval(self) -> float:
        """Throttle interval in seconds."""
        return self.min_interval_ms / 1000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            base_url=os.environ.get("REDDIT_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            user_agent=os.environ.get("REDDIT_USER_AGENT", DEFAULT_USER_AGENT),
            min_interval_ms=_env_number("REDDIT_MIN_INTERVAL_MS", DEFAULT_MIN_INTERVAL_MS, int),
            timeout_seconds=_env_number("REDDIT_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS, float),
        )
