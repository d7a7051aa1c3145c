"""Runtime settings, overridable through environment variables."""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_RANGE_URL = "https://api.pwnedpasswords.com/range/{prefix}"
DEFAULT_USER_AGENT = "memopass/0.1"


def range_url() -> str:
    """URL template of the breach-range service; must contain ``{prefix}``."""
    return os.environ.get("MEMOPASS_RANGE_URL") or DEFAULT_RANGE_URL


def user_agent() -> str:
    return os.environ.get("MEMOPASS_USER_AGENT") or DEFAULT_USER_AGENT


def timeout() -> float | None:
    """Request timeout in seconds, or None to wait indefinitely."""
    raw = os.environ.get("MEMOPASS_TIMEOUT")
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid MEMOPASS_TIMEOUT %r", raw)
        return None
    if value <= 0:
        logger.warning("Ignoring non-positive MEMOPASS_TIMEOUT %r", raw)
        return None
    return value
