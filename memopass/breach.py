"""Breach lookup against the Pwned Passwords range API (k-anonymity).

Only the first 5 characters of the password's SHA-1 hash are sent over
the network.  The service answers with every known hash suffix sharing
that prefix, and the match is made locally.
"""

import asyncio
import hashlib
import logging

import requests

from memopass import config
from memopass.models import BreachResult

logger = logging.getLogger(__name__)

PREFIX_LENGTH = 5


def hash_parts(password: str) -> tuple[str, str]:
    """Return the (prefix, suffix) split of the uppercase SHA-1 hex digest.

    Lone surrogates are hashed as U+FFFD, the same bytes a browser's
    UTF-8 encoder produces; surrogate pairs are combined first.
    """
    text = password.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    sha1 = hashlib.sha1(text.encode("utf-8")).hexdigest().upper()
    return sha1[:PREFIX_LENGTH], sha1[PREFIX_LENGTH:]


def _fetch_range(prefix: str, url_template: str, timeout: float | None) -> str:
    resp = requests.get(
        url_template.format(prefix=prefix),
        headers={"User-Agent": config.user_agent(), "Add-Padding": "true"},
        timeout=timeout,
    )
    resp.raise_for_status()
    return resp.text


def _find_count(body: str, suffix: str) -> int:
    for line in body.splitlines():
        hash_suffix, sep, count = line.strip().partition(":")
        if sep and hash_suffix.upper() == suffix:
            return int(count)
    return 0


async def check_breach(
    password: str,
    *,
    range_url: str | None = None,
    timeout: float | None = None,
) -> BreachResult:
    """Return how often *password* appears in the breach corpus.

    Never raises: network errors, error statuses and unparseable
    responses are logged and reported as not breached.  No timeout is
    applied unless one is given here or through ``MEMOPASS_TIMEOUT``.
    """
    if not password:
        return BreachResult()

    url_template = range_url or config.range_url()
    if timeout is None:
        timeout = config.timeout()

    try:
        prefix, suffix = hash_parts(password)
        logger.debug("Querying breach range for prefix %s", prefix)
        body = await asyncio.to_thread(_fetch_range, prefix, url_template, timeout)
        count = _find_count(body, suffix)
    except Exception as exc:
        logger.warning("Breach check failed, assuming not breached: %s", exc)
        return BreachResult()

    # Padding records carry a count of 0.
    if count > 0:
        return BreachResult(is_pwned=True, count=count)
    return BreachResult()
