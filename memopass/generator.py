"""Memorable password generation from a user profile.

Fragments of the profile (name, birth year, security answers) are mixed
with a random symbol and number, shuffled, padded and repaired until the
result is 15-18 characters long and contains upper- and lower-case
letters, a digit and a symbol.
"""

import logging
import random
import secrets
import string

from memopass.models import UserProfile
from memopass.text import (
    FILLER,
    MAX_LENGTH,
    MIN_LENGTH,
    SYMBOLS,
    answer_token,
    has_all_classes,
    has_digit,
    has_lower,
    has_symbol,
    has_upper,
    title_case,
)

logger = logging.getLogger(__name__)


# ── Fragments ──────────────────────────────────────────────────────────────


def extract_fragments(profile: UserProfile, rng: random.Random) -> list[str]:
    """Return the unshuffled fragments for *profile*.

    Empty names, a missing or invalid dob and unanswered questions simply
    contribute nothing.  The symbol and two-digit number are always added.
    """
    parts: list[str] = []

    if profile.first_name:
        parts.append(title_case(profile.first_name[:2]))
    if profile.last_name:
        parts.append(title_case(profile.last_name[-2:]))

    year = profile.birth_year()
    if year is not None:
        parts.append(f"{year % 100:02d}")

    answered = [qa.answer for qa in profile.security_answers if qa.answer.strip()]
    if answered:
        token = title_case(answer_token(answered[0]))
        if token:
            parts.append(token)
    if len(answered) > 1:
        token = answer_token(answered[1]).lower()
        if token:
            parts.append(token)

    parts.append(rng.choice(SYMBOLS))
    parts.append(str(rng.randint(10, 99)))
    return parts


# ── Backfill helpers ───────────────────────────────────────────────────────


def _convert_one(password: str, source: str, convert, rng: random.Random) -> str | None:
    """Convert one random character drawn from *source*.

    Returns None when fewer than two candidates exist, since converting
    the only one would remove that class from the password.
    """
    positions = [i for i, c in enumerate(password) if c in source]
    if len(positions) < 2:
        return None
    i = rng.choice(positions)
    return password[:i] + convert(password[i]) + password[i + 1:]


def _trim(password: str, rng: random.Random) -> str:
    target = rng.randint(MIN_LENGTH, MAX_LENGTH)
    floor = next(
        k for k in range(MIN_LENGTH, len(password) + 1)
        if has_all_classes(password[:k])
    )
    return password[:max(target, floor)]


# ── Generation ─────────────────────────────────────────────────────────────


def synthesize(profile: UserProfile, rng: random.Random | None = None) -> str:
    """Generate a memorable password from *profile*.

    *rng* defaults to :class:`secrets.SystemRandom`; pass a seeded
    :class:`random.Random` for reproducible output.

    A missing letter case is repaired by converting a random letter of
    the opposite case, not a character at any index, and only when two
    or more such letters exist; otherwise a letter is appended.  The
    final trim never drops a required character class.
    """
    rng = rng or secrets.SystemRandom()

    parts = extract_fragments(profile, rng)
    logger.debug("Building password from %d fragments", len(parts))

    rng.shuffle(parts)
    password = "".join(parts)

    while len(password) < MIN_LENGTH:
        password += rng.choice(FILLER)

    if not has_upper(password):
        password = (
            _convert_one(password, string.ascii_lowercase, str.upper, rng)
            or password + rng.choice(string.ascii_uppercase)
        )
    if not has_lower(password):
        password = (
            _convert_one(password, string.ascii_uppercase, str.lower, rng)
            or password + rng.choice(string.ascii_lowercase)
        )
    if not has_digit(password):
        password += rng.choice(string.digits)
    if not has_symbol(password):
        password += rng.choice(SYMBOLS)

    return _trim(password, rng)
