"""String helpers shared by the generator and the strength report."""

import re
import string

SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
FILLER = string.ascii_lowercase + string.digits
MIN_LENGTH = 15
MAX_LENGTH = 18


def title_case(text: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return text[:1].upper() + text[1:].lower()


def answer_token(answer: str) -> str:
    """Return up to three ASCII alphanumerics from *answer*."""
    return re.sub(r"[^a-zA-Z0-9]", "", answer)[:3]


# ASCII only: "É".isupper() is true but does not count as an uppercase letter here.

def has_upper(text: str) -> bool:
    return any(c in string.ascii_uppercase for c in text)


def has_lower(text: str) -> bool:
    return any(c in string.ascii_lowercase for c in text)


def has_digit(text: str) -> bool:
    return any(c in string.digits for c in text)


def has_symbol(text: str) -> bool:
    return any(c in SYMBOLS for c in text)


def has_all_classes(text: str) -> bool:
    return has_upper(text) and has_lower(text) and has_digit(text) and has_symbol(text)
