"""Password strength checklist."""

from memopass.models import PasswordStrength
from memopass.text import MIN_LENGTH, has_digit, has_lower, has_symbol, has_upper


def score_strength(password: str) -> PasswordStrength:
    """Evaluate *password* against the five strength requirements.

    Length of at least 15, an uppercase letter, a lowercase letter, a
    digit and a symbol each add one point to the score (0-5).
    """
    return PasswordStrength(
        has_length=len(password) >= MIN_LENGTH,
        has_uppercase=has_upper(password),
        has_lowercase=has_lower(password),
        has_number=has_digit(password),
        has_symbol=has_symbol(password),
    )
