"""memopass -- memorable password generation with breach checking.

Core functions for building a password from a user profile, scoring its
strength, and checking it against known breaches via k-anonymity.
"""

from memopass.breach import check_breach
from memopass.generator import synthesize
from memopass.models import (
    SECURITY_QUESTIONS,
    BreachResult,
    PasswordStrength,
    ProfileError,
    QuestionAnswer,
    UserProfile,
)
from memopass.strength import score_strength

__all__ = [
    "SECURITY_QUESTIONS",
    "BreachResult",
    "PasswordStrength",
    "ProfileError",
    "QuestionAnswer",
    "UserProfile",
    "check_breach",
    "score_strength",
    "synthesize",
]
