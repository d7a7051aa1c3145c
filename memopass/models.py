"""Data types shared by the synthesizer, the strength report and the breach check."""

from dataclasses import dataclass, field
from datetime import date

SECURITY_SLOTS = 5
MIN_ANSWERED = 2

SECURITY_QUESTIONS = [
    "What was the name of your first pet?",
    "What city were you born in?",
    "What is your mother's maiden name?",
    "What was the make of your first car?",
    "What was the name of your elementary school?",
    "What is your favorite book?",
    "What street did you grow up on?",
    "What was your childhood nickname?",
]


class ProfileError(ValueError):
    """Raised when a profile is not fit to generate a password from."""


# ── Profile ────────────────────────────────────────────────────────────────


@dataclass
class QuestionAnswer:
    question: str = ""
    answer: str = ""

    def is_complete(self) -> bool:
        return bool(self.question) and bool(self.answer.strip())


@dataclass
class UserProfile:
    """Personal details a password is built from.

    *dob* may be an ISO ``YYYY-MM-DD`` string, a :class:`datetime.date`,
    or empty.  *security_answers* is padded to exactly five slots.
    """

    first_name: str = ""
    last_name: str = ""
    dob: str | date = ""
    security_answers: list[QuestionAnswer] = field(default_factory=list)

    def __post_init__(self):
        answers = list(self.security_answers)
        if len(answers) > SECURITY_SLOTS:
            raise ProfileError(
                f"At most {SECURITY_SLOTS} security answers are allowed, got {len(answers)}"
            )
        answers += [QuestionAnswer() for _ in range(SECURITY_SLOTS - len(answers))]
        self.security_answers = answers

    def answered_count(self) -> int:
        return sum(1 for qa in self.security_answers if qa.is_complete())

    def birth_year(self) -> int | None:
        """Return the year of birth, or None when dob is empty or unparseable."""
        if isinstance(self.dob, date):
            return self.dob.year
        if not self.dob:
            return None
        try:
            return date.fromisoformat(self.dob.strip()).year
        except ValueError:
            return None

    def validate(self) -> None:
        """Check the profile can be submitted for generation.

        Requires at least two slots with both a question and an answer,
        and no question selected twice.
        """
        if self.answered_count() < MIN_ANSWERED:
            raise ProfileError(
                "Please select and answer at least two security questions."
            )
        chosen = [qa.question for qa in self.security_answers if qa.question]
        if len(chosen) != len(set(chosen)):
            raise ProfileError("Each security question can only be used once.")


# ── Results ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BreachResult:
    is_pwned: bool = False
    count: int = 0


@dataclass(frozen=True)
class PasswordStrength:
    has_length: bool
    has_uppercase: bool
    has_lowercase: bool
    has_number: bool
    has_symbol: bool

    @property
    def score(self) -> int:
        return sum([
            self.has_length,
            self.has_uppercase,
            self.has_lowercase,
            self.has_number,
            self.has_symbol,
        ])

    @property
    def label(self) -> str:
        if self.score <= 2:
            return "Weak"
        if self.score <= 4:
            return "Medium"
        return "Strong"
