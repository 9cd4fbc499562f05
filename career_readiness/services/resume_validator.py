"""Resume gate: reject text that is not a resume before any provider is called."""

from career_readiness.config import RESUME_MIN_SECTIONS, RESUME_MIN_WORDS, RESUME_SECTION_KEYWORDS
from career_readiness.errors import ValidationFailure
from career_readiness.utils.helpers import count_words

TOO_SHORT_MESSAGE = (
    "Invalid document detected. A full Resume content usually contains at least "
    f"{RESUME_MIN_WORDS} words."
)
NOT_A_RESUME_MESSAGE = (
    "Invalid document detected. This looks like a marksheet or single certificate. "
    "Please upload your RESUME only (Experience, Skills, and Education sections)."
)


def validate_resume_content(text: str) -> None:
    """Raise ValidationFailure with a user-facing message when the text fails the gate."""
    if count_words(text) < RESUME_MIN_WORDS:
        raise ValidationFailure(TOO_SHORT_MESSAGE)
    lower = text.lower()
    found = [k for k in RESUME_SECTION_KEYWORDS if k in lower]
    if len(found) < RESUME_MIN_SECTIONS:
        raise ValidationFailure(NOT_A_RESUME_MESSAGE)
