import pytest

from career_readiness.errors import ValidationFailure
from career_readiness.services.resume_validator import (
    NOT_A_RESUME_MESSAGE,
    TOO_SHORT_MESSAGE,
    validate_resume_content,
)

FILLER = " ".join(["word"] * 160)


def test_short_text_rejected():
    with pytest.raises(ValidationFailure) as excinfo:
        validate_resume_content("Experience Education Skills " * 10)
    assert str(excinfo.value) == TOO_SHORT_MESSAGE


def test_long_text_without_sections_rejected():
    with pytest.raises(ValidationFailure) as excinfo:
        validate_resume_content(FILLER + " Marks obtained in semester exams")
    assert str(excinfo.value) == NOT_A_RESUME_MESSAGE


def test_one_section_is_not_enough():
    with pytest.raises(ValidationFailure):
        validate_resume_content(FILLER + " Education")


def test_resume_accepted():
    validate_resume_content(FILLER + " Work EXPERIENCE at Acme. Technical Skills: React.")
