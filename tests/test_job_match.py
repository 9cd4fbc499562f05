from career_readiness.schemas import JobOpening, ProficiencyLevel, RequiredSkill
from career_readiness.scoring.job_match import calculate_job_match
from conftest import make_skill

B, I, A = ProficiencyLevel.BASIC, ProficiencyLevel.INTERMEDIATE, ProficiencyLevel.ADVANCED


def _opening(*required):
    return JobOpening(
        id="j1",
        title="Frontend Intern",
        company="Acme",
        required_skills=[RequiredSkill(name=n, min_level=lvl) for n, lvl in required],
    )


def test_share_of_requirements_met():
    opening = _opening(("React", I), ("TypeScript", I), ("Git", B))
    skills = [make_skill("react", A), make_skill("TypeScript", B), make_skill("Git", B)]
    assert calculate_job_match(opening, skills) == 67


def test_no_requirements_is_zero():
    assert calculate_job_match(_opening(), [make_skill("React")]) == 0


def test_full_match():
    assert calculate_job_match(_opening(("React", B)), [make_skill("React", I)]) == 100
