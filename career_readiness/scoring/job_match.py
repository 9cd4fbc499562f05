"""Match percentage of a job opening against the user's skills."""

from career_readiness.schemas.job import JobOpening
from career_readiness.utils.helpers import SkillsInput, build_skill_index, round_half_up


def calculate_job_match(opening: JobOpening, user_skills: SkillsInput) -> int:
    """Share (0-100) of required skills held at or above the minimum level."""
    if not opening.required_skills:
        return 0
    index = build_skill_index(user_skills)
    met = 0
    for req in opening.required_skills:
        skill = index.get(req.name.strip().lower())
        if skill is not None and skill.level.rank >= req.min_level.rank:
            met += 1
    return round_half_up(met / len(opening.required_skills) * 100)
