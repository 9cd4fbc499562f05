"""Readiness score: skill mastery (70) + evidence (20) + milestone momentum (10).

Pure functions of their inputs. Nothing here raises on odd input; every
divide-by-zero path degrades to a zero contribution.
"""

from typing import Optional, Sequence

from career_readiness.config import DEFAULT_TOTAL_RESOURCES
from career_readiness.schemas.profile import UserProfile
from career_readiness.schemas.results import ScoreBreakdown
from career_readiness.schemas.skill import JobRequirement, JobRole, SkillSource
from career_readiness.scoring.roadmap_progress import TOTAL_ROADMAP_TASKS, count_roadmap_completions
from career_readiness.utils.helpers import SkillsInput, build_skill_index, round_half_up, skill_list

SKILL_POINTS_MAX = 70.0
EVIDENCE_POINTS_MAX = 20.0
MILESTONE_POINTS_MAX = 10.0

GITHUB_SKILL_POINTS = 2.0
RESUME_SKILL_POINTS = 0.5
SOFT_SKILL_BONUS = 2


def skill_mastery_points(user_skills: SkillsInput, requirements: Sequence[JobRequirement]) -> float:
    """Weighted coverage of the requirements, scaled to 0-70.

    Each requirement credits ``min(1, user_rank / required_rank)`` of its
    weight; over-qualification is not rewarded. The result is divided by the
    actual weight sum so unnormalized role definitions still span 0-70.
    """
    index = build_skill_index(user_skills)
    achieved = 0.0
    weight_sum = 0.0
    for req in requirements:
        weight_sum += req.weight
        skill = index.get(req.skill_name.strip().lower())
        if skill is None:
            continue
        ratio = min(1.0, skill.level.rank / req.min_level.rank)
        achieved += req.weight * ratio
    if weight_sum <= 0:
        return 0.0
    return achieved / weight_sum * SKILL_POINTS_MAX


def evidence_points(user_skills: SkillsInput) -> float:
    """Breadth of verified signal over the full skill list, role fit ignored."""
    skills = skill_list(user_skills)
    github = sum(1 for s in skills if s.source == SkillSource.GITHUB)
    resume_or_manual = sum(1 for s in skills if s.source in (SkillSource.RESUME, SkillSource.MANUAL))
    return min(EVIDENCE_POINTS_MAX, github * GITHUB_SKILL_POINTS + resume_or_manual * RESUME_SKILL_POINTS)


def milestone_points(completed_count: int, total_count: int) -> float:
    if total_count <= 0:
        return 0.0
    points = completed_count / total_count * MILESTONE_POINTS_MAX
    return max(0.0, min(MILESTONE_POINTS_MAX, points))


def calculate_readiness_score(
    user_skills: SkillsInput,
    requirements: Sequence[JobRequirement],
    completed_count: int = 0,
    total_count: int = DEFAULT_TOTAL_RESOURCES,
) -> ScoreBreakdown:
    """Score a user's skills against a role's requirements.

    ``user_skills`` may be a list of Skill or a mapping keyed by lowercase
    name. An empty requirement list yields an all-zero breakdown.
    """
    if not requirements:
        return ScoreBreakdown()

    skill = skill_mastery_points(user_skills, requirements)
    evidence = evidence_points(user_skills)
    milestone = milestone_points(completed_count, total_count)

    total = min(100, round_half_up(skill + evidence + milestone))
    soft_skills = sum(1 for s in skill_list(user_skills) if s.is_soft_skill)
    interview = min(100, total + SOFT_SKILL_BONUS * soft_skills)

    return ScoreBreakdown(
        skill_points=round_half_up(skill),
        evidence_points=round_half_up(evidence),
        milestone_points=round_half_up(milestone),
        total=total,
        interview_readiness=interview,
    )


def score_profile(profile: UserProfile, role: JobRole, total_tasks: Optional[int] = None) -> ScoreBreakdown:
    """Dashboard score: roadmap task tokens count as milestone evidence."""
    completed = count_roadmap_completions(profile.completed_resources)
    total = TOTAL_ROADMAP_TASKS if total_tasks is None else total_tasks
    return calculate_readiness_score(profile.current_skills, role.requirements, completed, total)
