"""Per-requirement gap classification for the target role."""

from typing import List, Optional, Sequence

from career_readiness.schemas.results import GapAnalysis, GapStatus
from career_readiness.schemas.skill import JobRequirement, SkillPriority
from career_readiness.utils.helpers import SkillsInput, build_skill_index


def analyze_gaps(requirements: Sequence[JobRequirement], user_skills: SkillsInput) -> List[GapAnalysis]:
    """One GapAnalysis per requirement, in requirement order.

    Missing: no skill with that name. Partial: held below the required
    level. Strong: held at or above it.
    """
    index = build_skill_index(user_skills)
    gaps: List[GapAnalysis] = []
    for req in requirements:
        skill = index.get(req.skill_name.strip().lower())
        if skill is None:
            status = GapStatus.MISSING
        elif skill.level.rank < req.min_level.rank:
            status = GapStatus.PARTIAL
        else:
            status = GapStatus.STRONG
        gaps.append(
            GapAnalysis(
                skill_name=req.skill_name,
                status=status,
                current_level=skill.level if skill else None,
                required_level=req.min_level,
                priority=req.priority,
            )
        )
    return gaps


def top_priority_gap(gaps: Sequence[GapAnalysis]) -> Optional[GapAnalysis]:
    """First Missing + Critical entry in list order."""
    for gap in gaps:
        if gap.status == GapStatus.MISSING and gap.priority == SkillPriority.CRITICAL:
            return gap
    return None


def missing_requirements(requirements: Sequence[JobRequirement], user_skills: SkillsInput) -> List[str]:
    """Names of requirements the user has no skill for."""
    return [g.skill_name for g in analyze_gaps(requirements, user_skills) if g.status == GapStatus.MISSING]
