"""Evidence reconciliation: merge newly synced skills and projects into a profile."""

from typing import Dict, List, Sequence, Tuple, TypeVar

from career_readiness.schemas.project import Project
from career_readiness.schemas.skill import Skill, normalize_skill_name
from career_readiness.utils.logger import get_logger

logger = get_logger(__name__)

ItemT = TypeVar("ItemT", Skill, Project)


def _merge_by_name(existing: Sequence[ItemT], incoming: Sequence[ItemT]) -> List[ItemT]:
    """Last write wins on the lowercase name; existing order first, new names appended."""
    merged: Dict[str, ItemT] = {}
    for item in existing:
        merged[normalize_skill_name(item.name)] = item
    for item in incoming:
        merged[normalize_skill_name(item.name)] = item
    return list(merged.values())


def merge_evidence(
    existing_skills: Sequence[Skill],
    new_skills: Sequence[Skill],
    existing_projects: Sequence[Project],
    new_projects: Sequence[Project],
) -> Tuple[List[Skill], List[Project]]:
    """
    Merge new evidence over the existing profile.
    A new entry replaces the old one entirely, proficiency included; conflicting
    claims from different sources are not reconciled.
    """
    skills = _merge_by_name(existing_skills, new_skills)
    projects = _merge_by_name(existing_projects, new_projects)
    logger.info(
        "Merged evidence: skills %s+%s -> %s, projects %s+%s -> %s",
        len(existing_skills),
        len(new_skills),
        len(skills),
        len(existing_projects),
        len(new_projects),
        len(projects),
    )
    return skills, projects
