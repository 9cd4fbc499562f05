"""Target role catalog. Add a JobRole here to make it selectable."""

from typing import List, Optional

from career_readiness.schemas.skill import JobRequirement, JobRole, ProficiencyLevel, SkillPriority

_B = ProficiencyLevel.BASIC
_I = ProficiencyLevel.INTERMEDIATE
_A = ProficiencyLevel.ADVANCED
_CRIT = SkillPriority.CRITICAL
_IMP = SkillPriority.IMPORTANT


def _req(name: str, level: ProficiencyLevel, priority: SkillPriority, weight: float) -> JobRequirement:
    return JobRequirement(skill_name=name, min_level=level, priority=priority, weight=weight)


# Weights are relative; the frontend set sums to 1.0, the backend set to 1.1.
JOB_ROLES: List[JobRole] = [
    JobRole(
        id="frontend",
        title="Frontend Developer",
        description="Specializes in creating user-facing interfaces using modern web technologies.",
        requirements=[
            _req("React", _A, _CRIT, 0.2),
            _req("TypeScript", _I, _CRIT, 0.15),
            _req("Tailwind CSS", _I, _IMP, 0.1),
            _req("HTML/CSS", _A, _CRIT, 0.1),
            _req("JavaScript", _A, _CRIT, 0.15),
            _req("Communication", _I, _IMP, 0.1),
            _req("Git", _I, _IMP, 0.05),
            _req("Teamwork", _I, _IMP, 0.05),
            _req("Next.js", _I, _IMP, 0.1),
        ],
    ),
    JobRole(
        id="backend",
        title="Backend Developer",
        description="Focuses on server-side logic, database management, and API design.",
        requirements=[
            _req("Node.js", _A, _CRIT, 0.2),
            _req("Express", _A, _CRIT, 0.15),
            _req("MongoDB", _I, _CRIT, 0.15),
            _req("SQL (PostgreSQL)", _I, _IMP, 0.1),
            _req("Problem Solving", _A, _CRIT, 0.15),
            _req("Docker", _B, _IMP, 0.1),
            _req("System Design", _I, _CRIT, 0.15),
            _req("REST APIs", _A, _CRIT, 0.1),
        ],
    ),
]


def role_titles() -> List[str]:
    return [r.title for r in JOB_ROLES]


def find_role(title: Optional[str]) -> JobRole:
    """Role whose title matches (case-insensitive); first role when unknown."""
    wanted = (title or "").strip().lower()
    for role in JOB_ROLES:
        if role.title.lower() == wanted or role.id == wanted:
            return role
    return JOB_ROLES[0]
