"""Schema exports."""

from .insights import ChatMessage, EvidenceResult, MarketPulse, RepoSummary, ResumeAnalysis
from .job import JobOpening, RequiredSkill
from .profile import ApplicationRecord, ScoreSnapshot, UserProfile
from .project import Project, ProjectSource, new_project_id
from .results import GapAnalysis, GapStatus, ScoreBreakdown
from .roadmap import RoadmapPhase, RoadmapStep
from .skill import (
    LEVEL_VALUES,
    JobRequirement,
    JobRole,
    ProficiencyLevel,
    Skill,
    SkillPriority,
    SkillSource,
    normalize_skill_name,
)

__all__ = [
    "ApplicationRecord",
    "ChatMessage",
    "EvidenceResult",
    "GapAnalysis",
    "GapStatus",
    "JobOpening",
    "JobRequirement",
    "JobRole",
    "LEVEL_VALUES",
    "MarketPulse",
    "ProficiencyLevel",
    "Project",
    "ProjectSource",
    "RepoSummary",
    "RequiredSkill",
    "ResumeAnalysis",
    "RoadmapPhase",
    "RoadmapStep",
    "ScoreBreakdown",
    "ScoreSnapshot",
    "Skill",
    "SkillPriority",
    "SkillSource",
    "UserProfile",
    "new_project_id",
]
