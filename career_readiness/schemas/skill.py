"""Skill, requirement and role schemas."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ProficiencyLevel(str, Enum):
    """Ordered proficiency; compare with ``rank``, never by string."""

    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @property
    def rank(self) -> int:
        return LEVEL_VALUES[self]


LEVEL_VALUES = {
    ProficiencyLevel.BASIC: 1,
    ProficiencyLevel.INTERMEDIATE: 2,
    ProficiencyLevel.ADVANCED: 3,
}


class SkillPriority(str, Enum):
    CRITICAL = "Critical"
    IMPORTANT = "Important"
    NICE_TO_HAVE = "Nice-to-have"


class SkillSource(str, Enum):
    RESUME = "Resume"
    GITHUB = "GitHub"
    MANUAL = "Manual"
    LINKEDIN = "LinkedIn"


def normalize_skill_name(name: str) -> str:
    """Identity key shared by skills, projects and requirements."""
    return (name or "").strip().lower()


class Skill(BaseModel):
    """A skill claim with the evidence source it came from."""

    name: str = Field(..., min_length=1, description="Display name, e.g. 'React'")
    level: ProficiencyLevel = Field(..., description="Claimed proficiency")
    category: str = Field(default="General", description="Grouping such as Frontend or Soft Skill")
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    is_soft_skill: bool = Field(default=False)
    source: Optional[SkillSource] = Field(default=None, description="Where the claim was synced from")

    @property
    def key(self) -> str:
        return normalize_skill_name(self.name)


class JobRequirement(BaseModel):
    """One skill demanded by a role. Weights are relative, not normalized."""

    skill_name: str
    min_level: ProficiencyLevel
    priority: SkillPriority
    weight: float = Field(..., ge=0.0)


class JobRole(BaseModel):
    """Target role; requirement order only matters for display."""

    id: str
    title: str
    description: str = ""
    requirements: List[JobRequirement] = Field(default_factory=list)
