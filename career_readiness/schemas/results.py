"""Derived values: score breakdown and gap analysis. Never persisted as truth."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from career_readiness.schemas.skill import ProficiencyLevel, SkillPriority


class ScoreBreakdown(BaseModel):
    skill_points: int = Field(default=0, ge=0, le=70)
    evidence_points: int = Field(default=0, ge=0, le=20)
    milestone_points: int = Field(default=0, ge=0, le=10)
    total: int = Field(default=0, ge=0, le=100)
    interview_readiness: int = Field(default=0, ge=0, le=100)


class GapStatus(str, Enum):
    STRONG = "Strong"
    PARTIAL = "Partial"
    MISSING = "Missing"


class GapAnalysis(BaseModel):
    skill_name: str
    status: GapStatus
    current_level: Optional[ProficiencyLevel] = Field(default=None, description="None when the skill is absent")
    required_level: ProficiencyLevel
    priority: SkillPriority
