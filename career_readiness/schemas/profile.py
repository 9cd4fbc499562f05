"""User profile aggregate persisted per session."""

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from career_readiness.config import DEFAULT_TARGET_ROLE
from career_readiness.schemas.project import Project
from career_readiness.schemas.skill import Skill


class ApplicationRecord(BaseModel):
    job_id: str
    status: Literal["Applied", "Interviewing", "Rejected", "Offer"] = "Applied"
    applied_date: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class ScoreSnapshot(BaseModel):
    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    score: int = Field(..., ge=0, le=100)


class UserProfile(BaseModel):
    """Aggregate root. Mutated only through ProfileRepository."""

    name: str
    email: str
    target_role: str = DEFAULT_TARGET_ROLE
    current_skills: List[Skill] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    readiness_score: int = Field(default=0, ge=0, le=100)
    interview_readiness: int = Field(default=0, ge=0, le=100)
    streak: int = Field(default=1, ge=0)
    history: List[ScoreSnapshot] = Field(default_factory=list)
    applications: List[ApplicationRecord] = Field(default_factory=list)
    github_user: Optional[str] = None
    linkedin_user: Optional[str] = None
    completed_resources: List[str] = Field(
        default_factory=list, description="Tokens shaped day-<N>-<learn|practice|build|review>"
    )
    is_onboarding_complete: bool = False
