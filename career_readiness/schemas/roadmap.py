"""Daily roadmap step schema."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RoadmapPhase(str, Enum):
    FOUNDATION = "Foundation"
    SKILL_BUILDING = "Skill Building"
    PROJECTS = "Projects"
    INTERVIEW_READINESS = "Interview Readiness"


class RoadmapStep(BaseModel):
    """One day of the roadmap: four tasks plus the expected artefact."""

    day: int = Field(..., ge=1)
    phase: RoadmapPhase
    primary_goal: str
    learning_task: str
    practice_task: str
    building_task: str
    review_task: str
    expected_output: str
    time_estimate: str
    milestone: Optional[str] = None
    is_completed: bool = False
