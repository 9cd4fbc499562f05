"""Job opening schema used for match percentages."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from career_readiness.schemas.skill import ProficiencyLevel


class RequiredSkill(BaseModel):
    name: str
    min_level: ProficiencyLevel


class JobOpening(BaseModel):
    id: str
    title: str
    company: str
    location: str = ""
    salary_range: Optional[str] = None
    required_skills: List[RequiredSkill] = Field(default_factory=list)
    apply_url: str = ""
    source: Literal["LinkedIn", "Indeed", "Company", "Wellfound"] = "Company"
    posted_date: str = ""
    tier: Literal["Best Match", "Skill Gap", "Stretch"] = "Best Match"
