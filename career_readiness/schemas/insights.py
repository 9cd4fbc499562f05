"""Provider outputs: extraction results, market pulse, chat messages, repo summaries."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from career_readiness.schemas.project import Project
from career_readiness.schemas.skill import Skill


class ResumeAnalysis(BaseModel):
    """Skills, projects and seniority detected in resume text."""

    skills: List[Skill] = Field(default_factory=list)
    level: str = Field(default="Not specified", description="Detected experience level, e.g. Junior")
    projects: List[Project] = Field(default_factory=list)


class EvidenceResult(BaseModel):
    """Skills and projects synced from LinkedIn or GitHub."""

    skills: List[Skill] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)


class MarketPulse(BaseModel):
    hot_skills: List[str] = Field(default_factory=list)
    emerging_trends: List[str] = Field(default_factory=list)
    salary_range: str = ""
    market_outlook: str = ""
    internship_recommendations: List[str] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)


class ChatMessage(BaseModel):
    role: Literal["user", "model"]
    text: str


class RepoSummary(BaseModel):
    """Subset of a GitHub repository record used for skill analysis."""

    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    html_url: Optional[str] = None
    stargazers_count: int = 0
