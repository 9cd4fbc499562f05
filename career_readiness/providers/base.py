"""Analysis provider contract shared by the remote and rule-based backends."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from career_readiness.schemas.insights import (
    ChatMessage,
    EvidenceResult,
    MarketPulse,
    RepoSummary,
    ResumeAnalysis,
)
from career_readiness.schemas.roadmap import RoadmapStep
from career_readiness.schemas.skill import Skill


class AnalysisProvider(ABC):
    """Capability set behind every AI-backed operation.

    Implementations raise ``AnalysisFailure`` on any error; there are no
    partial results.
    """

    name: str = "Analysis Provider"

    @abstractmethod
    async def extract_skills_from_resume(self, text: str) -> ResumeAnalysis:
        ...

    @abstractmethod
    async def analyze_linkedin_profile(self, text: str) -> EvidenceResult:
        ...

    @abstractmethod
    async def analyze_github_repos(self, repos: Sequence[RepoSummary]) -> EvidenceResult:
        ...

    @abstractmethod
    async def generate_roadmap(self, current_skills: Sequence[Skill], target_role: str) -> List[RoadmapStep]:
        ...

    @abstractmethod
    async def regenerate_step(self, step: RoadmapStep, target_role: str) -> RoadmapStep:
        ...

    @abstractmethod
    async def fetch_live_market_pulse(self, role: str, location: Optional[str] = None) -> MarketPulse:
        ...

    @abstractmethod
    async def get_mentor_advice(self, history: Sequence[ChatMessage], profile_summary: str) -> str:
        ...

    @abstractmethod
    async def generate_cover_letter(self, resume_summary: str, job_title: str, company: str) -> str:
        ...

    @abstractmethod
    async def get_winning_strategy(self, job_title: str, company: str, skills: Sequence[str]) -> str:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
