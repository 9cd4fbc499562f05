"""Analysis Service: primary provider first, rule-based fallback on any failure."""

from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from career_readiness.providers.base import AnalysisProvider
from career_readiness.schemas.insights import (
    ChatMessage,
    EvidenceResult,
    MarketPulse,
    RepoSummary,
    ResumeAnalysis,
)
from career_readiness.schemas.roadmap import RoadmapStep
from career_readiness.schemas.skill import Skill
from career_readiness.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class AnalysisService:
    """Two-tier execution over a fixed primary and fallback provider.

    Every call tries the primary first; no health state is kept between
    calls, so a primary outage costs two round-trips on each call. The
    fallback is awaited only after the primary has raised.
    """

    def __init__(self, primary: AnalysisProvider, fallback: AnalysisProvider) -> None:
        self._primary = primary
        self._fallback = fallback

    @property
    def primary(self) -> AnalysisProvider:
        return self._primary

    @property
    def fallback(self) -> AnalysisProvider:
        return self._fallback

    async def execute(self, operation: Callable[[AnalysisProvider], Awaitable[T]]) -> T:
        """Run ``operation`` on the primary; on failure, on the fallback.

        A fallback failure propagates to the caller unchanged.
        """
        try:
            return await operation(self._primary)
        except Exception as e:
            logger.warning(
                "Primary provider (%s) failed: %s. Falling back to %s.",
                self._primary.name,
                e,
                self._fallback.name,
            )
        return await operation(self._fallback)

    async def extract_skills_from_resume(self, text: str) -> ResumeAnalysis:
        return await self.execute(lambda p: p.extract_skills_from_resume(text))

    async def analyze_linkedin_profile(self, text: str) -> EvidenceResult:
        return await self.execute(lambda p: p.analyze_linkedin_profile(text))

    async def analyze_github_repos(self, repos: Sequence[RepoSummary]) -> EvidenceResult:
        return await self.execute(lambda p: p.analyze_github_repos(repos))

    async def generate_roadmap(self, current_skills: Sequence[Skill], target_role: str) -> List[RoadmapStep]:
        return await self.execute(lambda p: p.generate_roadmap(current_skills, target_role))

    async def regenerate_step(self, step: RoadmapStep, target_role: str) -> RoadmapStep:
        return await self.execute(lambda p: p.regenerate_step(step, target_role))

    async def fetch_live_market_pulse(self, role: str, location: Optional[str] = None) -> MarketPulse:
        return await self.execute(lambda p: p.fetch_live_market_pulse(role, location))

    async def get_mentor_advice(self, history: Sequence[ChatMessage], profile_summary: str) -> str:
        return await self.execute(lambda p: p.get_mentor_advice(history, profile_summary))

    async def generate_cover_letter(self, resume_summary: str, job_title: str, company: str) -> str:
        return await self.execute(lambda p: p.generate_cover_letter(resume_summary, job_title, company))

    async def get_winning_strategy(self, job_title: str, company: str, skills: Sequence[str]) -> str:
        return await self.execute(lambda p: p.get_winning_strategy(job_title, company, skills))


def get_analysis_service(
    primary: Optional[AnalysisProvider] = None,
    fallback: Optional[AnalysisProvider] = None,
) -> AnalysisService:
    """
    Build the service (dependency injection).
    Defaults: OpenAI primary, local rule-based fallback.
    """
    from career_readiness.providers.openai_provider import OpenAIAnalysisProvider
    from career_readiness.providers.rule_based import RuleBasedAnalysisProvider

    return AnalysisService(
        primary=primary or OpenAIAnalysisProvider(),
        fallback=fallback or RuleBasedAnalysisProvider(),
    )
