"""Remote provider: OpenAI chat completions with schema-validated JSON responses."""

import json
from typing import Any, List, Optional, Sequence, Type, TypeVar

from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel, Field, ValidationError

from career_readiness.config import (
    DEFAULT_MARKET_LOCATION,
    GITHUB_MAX_REPOS_FOR_ANALYSIS,
    HTTP_MAX_RETRIES,
    HTTP_TIMEOUT_SECONDS,
    LLM_TEMPERATURE,
    MODEL_NAME,
    OPENAI_API_KEY,
    ROADMAP_MODEL_NAME,
)
from career_readiness.errors import AnalysisFailure
from career_readiness.providers.base import AnalysisProvider
from career_readiness.schemas.insights import (
    ChatMessage,
    EvidenceResult,
    MarketPulse,
    RepoSummary,
    ResumeAnalysis,
)
from career_readiness.schemas.project import Project, ProjectSource
from career_readiness.schemas.roadmap import RoadmapStep
from career_readiness.schemas.skill import ProficiencyLevel, Skill, SkillSource
from career_readiness.utils.helpers import parse_llm_json
from career_readiness.utils.logger import get_logger

logger = get_logger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)

_SKILL_SCHEMA = """{"name": "string", "level": "Basic" | "Intermediate" | "Advanced", "category": "string", "confidence": number 0-1, "is_soft_skill": true or false}"""

_STEP_SCHEMA = """{
  "day": number,
  "phase": "Foundation" | "Skill Building" | "Projects" | "Interview Readiness",
  "primary_goal": "string",
  "learning_task": "string",
  "practice_task": "string",
  "building_task": "string",
  "review_task": "string",
  "expected_output": "string",
  "time_estimate": "string, e.g. 180 mins",
  "milestone": "string or null"
}"""

RESUME_SYSTEM_PROMPT = f"""You are an AI resume parsing system.
Analyze the professional profile below.
1. Extract technical skills AND soft skills.
2. Identify specific projects mentioned.
3. Assign proficiency levels based on depth of experience.
Return only valid JSON matching this schema (no markdown, no code block):
{{
  "skills": [{_SKILL_SCHEMA}],
  "projects": [{{"name": "string", "description": "string", "tech_stack": ["string"]}}],
  "detected_experience_level": "string"
}}"""

LINKEDIN_SYSTEM_PROMPT = f"""You perform signal analysis of LinkedIn bios and summaries.
Even if the text is short, identify the core professional domain and extract associated skills.
Return only valid JSON matching this schema (no markdown, no code block):
{{
  "skills": [{_SKILL_SCHEMA}],
  "experience": [{{"role": "string", "company": "string", "duration": "string"}}]
}}"""

GITHUB_SYSTEM_PROMPT = f"""You analyze GitHub repositories.
Identify technical skills and highlight significant projects.
Return only valid JSON matching this schema (no markdown, no code block):
{{
  "skills": [{_SKILL_SCHEMA}],
  "top_projects": [{{"name": "string", "description": "string", "tech_stack": ["string"]}}]
}}"""

ROADMAP_SYSTEM_PROMPT = f"""Act as a Senior Career Strategist and Mentor.
Generate a standardized daily actionable roadmap.
Phases: Foundation (Days 1-7), Skill Building (Days 8-21), Projects (Days 22-35), Interview Readiness (Days 36-45).
Every day is a mentor-led module with a learning, practice, building and review task.
Set milestone to a brief progress status every 7th day, else null.
Return only valid JSON matching this schema (no markdown, no code block):
{{"steps": [{_STEP_SCHEMA}]}}"""

REGENERATE_SYSTEM_PROMPT = f"""You are a Senior Career Strategist.
Regenerate the given roadmap step to make it more challenging and industry-aligned. Keep its day and phase.
Return only valid JSON matching this schema (no markdown, no code block):
{_STEP_SCHEMA}"""

MARKET_SYSTEM_PROMPT = """You report current hiring trends and market data for a job role.
Return only valid JSON matching this schema (no markdown, no code block):
{
  "hot_skills": ["string"],
  "emerging_trends": ["string"],
  "salary_range": "string",
  "market_outlook": "string",
  "internship_recommendations": ["string"]
}"""

MENTOR_SYSTEM_PROMPT = """You are an elite AI career strategist.
Provide structured, professional advice.
- Use **bold headers** for sections.
- Use bullet points for steps.
- Be clear, professional, and actionable.
- Do not provide marketing fluff."""


class _SkillPayload(BaseModel):
    name: str = Field(..., min_length=1)
    level: ProficiencyLevel
    category: str = "General"
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    is_soft_skill: bool = False


class _ProjectPayload(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    tech_stack: List[str] = Field(default_factory=list)


class _ExperiencePayload(BaseModel):
    role: str
    company: str
    duration: str = ""


class _ResumePayload(BaseModel):
    skills: List[_SkillPayload]
    projects: List[_ProjectPayload] = Field(default_factory=list)
    detected_experience_level: str = "Not specified"


class _LinkedInPayload(BaseModel):
    skills: List[_SkillPayload]
    experience: List[_ExperiencePayload] = Field(default_factory=list)


class _GitHubPayload(BaseModel):
    skills: List[_SkillPayload]
    top_projects: List[_ProjectPayload] = Field(default_factory=list)


class _RoadmapPayload(BaseModel):
    steps: List[RoadmapStep] = Field(..., min_length=1)


class _MarketPulsePayload(BaseModel):
    hot_skills: List[str]
    emerging_trends: List[str]
    salary_range: str
    market_outlook: str
    internship_recommendations: List[str]


def _to_skills(payloads: Sequence[_SkillPayload], source: SkillSource, **overrides: Any) -> List[Skill]:
    return [Skill(**{**p.model_dump(), "source": source, **overrides}) for p in payloads]


def _to_projects(payloads: Sequence[_ProjectPayload], source: ProjectSource) -> List[Project]:
    return [Project(name=p.name, description=p.description, tech_stack=p.tech_stack, source=source) for p in payloads]


class OpenAIAnalysisProvider(AnalysisProvider):
    """Delegates every operation to an OpenAI model; raises AnalysisFailure on any error."""

    name = "OpenAI Provider"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        roadmap_model: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        self._api_key = OPENAI_API_KEY if api_key is None else api_key
        self._model = model or MODEL_NAME
        self._roadmap_model = roadmap_model or ROADMAP_MODEL_NAME
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._api_key:
                raise AnalysisFailure("OPENAI_API_KEY is not set", provider=self.name)
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                timeout=HTTP_TIMEOUT_SECONDS,
                max_retries=HTTP_MAX_RETRIES,
            )
        return self._client

    async def _complete(
        self,
        system_prompt: str,
        user_content: str,
        model: Optional[str] = None,
        json_mode: bool = False,
    ) -> str:
        """Single chat completion; returns the message text."""
        client = self._get_client()
        kwargs: dict = {
            "model": model or self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content},
            ],
            "temperature": LLM_TEMPERATURE,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = await client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            logger.warning("OpenAI request failed: %s", e)
            raise AnalysisFailure(f"OpenAI request failed: {e}", provider=self.name) from e
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            raise AnalysisFailure("OpenAI returned an empty response", provider=self.name)
        return choice.message.content

    async def _complete_json(
        self,
        system_prompt: str,
        user_content: str,
        payload_type: Type[PayloadT],
        model: Optional[str] = None,
    ) -> PayloadT:
        """Chat completion parsed and validated against ``payload_type``."""
        content = await self._complete(system_prompt, user_content, model=model, json_mode=True)
        parsed = parse_llm_json(content)
        if not isinstance(parsed, dict):
            logger.warning("Unparseable JSON from model: %s", content[:200])
            raise AnalysisFailure("Model response is not a JSON object", provider=self.name)
        try:
            return payload_type.model_validate(parsed)
        except ValidationError as e:
            logger.warning("Model response failed %s validation: %s", payload_type.__name__, e)
            raise AnalysisFailure(f"Model response failed validation: {e}", provider=self.name) from e

    async def extract_skills_from_resume(self, text: str) -> ResumeAnalysis:
        data = await self._complete_json(RESUME_SYSTEM_PROMPT, f"Text:\n\n{text[:12000]}", _ResumePayload)
        return ResumeAnalysis(
            skills=_to_skills(data.skills, SkillSource.RESUME),
            projects=_to_projects(data.projects, ProjectSource.MANUAL),
            level=data.detected_experience_level or "Not specified",
        )

    async def analyze_linkedin_profile(self, text: str) -> EvidenceResult:
        data = await self._complete_json(LINKEDIN_SYSTEM_PROMPT, f"Input Profile Text:\n\n{text}", _LinkedInPayload)
        projects = [
            Project(
                name=f"{e.role} at {e.company}",
                description="Experience identified from professional social profile signal.",
                source=ProjectSource.LINKEDIN,
            )
            for e in data.experience
        ]
        return EvidenceResult(skills=_to_skills(data.skills, SkillSource.LINKEDIN), projects=projects)

    async def analyze_github_repos(self, repos: Sequence[RepoSummary]) -> EvidenceResult:
        repo_data = [
            {"name": r.name, "description": r.description, "language": r.language, "topics": r.topics}
            for r in list(repos)[:GITHUB_MAX_REPOS_FOR_ANALYSIS]
        ]
        data = await self._complete_json(
            GITHUB_SYSTEM_PROMPT, f"Repositories: {json.dumps(repo_data)}", _GitHubPayload
        )
        return EvidenceResult(
            skills=_to_skills(data.skills, SkillSource.GITHUB, is_soft_skill=False, confidence=0.95),
            projects=_to_projects(data.top_projects, ProjectSource.GITHUB),
        )

    async def generate_roadmap(self, current_skills: Sequence[Skill], target_role: str) -> List[RoadmapStep]:
        skills_json = json.dumps([s.model_dump(mode="json") for s in current_skills])
        data = await self._complete_json(
            ROADMAP_SYSTEM_PROMPT,
            f"Target role: {target_role}\nPersonalize based on current skills: {skills_json}",
            _RoadmapPayload,
            model=self._roadmap_model,
        )
        return sorted(data.steps, key=lambda s: s.day)

    async def regenerate_step(self, step: RoadmapStep, target_role: str) -> RoadmapStep:
        return await self._complete_json(
            REGENERATE_SYSTEM_PROMPT,
            f"Target role: {target_role}\nOriginal Step: {step.model_dump_json()}",
            RoadmapStep,
        )

    async def fetch_live_market_pulse(self, role: str, location: Optional[str] = None) -> MarketPulse:
        where = location or DEFAULT_MARKET_LOCATION
        data = await self._complete_json(
            MARKET_SYSTEM_PROMPT,
            f"Provide current hiring trends, internship counts, and market data for {role} in {where}.",
            _MarketPulsePayload,
            model=self._roadmap_model,
        )
        return MarketPulse(**data.model_dump(), sources=[])

    async def get_mentor_advice(self, history: Sequence[ChatMessage], profile_summary: str) -> str:
        transcript = json.dumps([m.model_dump() for m in history])
        return await self._complete(
            MENTOR_SYSTEM_PROMPT,
            f"Profile: {profile_summary}\nRecent History: {transcript}",
        )

    async def generate_cover_letter(self, resume_summary: str, job_title: str, company: str) -> str:
        return await self._complete(
            "You write concise, high-impact cover letters.",
            f"Write a cover letter for a {job_title} at {company}. Resume context: {resume_summary}",
        )

    async def get_winning_strategy(self, job_title: str, company: str, skills: Sequence[str]) -> str:
        return await self._complete(
            "You are a hiring strategist.",
            f"Provide a 3-step winning strategy for {job_title} at {company.strip()}. "
            f"User Skills: {', '.join(skills)}",
        )
