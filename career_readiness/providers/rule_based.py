"""Offline keyword-matching provider. Deterministic and never fails."""

import re
from typing import Dict, List, Optional, Sequence

from career_readiness.schemas.insights import (
    ChatMessage,
    EvidenceResult,
    MarketPulse,
    RepoSummary,
    ResumeAnalysis,
)
from career_readiness.schemas.project import Project, ProjectSource
from career_readiness.schemas.roadmap import RoadmapPhase, RoadmapStep
from career_readiness.schemas.skill import ProficiencyLevel, Skill, SkillSource
from career_readiness.providers.base import AnalysisProvider
from career_readiness.utils.logger import get_logger

logger = get_logger(__name__)

# Skill → keyword variants, matched as whole words (case-insensitive).
# Compound spellings such as "ReactJS" need their own entry.
SKILL_KEYWORDS: Dict[str, List[str]] = {
    "React": ["react", "reactjs", "react.js", "jsx", "hooks", "redux", "frontend"],
    "TypeScript": ["typescript", "ts", "typing"],
    "JavaScript": ["javascript", "js", "es6"],
    "Node.js": ["node", "node.js", "nodejs", "express", "expressjs", "express.js", "backend"],
    "Tailwind CSS": ["tailwind", "tailwindcss", "css", "styling"],
    "MongoDB": ["mongodb", "nosql", "db"],
    "SQL": ["sql", "postgres", "postgresql", "mysql", "sqlite"],
    "Git": ["git", "github", "version control"],
    "Next.js": ["nextjs", "next.js", "ssr", "ssg"],
}

SOFT_SKILL_KEYWORDS: Dict[str, List[str]] = {
    "Communication": ["communication", "presentation", "public speaking"],
    "Teamwork": ["teamwork", "collaboration", "cross-functional"],
    "Problem Solving": ["problem solving", "problem-solving", "troubleshooting"],
}

SENIOR_SKILL_THRESHOLD = 5


def _compile(variants: List[str]) -> re.Pattern:
    alternatives = "|".join(re.escape(v) for v in sorted(variants, key=len, reverse=True))
    return re.compile(r"(?<![\w.])(?:" + alternatives + r")(?!\w)", re.IGNORECASE)


_TECH_PATTERNS = [(name, _compile(v)) for name, v in SKILL_KEYWORDS.items()]
_SOFT_PATTERNS = [(name, _compile(v)) for name, v in SOFT_SKILL_KEYWORDS.items()]

_PHASE_PLAN = [
    (1, RoadmapPhase.FOUNDATION, "Core Fundamentals", "Phase 1 Initialization"),
    (8, RoadmapPhase.SKILL_BUILDING, "Close Critical Gaps", "Phase 2 Skill Sprint"),
    (22, RoadmapPhase.PROJECTS, "Portfolio Build", "Phase 3 Proof of Work"),
    (36, RoadmapPhase.INTERVIEW_READINESS, "Interview Drills", "Phase 4 Launch"),
]


def detect_skills(text: str, source: SkillSource) -> List[Skill]:
    """Keyword scan; every hit is credited at Intermediate."""
    body = " ".join((text or "").split())
    found: List[Skill] = []
    for name, pattern in _TECH_PATTERNS:
        if pattern.search(body):
            found.append(
                Skill(name=name, level=ProficiencyLevel.INTERMEDIATE, category="Technical", source=source)
            )
    for name, pattern in _SOFT_PATTERNS:
        if pattern.search(body):
            found.append(
                Skill(
                    name=name,
                    level=ProficiencyLevel.INTERMEDIATE,
                    category="Soft Skill",
                    is_soft_skill=True,
                    source=source,
                )
            )
    return found


class RuleBasedAnalysisProvider(AnalysisProvider):
    """Availability floor used when the remote backend is down."""

    name = "Local Rule-Based Engine"

    async def extract_skills_from_resume(self, text: str) -> ResumeAnalysis:
        skills = detect_skills(text, SkillSource.RESUME)
        level = "Senior" if len(skills) > SENIOR_SKILL_THRESHOLD else "Junior"
        logger.info("Rule-based resume scan found %s skills (%s)", len(skills), level)
        return ResumeAnalysis(skills=skills, level=level, projects=[])

    async def analyze_linkedin_profile(self, text: str) -> EvidenceResult:
        return EvidenceResult(skills=detect_skills(text, SkillSource.LINKEDIN), projects=[])

    async def analyze_github_repos(self, repos: Sequence[RepoSummary]) -> EvidenceResult:
        skills: Dict[str, Skill] = {}
        projects: List[Project] = []
        for repo in repos:
            if repo.language:
                skills.setdefault(
                    repo.language.lower(),
                    Skill(
                        name=repo.language,
                        level=ProficiencyLevel.INTERMEDIATE,
                        category="Programming Language",
                        source=SkillSource.GITHUB,
                    ),
                )
            project_fields = dict(
                name=repo.name,
                description=repo.description or "",
                url=repo.html_url,
                tech_stack=[repo.language] if repo.language else [],
                source=ProjectSource.GITHUB,
                stars=repo.stargazers_count,
            )
            if repo.id:
                project_fields["id"] = repo.id
            projects.append(Project(**project_fields))
        return EvidenceResult(skills=list(skills.values()), projects=projects)

    async def generate_roadmap(self, current_skills: Sequence[Skill], target_role: str) -> List[RoadmapStep]:
        known = ", ".join(s.name for s in current_skills[:3]) or "your current toolkit"
        steps = []
        for day, phase, goal, milestone in _PHASE_PLAN:
            steps.append(
                RoadmapStep(
                    day=day,
                    phase=phase,
                    primary_goal=goal,
                    learning_task=f"Focus on {phase.value.lower()} topics for {target_role} (Local Fallback)",
                    practice_task=f"Review documentation for {target_role}",
                    building_task=f"Extend a small build that uses {known}",
                    review_task="Assess baseline competency",
                    expected_output=f"{phase.value} checkpoint notes",
                    time_estimate="120 mins",
                    milestone=milestone,
                )
            )
        return steps

    async def regenerate_step(self, step: RoadmapStep, target_role: str) -> RoadmapStep:
        return step.model_copy(update={"primary_goal": f"{step.primary_goal} (Regenerated for {target_role})"})

    async def fetch_live_market_pulse(self, role: str, location: Optional[str] = None) -> MarketPulse:
        return MarketPulse(
            hot_skills=["JavaScript", "Communication"],
            emerging_trends=["Remote Work"],
            salary_range="Competitive",
            market_outlook="Positive (Local Heuristics)",
            internship_recommendations=[],
            sources=[],
        )

    async def get_mentor_advice(self, history: Sequence[ChatMessage], profile_summary: str) -> str:
        return "Keep practicing daily! You're doing great work."

    async def generate_cover_letter(self, resume_summary: str, job_title: str, company: str) -> str:
        return f"I am writing to express my interest in the {job_title} position at {company}..."

    async def get_winning_strategy(self, job_title: str, company: str, skills: Sequence[str]) -> str:
        return "1. Optimize your resume. 2. Network. 3. Be yourself."
