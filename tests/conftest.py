"""Shared fixtures: skills, roles, providers and an in-memory profile repository."""

from types import SimpleNamespace
from typing import List

import pytest

from career_readiness.errors import AnalysisFailure
from career_readiness.providers.rule_based import RuleBasedAnalysisProvider
from career_readiness.schemas import (
    JobRequirement,
    JobRole,
    ProficiencyLevel,
    Skill,
    SkillPriority,
    SkillSource,
)
from career_readiness.services.profile_repository import ProfileRepository
from career_readiness.services.store import InMemoryStore


def make_skill(name, level=ProficiencyLevel.INTERMEDIATE, source=None, soft=False):
    return Skill(name=name, level=level, source=source, is_soft_skill=soft)


def make_req(name, level, weight=0.1, priority=SkillPriority.CRITICAL):
    return JobRequirement(skill_name=name, min_level=level, priority=priority, weight=weight)


@pytest.fixture
def two_skill_role() -> JobRole:
    return JobRole(
        id="frontend-lite",
        title="Frontend Lite",
        requirements=[
            make_req("React", ProficiencyLevel.ADVANCED, weight=0.6),
            make_req("TypeScript", ProficiencyLevel.INTERMEDIATE, weight=0.4),
        ],
    )


@pytest.fixture
def user_skills() -> List[Skill]:
    return [
        make_skill("React", ProficiencyLevel.INTERMEDIATE),
        make_skill("TypeScript", ProficiencyLevel.ADVANCED),
    ]


@pytest.fixture
def repo() -> ProfileRepository:
    return ProfileRepository(InMemoryStore())


@pytest.fixture
def signed_in_repo(repo: ProfileRepository) -> ProfileRepository:
    repo.create("Ada", "ada@example.com")
    return repo


class FailingProvider(RuleBasedAnalysisProvider):
    """Raises AnalysisFailure from every operation and counts calls."""

    def __init__(self, message: str = "backend unavailable", name: str = "Failing Provider") -> None:
        self.calls = 0
        self.message = message
        self.name = name

    async def extract_skills_from_resume(self, text):
        self.calls += 1
        raise AnalysisFailure(self.message, provider=self.name)

    async def get_mentor_advice(self, history, profile_summary):
        self.calls += 1
        raise AnalysisFailure(self.message, provider=self.name)


class CountingProvider(RuleBasedAnalysisProvider):
    """Rule-based behaviour with a call counter."""

    name = "Counting Provider"

    def __init__(self) -> None:
        self.calls = 0

    async def extract_skills_from_resume(self, text):
        self.calls += 1
        return await super().extract_skills_from_resume(text)

    async def get_mentor_advice(self, history, profile_summary):
        self.calls += 1
        return "primary advice"


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()


@pytest.fixture
def counting_provider() -> CountingProvider:
    return CountingProvider()


class FakeCompletions:
    """Stands in for ``client.chat.completions`` and replays canned message contents."""

    def __init__(self, contents) -> None:
        self._contents = list(contents)
        self.requests = []

    async def create(self, **kwargs):
        self.requests.append(kwargs)
        content = self._contents.pop(0)
        if isinstance(content, Exception):
            raise content
        message = SimpleNamespace(content=content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_openai_client(*contents):
    completions = FakeCompletions(contents)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


@pytest.fixture
def github_skill() -> Skill:
    return make_skill("Python", ProficiencyLevel.INTERMEDIATE, source=SkillSource.GITHUB)
