import asyncio
import json

import httpx
import openai
import pytest

from career_readiness.errors import AnalysisFailure
from career_readiness.providers.openai_provider import OpenAIAnalysisProvider
from career_readiness.schemas import (
    ChatMessage,
    ProficiencyLevel,
    ProjectSource,
    RepoSummary,
    RoadmapPhase,
    RoadmapStep,
    SkillSource,
)
from conftest import fake_openai_client


def _step(day, phase="Foundation"):
    return {
        "day": day,
        "phase": phase,
        "primary_goal": f"Goal {day}",
        "learning_task": "Read",
        "practice_task": "Drill",
        "building_task": "Build",
        "review_task": "Review",
        "expected_output": "Notes",
        "time_estimate": "180 mins",
        "milestone": None,
    }


def _provider(*contents):
    client, completions = fake_openai_client(*contents)
    return OpenAIAnalysisProvider(api_key="test-key", client=client), completions


def test_resume_payload_becomes_resume_skills():
    payload = {
        "skills": [
            {"name": "React", "level": "Advanced", "category": "Frontend", "confidence": 0.9},
            {"name": "Communication", "level": "Intermediate", "category": "Soft Skill", "is_soft_skill": True},
        ],
        "projects": [{"name": "Portfolio", "description": "Personal site", "tech_stack": ["React"]}],
        "detected_experience_level": "Junior",
    }
    provider, completions = _provider(json.dumps(payload))
    result = asyncio.run(provider.extract_skills_from_resume("resume text"))
    assert [s.name for s in result.skills] == ["React", "Communication"]
    assert result.skills[0].level == ProficiencyLevel.ADVANCED
    assert all(s.source == SkillSource.RESUME for s in result.skills)
    assert result.skills[1].is_soft_skill
    assert result.projects[0].name == "Portfolio"
    assert result.level == "Junior"
    assert completions.requests[0]["response_format"] == {"type": "json_object"}


def test_fenced_json_is_accepted():
    content = '```json\n{"skills": [{"name": "Git", "level": "Basic"}]}\n```'
    provider, _ = _provider(content)
    result = asyncio.run(provider.analyze_linkedin_profile("bio"))
    assert result.skills[0].name == "Git"
    assert result.skills[0].source == SkillSource.LINKEDIN


def test_linkedin_experience_becomes_projects():
    payload = {"skills": [], "experience": [{"role": "Engineer", "company": "Acme", "duration": "2y"}]}
    provider, _ = _provider(json.dumps(payload))
    result = asyncio.run(provider.analyze_linkedin_profile("bio"))
    assert result.projects[0].name == "Engineer at Acme"
    assert result.projects[0].source == ProjectSource.LINKEDIN


def test_github_skills_tagged_with_confidence():
    payload = {
        "skills": [{"name": "Python", "level": "Intermediate", "is_soft_skill": True}],
        "top_projects": [{"name": "cli-tool"}],
    }
    provider, completions = _provider(json.dumps(payload))
    repos = [RepoSummary(name=f"repo{i}", language="Python") for i in range(20)]
    result = asyncio.run(provider.analyze_github_repos(repos))
    skill = result.skills[0]
    assert skill.source == SkillSource.GITHUB
    assert skill.confidence == 0.95
    assert skill.is_soft_skill is False
    assert result.projects[0].source == ProjectSource.GITHUB
    sent = completions.requests[0]["messages"][1]["content"]
    assert "repo14" in sent and "repo15" not in sent


def test_roadmap_sorted_by_day():
    payload = {"steps": [_step(8, "Skill Building"), _step(1), _step(22, "Projects")]}
    provider, _ = _provider(json.dumps(payload))
    steps = asyncio.run(provider.generate_roadmap([], "Frontend Developer"))
    assert [s.day for s in steps] == [1, 8, 22]
    assert steps[1].phase == RoadmapPhase.SKILL_BUILDING


def test_roadmap_with_unknown_phase_rejected():
    provider, _ = _provider(json.dumps({"steps": [_step(1, "Vacation")]}))
    with pytest.raises(AnalysisFailure):
        asyncio.run(provider.generate_roadmap([], "Frontend Developer"))


def test_empty_roadmap_rejected():
    provider, _ = _provider(json.dumps({"steps": []}))
    with pytest.raises(AnalysisFailure):
        asyncio.run(provider.generate_roadmap([], "Frontend Developer"))


def test_regenerate_step_returns_validated_step():
    provider, _ = _provider(json.dumps(_step(3)))
    step = asyncio.run(provider.regenerate_step(RoadmapStep(**_step(3)), "Frontend Developer"))
    assert step.day == 3


def test_market_pulse_has_no_sources():
    payload = {
        "hot_skills": ["React"],
        "emerging_trends": ["AI tooling"],
        "salary_range": "6-12 LPA",
        "market_outlook": "Growing",
        "internship_recommendations": ["Acme"],
    }
    provider, completions = _provider(json.dumps(payload))
    pulse = asyncio.run(provider.fetch_live_market_pulse("Frontend Developer"))
    assert pulse.hot_skills == ["React"]
    assert pulse.sources == []
    assert "India" in completions.requests[0]["messages"][1]["content"]


def test_invalid_json_raises_analysis_failure():
    provider, _ = _provider("not json at all")
    with pytest.raises(AnalysisFailure):
        asyncio.run(provider.extract_skills_from_resume("resume"))


def test_schema_mismatch_raises_analysis_failure():
    provider, _ = _provider(json.dumps({"skills": [{"name": "React", "level": "Guru"}]}))
    with pytest.raises(AnalysisFailure):
        asyncio.run(provider.extract_skills_from_resume("resume"))


def test_empty_content_raises_analysis_failure():
    provider, _ = _provider("")
    with pytest.raises(AnalysisFailure):
        asyncio.run(provider.get_mentor_advice([ChatMessage(role="user", text="hi")], "summary"))


def test_api_error_wrapped_as_analysis_failure():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    provider, _ = _provider(openai.APIConnectionError(request=request))
    with pytest.raises(AnalysisFailure) as excinfo:
        asyncio.run(provider.generate_cover_letter("summary", "Dev", "Acme"))
    assert excinfo.value.provider == provider.name


def test_missing_key_raises_analysis_failure():
    provider = OpenAIAnalysisProvider(api_key="")
    with pytest.raises(AnalysisFailure):
        asyncio.run(provider.get_winning_strategy("Dev", "Acme", ["React"]))


def test_text_operations_return_message_content():
    provider, completions = _provider("**Plan**\n- ship")
    advice = asyncio.run(provider.get_mentor_advice([ChatMessage(role="user", text="help")], "Ada"))
    assert advice == "**Plan**\n- ship"
    assert "response_format" not in completions.requests[0]
