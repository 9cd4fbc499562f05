import asyncio

from career_readiness.providers.rule_based import RuleBasedAnalysisProvider, detect_skills
from career_readiness.schemas import ProficiencyLevel, RepoSummary, RoadmapPhase, SkillSource

provider = RuleBasedAnalysisProvider()


def _names(skills):
    return [s.name for s in skills]


def test_keyword_variants_map_to_skill():
    skills = detect_skills("Shipped features using JSX and hooks", SkillSource.RESUME)
    assert _names(skills) == ["React"]
    assert skills[0].level == ProficiencyLevel.INTERMEDIATE
    assert skills[0].source == SkillSource.RESUME


def test_keywords_match_whole_words_only():
    # "ts" inside "results" and "js" inside "node.js" are not hits
    skills = detect_skills("Delivered results with node.js services", SkillSource.RESUME)
    assert "TypeScript" not in _names(skills)
    assert "JavaScript" not in _names(skills)
    assert "Node.js" in _names(skills)


def test_soft_skills_flagged():
    skills = detect_skills("Led cross-functional teamwork and public speaking", SkillSource.RESUME)
    soft = [s for s in skills if s.is_soft_skill]
    assert {s.name for s in soft} == {"Teamwork", "Communication"}


def test_resume_level_heuristic():
    junior = asyncio.run(provider.extract_skills_from_resume("React and Git"))
    assert junior.level == "Junior"
    text = "React TypeScript JavaScript Node.js Tailwind MongoDB SQL Git"
    senior = asyncio.run(provider.extract_skills_from_resume(text))
    assert len(senior.skills) > 5
    assert senior.level == "Senior"


def test_linkedin_skills_tagged_linkedin():
    result = asyncio.run(provider.analyze_linkedin_profile("Frontend engineer working in React"))
    assert result.skills
    assert all(s.source == SkillSource.LINKEDIN for s in result.skills)


def test_github_repos_become_languages_and_projects():
    repos = [
        RepoSummary(id="1", name="site", language="TypeScript", stargazers_count=3),
        RepoSummary(id="2", name="api", language="typescript"),
        RepoSummary(name="notes"),
    ]
    result = asyncio.run(provider.analyze_github_repos(repos))
    assert _names(result.skills) == ["TypeScript"]
    assert result.skills[0].source == SkillSource.GITHUB
    assert [p.name for p in result.projects] == ["site", "api", "notes"]
    assert result.projects[0].id == "1"
    assert result.projects[0].stars == 3


def test_roadmap_covers_every_phase_in_day_order():
    steps = asyncio.run(provider.generate_roadmap([], "Backend Developer"))
    assert [s.day for s in steps] == sorted(s.day for s in steps)
    assert {s.phase for s in steps} == set(RoadmapPhase)
    assert all("Backend Developer" in s.learning_task for s in steps)


def test_regenerate_keeps_day_and_phase():
    step = asyncio.run(provider.generate_roadmap([], "Frontend Developer"))[0]
    regenerated = asyncio.run(provider.regenerate_step(step, "Frontend Developer"))
    assert regenerated.day == step.day
    assert regenerated.phase == step.phase
    assert regenerated.primary_goal != step.primary_goal


def test_text_operations_never_fail():
    pulse = asyncio.run(provider.fetch_live_market_pulse("Frontend Developer"))
    assert pulse.hot_skills
    assert pulse.sources == []
    letter = asyncio.run(provider.generate_cover_letter("summary", "Frontend Developer", "Acme"))
    assert "Frontend Developer" in letter and "Acme" in letter
    assert asyncio.run(provider.get_winning_strategy("Dev", "Acme", ["React"]))
    assert asyncio.run(provider.get_mentor_advice([], "summary"))


def test_compound_spellings_detected():
    text = "Services with PostgreSQL and NodeJS, UI in ReactJS styled with TailwindCSS."
    names = _names(detect_skills(text, SkillSource.RESUME))
    assert {"SQL", "Node.js", "React", "Tailwind CSS"} <= set(names)


def test_expressjs_counts_as_node():
    assert "Node.js" in _names(detect_skills("REST APIs in ExpressJS", SkillSource.RESUME))
