from career_readiness.schemas import ProficiencyLevel, Project, ProjectSource, SkillSource
from career_readiness.services.evidence import merge_evidence
from conftest import make_skill

B, I, A = ProficiencyLevel.BASIC, ProficiencyLevel.INTERMEDIATE, ProficiencyLevel.ADVANCED


def test_later_claim_replaces_earlier_even_when_lower():
    existing = [make_skill("React", A, source=SkillSource.RESUME)]
    incoming = [make_skill("react", B, source=SkillSource.GITHUB)]
    skills, _ = merge_evidence(existing, incoming, [], [])
    assert len(skills) == 1
    assert skills[0].name == "react"
    assert skills[0].level == B
    assert skills[0].source == SkillSource.GITHUB


def test_existing_order_kept_and_new_names_appended():
    existing = [make_skill("Git"), make_skill("React"), make_skill("CSS")]
    incoming = [make_skill("Docker"), make_skill("REACT", A)]
    skills, _ = merge_evidence(existing, incoming, [], [])
    assert [s.name for s in skills] == ["Git", "REACT", "CSS", "Docker"]


def test_no_duplicate_names_after_merge():
    incoming = [make_skill("Node.js"), make_skill("node.js", A), make_skill("NODE.JS", B)]
    skills, _ = merge_evidence([], incoming, [], [])
    assert len(skills) == 1
    assert skills[0].level == B


def test_projects_merge_by_name():
    existing = [Project(name="Portfolio", description="old")]
    incoming = [
        Project(name="portfolio", description="new", source=ProjectSource.GITHUB),
        Project(name="Todo App"),
    ]
    _, projects = merge_evidence([], [], existing, incoming)
    assert [p.name for p in projects] == ["portfolio", "Todo App"]
    assert projects[0].description == "new"


def test_empty_incoming_leaves_existing_untouched():
    existing = [make_skill("Git")]
    skills, projects = merge_evidence(existing, [], [], [])
    assert skills == existing
    assert projects == []


def test_padded_names_share_one_key():
    skills, _ = merge_evidence([make_skill("React", B)], [make_skill(" React ", A)], [], [])
    assert len(skills) == 1
    assert skills[0].level == A
