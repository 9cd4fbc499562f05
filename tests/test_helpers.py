from career_readiness.roles import JOB_ROLES, find_role, role_titles
from career_readiness.schemas import ProficiencyLevel
from career_readiness.utils.helpers import build_skill_index, count_words, parse_llm_json
from conftest import make_skill


def test_parse_llm_json_strips_fences():
    assert parse_llm_json('```json\n{"a": 1}\n```') == {"a": 1}
    assert parse_llm_json('{"a": [1, 2]}') == {"a": [1, 2]}
    assert parse_llm_json("nope") is None
    assert parse_llm_json("") is None


def test_skill_index_later_entries_win():
    index = build_skill_index(
        [make_skill("React", ProficiencyLevel.ADVANCED), make_skill("react", ProficiencyLevel.BASIC)]
    )
    assert list(index) == ["react"]
    assert index["react"].level == ProficiencyLevel.BASIC


def test_level_ranks_are_ordered():
    assert ProficiencyLevel.BASIC.rank < ProficiencyLevel.INTERMEDIATE.rank < ProficiencyLevel.ADVANCED.rank


def test_count_words():
    assert count_words("  one two\nthree ") == 3
    assert count_words("") == 0


def test_find_role_by_title_or_id_with_default():
    assert find_role("backend developer").id == "backend"
    assert find_role("frontend").title == "Frontend Developer"
    assert find_role("Astronaut") is JOB_ROLES[0]
    assert find_role(None) is JOB_ROLES[0]
    assert role_titles() == ["Frontend Developer", "Backend Developer"]
