import pytest

from career_readiness.scoring.roadmap_progress import (
    TOTAL_ROADMAP_TASKS,
    completion_token,
    count_roadmap_completions,
    day_progress,
    global_progress,
    toggle_day,
    toggle_task,
)


def test_total_tasks_is_45_days_of_4():
    assert TOTAL_ROADMAP_TASKS == 180


def test_token_shape():
    assert completion_token(3, "build") == "day-3-build"
    with pytest.raises(ValueError):
        completion_token(3, "nap")


def test_only_well_formed_tokens_counted():
    tokens = ["day-1-learn", "day-10-review", "day-x-learn", "day-1-sleep", "resource-7", ""]
    assert count_roadmap_completions(tokens) == 2


def test_toggle_task_flips():
    tokens = toggle_task([], 1, "learn")
    assert tokens == ["day-1-learn"]
    assert toggle_task(tokens, 1, "learn") == []


def test_toggle_day_fills_then_clears():
    partial = ["day-4-learn", "other"]
    full = toggle_day(partial, 4)
    assert sorted(t for t in full if t.startswith("day-4")) == [
        "day-4-build",
        "day-4-learn",
        "day-4-practice",
        "day-4-review",
    ]
    assert "other" in full
    assert toggle_day(full, 4) == ["other"]


def test_progress_percentages():
    tokens = ["day-1-learn", "day-1-practice", "day-2-learn"]
    assert day_progress(tokens, 1) == 50
    assert day_progress(tokens, 3) == 0
    assert global_progress(tokens, 2) == 38
    assert global_progress(tokens, 0) == 0
