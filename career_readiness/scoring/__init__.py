"""Scoring exports: readiness score, gap analysis, roadmap progress, job match."""

from .gap_analyzer import analyze_gaps, missing_requirements, top_priority_gap
from .job_match import calculate_job_match
from .readiness import calculate_readiness_score, score_profile
from .roadmap_progress import (
    TASK_KEYS,
    TOTAL_ROADMAP_TASKS,
    completion_token,
    count_roadmap_completions,
    day_progress,
    global_progress,
    toggle_day,
    toggle_task,
)

__all__ = [
    "analyze_gaps",
    "missing_requirements",
    "top_priority_gap",
    "calculate_job_match",
    "calculate_readiness_score",
    "score_profile",
    "TASK_KEYS",
    "TOTAL_ROADMAP_TASKS",
    "completion_token",
    "count_roadmap_completions",
    "day_progress",
    "global_progress",
    "toggle_day",
    "toggle_task",
]
