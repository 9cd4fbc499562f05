"""Roadmap completion tokens: ``day-<N>-<task>`` strings stored on the profile."""

import re
from typing import Iterable, List, Sequence

from career_readiness.config import ROADMAP_DAYS
from career_readiness.utils.helpers import round_half_up

TASK_KEYS = ("learn", "practice", "build", "review")
TOTAL_ROADMAP_TASKS = ROADMAP_DAYS * len(TASK_KEYS)

_TOKEN_RE = re.compile(r"^day-\d+-(learn|practice|build|review)$")


def completion_token(day: int, task: str) -> str:
    if task not in TASK_KEYS:
        raise ValueError(f"Unknown roadmap task '{task}'; expected one of {TASK_KEYS}")
    return f"day-{day}-{task}"


def count_roadmap_completions(tokens: Iterable[str]) -> int:
    """Count well-formed task tokens; anything else in the list is ignored."""
    return sum(1 for t in tokens or [] if _TOKEN_RE.match(t or ""))


def is_task_complete(tokens: Sequence[str], day: int, task: str) -> bool:
    return completion_token(day, task) in tokens


def toggle_task(tokens: Sequence[str], day: int, task: str) -> List[str]:
    """Return a new token list with the task flipped."""
    key = completion_token(day, task)
    current = list(tokens or [])
    if key in current:
        return [t for t in current if t != key]
    return current + [key]


def toggle_day(tokens: Sequence[str], day: int) -> List[str]:
    """Clear the day if all four tasks are done, otherwise mark all four done."""
    current = list(tokens or [])
    day_tokens = [completion_token(day, task) for task in TASK_KEYS]
    others = [t for t in current if t not in day_tokens]
    if all(t in current for t in day_tokens):
        return others
    return others + day_tokens


def day_progress(tokens: Sequence[str], day: int) -> float:
    """Percentage (0-100) of the day's tasks completed."""
    done = sum(1 for task in TASK_KEYS if is_task_complete(tokens, day, task))
    return done / len(TASK_KEYS) * 100


def global_progress(tokens: Sequence[str], step_count: int) -> int:
    """Rounded percentage of all tasks across ``step_count`` roadmap days."""
    if step_count <= 0:
        return 0
    total = step_count * len(TASK_KEYS)
    return min(100, round_half_up(count_roadmap_completions(tokens) / total * 100))
