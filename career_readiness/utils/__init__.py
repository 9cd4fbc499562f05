"""Utility exports."""

from .helpers import (
    build_skill_index,
    count_words,
    parse_llm_json,
    round_half_up,
    skill_list,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "build_skill_index",
    "count_words",
    "parse_llm_json",
    "round_half_up",
    "skill_list",
]
