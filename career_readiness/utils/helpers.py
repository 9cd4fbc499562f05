"""Helper utilities for the career readiness engine."""

import json
import math
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from career_readiness.schemas.skill import Skill, normalize_skill_name

SkillsInput = Union[Mapping[str, Skill], Iterable[Skill]]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def skill_list(user_skills: SkillsInput) -> List[Skill]:
    """Full skill list from either a lookup mapping or an iterable of skills."""
    if isinstance(user_skills, Mapping):
        return list(user_skills.values())
    return list(user_skills or [])


def build_skill_index(user_skills: SkillsInput) -> Dict[str, Skill]:
    """Lookup keyed by lowercase name; later entries (most recently synced) win."""
    if isinstance(user_skills, Mapping):
        return {normalize_skill_name(k): v for k, v in user_skills.items()}
    index: Dict[str, Skill] = {}
    for skill in user_skills or []:
        index[skill.key] = skill
    return index


def parse_llm_json(text: str) -> Optional[Any]:
    """Parse JSON from LLM response, stripping markdown code blocks if present."""
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None


def count_words(text: str) -> int:
    return len((text or "").split())
