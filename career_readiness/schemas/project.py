"""Project schema."""

import secrets
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ProjectSource(str, Enum):
    GITHUB = "GitHub"
    MANUAL = "Manual"
    LINKEDIN = "LinkedIn"


def new_project_id() -> str:
    """Opaque 9-character id assigned when a project is created."""
    return secrets.token_hex(5)[:9]


class Project(BaseModel):
    """Project evidence; identity is the case-insensitive name."""

    id: str = Field(default_factory=new_project_id)
    name: str = Field(..., min_length=1)
    description: str = ""
    url: Optional[str] = None
    tech_stack: List[str] = Field(default_factory=list)
    source: ProjectSource = ProjectSource.MANUAL
    stars: Optional[int] = None
