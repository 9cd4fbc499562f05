"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Generative backend – never hardcode keys
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")
ROADMAP_MODEL_NAME: str = os.getenv("ROADMAP_MODEL_NAME", MODEL_NAME)
LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0.2"))

# HTTP settings (OpenAI client and GitHub fetcher)
HTTP_TIMEOUT_SECONDS: float = 30.0
HTTP_MAX_RETRIES: int = 3

# GitHub evidence sync
GITHUB_API_BASE: str = os.getenv("GITHUB_API_BASE", "https://api.github.com")
GITHUB_TOKEN: str = os.getenv("GITHUB_TOKEN", "")
GITHUB_REPOS_PER_PAGE: int = 50
GITHUB_MAX_REPOS_FOR_ANALYSIS: int = 15

# Persistence
DATA_DIR: Path = Path(os.getenv("CAREER_READY_DATA_DIR", str(_base.parent / ".career_ready")))
PROFILE_STORE_PATH: Path = DATA_DIR / "store.json"
PROFILE_SCHEMA_VERSION: int = 1
PROFILE_KEY: str = "career_ready_user"
ROADMAP_KEY_PREFIX: str = "roadmap_daily_"

# Profile defaults
DEFAULT_TARGET_ROLE: str = "Frontend Developer"
DEFAULT_MARKET_LOCATION: str = "India"

# Scoring
ROADMAP_DAYS: int = 45
DEFAULT_TOTAL_RESOURCES: int = 36  # ~3 resources per week for 12 weeks

# Resume gate (checked before any provider call)
RESUME_MIN_WORDS: int = 150
RESUME_MIN_SECTIONS: int = 2
RESUME_SECTION_KEYWORDS: list = [
    "experience",
    "education",
    "skills",
    "projects",
    "internship",
    "certifications",
    "summary",
    "work",
]

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
