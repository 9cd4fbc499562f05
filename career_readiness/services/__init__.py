"""Service exports."""

from .analysis_service import AnalysisService, get_analysis_service
from .evidence import merge_evidence
from .github_fetcher import fetch_public_repos
from .profile_repository import ProfileRepository
from .resume_validator import validate_resume_content
from .store import InMemoryStore, JsonFileStore, PersistenceStore
from .text_extractor import extract_resume_text

__all__ = [
    "AnalysisService",
    "get_analysis_service",
    "merge_evidence",
    "fetch_public_repos",
    "ProfileRepository",
    "validate_resume_content",
    "InMemoryStore",
    "JsonFileStore",
    "PersistenceStore",
    "extract_resume_text",
]
