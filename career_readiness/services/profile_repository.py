"""Profile repository: versioned snapshots and the single mutation entry point.

Every write is a read-modify-write of the stored snapshot under one lock, so
two evidence syncs finishing together both land instead of the later one
overwriting the earlier merge.
"""

import json
import threading
from datetime import date
from typing import Any, Callable, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from career_readiness.config import PROFILE_KEY, PROFILE_SCHEMA_VERSION, ROADMAP_KEY_PREFIX
from career_readiness.errors import ProfileNotFoundError
from career_readiness.schemas.profile import ApplicationRecord, ScoreSnapshot, UserProfile
from career_readiness.schemas.project import Project
from career_readiness.schemas.results import ScoreBreakdown
from career_readiness.schemas.roadmap import RoadmapStep
from career_readiness.schemas.skill import Skill
from career_readiness.scoring import roadmap_progress
from career_readiness.services.evidence import merge_evidence
from career_readiness.services.store import PersistenceStore
from career_readiness.utils.logger import get_logger

logger = get_logger(__name__)

_ROADMAP_ADAPTER = TypeAdapter(List[RoadmapStep])


class ProfileRepository:
    """Owns the active session's UserProfile inside a PersistenceStore."""

    def __init__(self, store: PersistenceStore) -> None:
        self._store = store
        self._lock = threading.RLock()

    # ----- envelope -----

    def _read(self, key: str) -> Optional[Any]:
        raw = self._store.get(key)
        if raw is None:
            return None
        try:
            envelope = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Dropping unreadable record %s", key)
            self._store.delete(key)
            return None
        if not isinstance(envelope, dict) or envelope.get("version") != PROFILE_SCHEMA_VERSION:
            logger.warning("Dropping record %s with unsupported schema version", key)
            self._store.delete(key)
            return None
        return envelope.get("data")

    def _write(self, key: str, data: Any) -> None:
        self._store.set(key, json.dumps({"version": PROFILE_SCHEMA_VERSION, "data": data}))

    # ----- profile -----

    def load(self) -> Optional[UserProfile]:
        with self._lock:
            data = self._read(PROFILE_KEY)
            if data is None:
                return None
            try:
                return UserProfile.model_validate(data)
            except ValidationError as e:
                logger.warning("Stored profile failed validation, dropping it: %s", e)
                self._store.delete(PROFILE_KEY)
                return None

    def save(self, profile: UserProfile) -> UserProfile:
        with self._lock:
            self._write(PROFILE_KEY, profile.model_dump(mode="json"))
        return profile

    def create(self, name: str, email: str, target_role: Optional[str] = None) -> UserProfile:
        """Start a session profile with defaults (sign-in)."""
        fields = {"name": name, "email": email}
        if target_role:
            fields["target_role"] = target_role
        profile = UserProfile(**fields)
        logger.info("Created profile for %s", email)
        return self.save(profile)

    def clear(self) -> None:
        """Logout: the profile is removed; cached roadmaps stay."""
        with self._lock:
            self._store.delete(PROFILE_KEY)

    def mutate(self, change: Callable[[UserProfile], UserProfile]) -> UserProfile:
        """Apply ``change`` to the current snapshot and persist the result atomically."""
        with self._lock:
            current = self.load()
            if current is None:
                raise ProfileNotFoundError("No active profile; sign in first")
            updated = change(current)
            return self.save(updated)

    def complete_onboarding(self, **updates: Any) -> UserProfile:
        def change(p: UserProfile) -> UserProfile:
            data = p.model_dump()
            data.update(updates)
            data["is_onboarding_complete"] = True
            return UserProfile.model_validate(data)

        return self.mutate(change)

    def set_target_role(self, target_role: str) -> UserProfile:
        return self.mutate(lambda p: p.model_copy(update={"target_role": target_role}))

    def apply_evidence(self, skills: Sequence[Skill], projects: Sequence[Project] = ()) -> UserProfile:
        """Merge synced evidence (last write wins per name) into the stored profile."""

        def change(p: UserProfile) -> UserProfile:
            merged_skills, merged_projects = merge_evidence(p.current_skills, skills, p.projects, projects)
            return p.model_copy(update={"current_skills": merged_skills, "projects": merged_projects})

        return self.mutate(change)

    def toggle_task(self, day: int, task: str) -> UserProfile:
        return self.mutate(
            lambda p: p.model_copy(
                update={"completed_resources": roadmap_progress.toggle_task(p.completed_resources, day, task)}
            )
        )

    def toggle_day(self, day: int) -> UserProfile:
        return self.mutate(
            lambda p: p.model_copy(
                update={"completed_resources": roadmap_progress.toggle_day(p.completed_resources, day)}
            )
        )

    def record_application(self, job_id: str) -> UserProfile:
        """Track an application once per job id."""

        def change(p: UserProfile) -> UserProfile:
            if any(a.job_id == job_id for a in p.applications):
                return p
            return p.model_copy(update={"applications": p.applications + [ApplicationRecord(job_id=job_id)]})

        return self.mutate(change)

    def record_score(self, breakdown: ScoreBreakdown, on_date: Optional[date] = None) -> UserProfile:
        """Store the latest score and keep one history point per day."""
        day = (on_date or date.today()).isoformat()

        def change(p: UserProfile) -> UserProfile:
            history = [h for h in p.history if h.date != day]
            history.append(ScoreSnapshot(date=day, score=breakdown.total))
            return p.model_copy(
                update={
                    "readiness_score": breakdown.total,
                    "interview_readiness": breakdown.interview_readiness,
                    "history": history,
                }
            )

        return self.mutate(change)

    # ----- roadmap cache -----

    def load_roadmap(self, target_role: str) -> Optional[List[RoadmapStep]]:
        key = ROADMAP_KEY_PREFIX + target_role
        with self._lock:
            data = self._read(key)
            if data is None:
                return None
            try:
                return _ROADMAP_ADAPTER.validate_python(data)
            except ValidationError as e:
                logger.warning("Cached roadmap for %s failed validation, dropping it: %s", target_role, e)
                self._store.delete(key)
                return None

    def save_roadmap(self, target_role: str, steps: Sequence[RoadmapStep]) -> None:
        with self._lock:
            self._write(ROADMAP_KEY_PREFIX + target_role, [s.model_dump(mode="json") for s in steps])
