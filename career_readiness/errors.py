"""Exception types raised by the career readiness engine."""


class CareerReadinessError(Exception):
    """Base class for errors surfaced to callers."""


class AnalysisFailure(CareerReadinessError):
    """An analysis provider could not produce a result.

    Covers network errors, rate limiting, missing credentials and upstream
    responses that do not match the expected schema.
    """

    def __init__(self, message: str, provider: str = "") -> None:
        super().__init__(message)
        self.provider = provider


class ValidationFailure(CareerReadinessError):
    """Input rejected before reaching any provider; message is user-facing."""


class GitHubSyncError(CareerReadinessError):
    """Public repositories could not be fetched for a GitHub user."""


class ProfileNotFoundError(CareerReadinessError):
    """No active profile is stored for the session."""
