"""GitHub REST client: public repositories of a user as RepoSummary records."""

import asyncio
from typing import Any, List, Optional

import httpx

from career_readiness.config import (
    GITHUB_API_BASE,
    GITHUB_REPOS_PER_PAGE,
    GITHUB_TOKEN,
    HTTP_MAX_RETRIES,
    HTTP_TIMEOUT_SECONDS,
)
from career_readiness.errors import GitHubSyncError
from career_readiness.schemas.insights import RepoSummary
from career_readiness.utils.logger import get_logger

logger = get_logger(__name__)

RETRY_BACKOFF_SECONDS = 1.0


def _parse_repo(item: dict[str, Any]) -> Optional[RepoSummary]:
    """Build RepoSummary from a GitHub API repository object."""
    name = item.get("name")
    if not name:
        return None
    return RepoSummary(
        id=str(item["id"]) if item.get("id") is not None else None,
        name=name,
        description=item.get("description"),
        language=item.get("language"),
        topics=item.get("topics") or [],
        html_url=item.get("html_url"),
        stargazers_count=item.get("stargazers_count") or 0,
    )


def _headers() -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "CareerReadinessBot/1.0",
    }
    if GITHUB_TOKEN:
        headers["Authorization"] = f"Bearer {GITHUB_TOKEN}"
    return headers


async def fetch_public_repos(
    username: str,
    client: Optional[httpx.AsyncClient] = None,
) -> List[RepoSummary]:
    """
    Fetch a user's public repositories, most recently updated first.
    Transport errors and 5xx responses are retried up to HTTP_MAX_RETRIES attempts.
    Raises GitHubSyncError for unknown users, HTTP failures or an empty account.
    """
    user = (username or "").strip()
    if not user:
        raise GitHubSyncError("GitHub username is required")

    url = f"{GITHUB_API_BASE.rstrip('/')}/users/{user}/repos"
    params = {"sort": "updated", "per_page": GITHUB_REPOS_PER_PAGE}
    owns_client = client is None
    http = client or httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS, follow_redirects=True)
    attempts = max(1, HTTP_MAX_RETRIES)
    last_error: Optional[Exception] = None
    try:
        for attempt in range(attempts):
            try:
                response = await http.get(url, params=params, headers=_headers())
                response.raise_for_status()
                data = response.json()
                break
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                logger.warning("GitHub API error %s for user %s (attempt %s)", status, user, attempt + 1)
                if status == 404:
                    raise GitHubSyncError("GitHub user not found") from e
                if status < 500:
                    raise GitHubSyncError(f"Failed to fetch repositories (HTTP {status})") from e
                last_error = e
            except httpx.TransportError as e:
                logger.warning("GitHub request failed for user %s (attempt %s): %s", user, attempt + 1, e)
                last_error = e
            except httpx.HTTPError as e:
                logger.warning("GitHub request failed for user %s: %s", user, e)
                raise GitHubSyncError(f"Failed to fetch repositories: {e}") from e
            except ValueError as e:
                logger.warning("GitHub returned invalid JSON for user %s: %s", user, e)
                raise GitHubSyncError("Unexpected response from GitHub API") from e
            if attempt + 1 < attempts:
                await asyncio.sleep(RETRY_BACKOFF_SECONDS * (attempt + 1))
        else:
            logger.error("Failed to fetch repositories for %s after %s attempts: %s", user, attempts, last_error)
            if isinstance(last_error, httpx.HTTPStatusError):
                status = last_error.response.status_code
                raise GitHubSyncError(f"Failed to fetch repositories (HTTP {status})") from last_error
            raise GitHubSyncError(f"Failed to fetch repositories: {last_error}") from last_error
    finally:
        if owns_client:
            await http.aclose()

    if not isinstance(data, list):
        raise GitHubSyncError("Unexpected response from GitHub API")
    repos = [r for r in (_parse_repo(item) for item in data if isinstance(item, dict)) if r]
    if not repos:
        raise GitHubSyncError("No public repositories found for this user")
    logger.info("Fetched %s public repositories for %s", len(repos), user)
    return repos
