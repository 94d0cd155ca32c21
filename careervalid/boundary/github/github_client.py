"""
GitHub REST API client.

Fetches public profile and repository data for a user. Transport errors and
5xx responses are retried with jittered exponential back-off; any other
non-2xx response fails immediately.

Dependencies: httpx, tenacity, careervalid.configs
System role: Read-only GitHub boundary client
"""

import logging
import re
from typing import Any
from urllib.parse import urlparse

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from careervalid.configs.github import GitHubSettings
from careervalid.core.exceptions import UpstreamError, ValidationError

logger = logging.getLogger(__name__)


def _is_retryable(exc: BaseException) -> bool:
    """Retry transport failures and server-side errors only."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return isinstance(exc, httpx.TransportError)


# GitHub logins are alphanumerics and hyphens
GITHUB_USERNAME = re.compile(r"[A-Za-z0-9-]+")


def extract_username(profile_url: str) -> str:
    """
    Extract the username from a GitHub profile URL.

    Accepts full URLs ("https://github.com/octocat", trailing slash allowed)
    and bare usernames.

    Args:
        profile_url: Profile URL or username

    Returns:
        str: GitHub username

    Raises:
        ValidationError: If no valid username can be found
    """
    path = urlparse(profile_url.strip()).path if "://" in profile_url else profile_url.strip()
    segments = [segment for segment in path.split("/") if segment]
    if not segments or not GITHUB_USERNAME.fullmatch(segments[-1]):
        raise ValidationError("Invalid GitHub profile URL", field="profileUrl")
    return segments[-1]


class GitHubClient:
    """Async client for the GitHub users and repositories endpoints."""

    def __init__(
        self,
        settings: GitHubSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize GitHub client.

        Args:
            settings: GitHub API settings
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self._settings = settings
        self._transport = transport

    def _headers(self, token: str | None) -> dict[str, str]:
        headers = {
            "User-Agent": self._settings.user_agent,
            "Accept": "application/vnd.github+json",
        }
        token = token or self._settings.token
        if token:
            headers["Authorization"] = f"token {token}"
        return headers

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET a GitHub endpoint with retries, returning decoded JSON."""
        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception(_is_retryable),
                stop=stop_after_attempt(self._settings.max_attempts),
                wait=wait_exponential_jitter(initial=0.5, max=8, jitter=1),
                before_sleep=lambda retry_state: logger.warning(
                    f"{__name__}:_get_json - Retry {retry_state.attempt_number}/"
                    f"{self._settings.max_attempts} for {path}"
                ),
                reraise=True,
            ):
                with attempt:
                    response = await client.get(path, params=params)
                    response.raise_for_status()
                    return response.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                "GitHub API returned an error status",
                extra={"path": path, "status_code": status_code},
            )
            raise UpstreamError(
                f"GitHub API error: {status_code}",
                service="github",
                status_code=status_code,
            ) from e
        except (httpx.HTTPError, RetryError) as e:
            logger.error(
                "GitHub API request failed",
                extra={"path": path, "error_type": type(e).__name__, "error_msg": str(e)},
            )
            raise UpstreamError(f"GitHub API request failed: {e}", service="github") from e

    async def fetch_user_and_repos(
        self,
        username: str,
        token: str | None = None,
    ) -> tuple[dict[str, Any], list[dict[str, Any]]]:
        """
        Fetch a user's profile and most recently updated repositories.

        Args:
            username: GitHub login
            token: Optional personal access token for higher rate limits

        Returns:
            tuple: (profile payload, list of repository payloads)

        Raises:
            UpstreamError: On any non-2xx response or network failure
        """
        async with httpx.AsyncClient(
            base_url=self._settings.api_base_url,
            headers=self._headers(token),
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            profile = await self._get_json(client, f"/users/{username}")
            repositories = await self._get_json(
                client,
                f"/users/{username}/repos",
                params={"per_page": self._settings.repos_per_page, "sort": "updated"},
            )

        if not isinstance(repositories, list):
            raise UpstreamError("Unexpected repositories payload", service="github")

        logger.info(
            "Fetched GitHub data",
            extra={"username": username, "repo_count": len(repositories)},
        )
        return profile, repositories
