"""
Test suite for GitHubClient.

Uses httpx.MockTransport in place of the GitHub API.
"""

import httpx
import pytest

from careervalid.boundary.github import GitHubClient, extract_username
from careervalid.configs.github import GitHubSettings
from careervalid.core.exceptions import UpstreamError, ValidationError


@pytest.fixture
def github_settings() -> GitHubSettings:
    return GitHubSettings(token=None, max_attempts=2)


class TestExtractUsername:
    @pytest.mark.parametrize(
        "profile_url",
        [
            "https://github.com/octocat",
            "https://github.com/octocat/",
            "http://www.github.com/octocat",
            "octocat",
        ],
    )
    def test_extracts_username(self, profile_url: str) -> None:
        assert extract_username(profile_url) == "octocat"

    @pytest.mark.parametrize(
        "profile_url",
        [
            "https://github.com/",
            "",
            "   ",
            "octo?per_page=1",
            "octo#frag",
            "octo cat",
            "https://github.com/octo%2Fcat",
            "..",
        ],
    )
    def test_missing_or_malformed_username_raises(self, profile_url: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            extract_username(profile_url)

        assert exc_info.value.field == "profileUrl"


class TestFetchUserAndRepos:
    @pytest.mark.asyncio
    async def test_fetches_profile_and_repositories(
        self, github_settings, github_profile, github_repositories
    ) -> None:
        # Arrange
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path == "/users/octocat":
                return httpx.Response(200, json=github_profile)
            if request.url.path == "/users/octocat/repos":
                return httpx.Response(200, json=github_repositories)
            return httpx.Response(404)

        client = GitHubClient(github_settings, transport=httpx.MockTransport(handler))

        # Act
        profile, repositories = await client.fetch_user_and_repos("octocat", token="t0k")

        # Assert
        assert profile["login"] == "octocat"
        assert len(repositories) == 3
        repos_request = seen[1]
        assert repos_request.url.params["per_page"] == "100"
        assert repos_request.url.params["sort"] == "updated"
        assert repos_request.headers["Authorization"] == "token t0k"
        assert "User-Agent" in repos_request.headers

    @pytest.mark.asyncio
    async def test_no_authorization_header_without_token(
        self, github_settings, github_profile
    ) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path.endswith("/repos"):
                return httpx.Response(200, json=[])
            return httpx.Response(200, json=github_profile)

        client = GitHubClient(github_settings, transport=httpx.MockTransport(handler))
        await client.fetch_user_and_repos("octocat")

        assert all("Authorization" not in request.headers for request in seen)

    @pytest.mark.asyncio
    async def test_not_found_fails_without_retry(self, github_settings) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(404, json={"message": "Not Found"})

        client = GitHubClient(github_settings, transport=httpx.MockTransport(handler))

        with pytest.raises(UpstreamError) as exc_info:
            await client.fetch_user_and_repos("ghost")

        assert exc_info.value.status_code == 404
        assert exc_info.value.service == "github"
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_server_error_is_retried(self, github_settings, github_profile) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) == 1:
                return httpx.Response(502)
            if request.url.path.endswith("/repos"):
                return httpx.Response(200, json=[])
            return httpx.Response(200, json=github_profile)

        client = GitHubClient(github_settings, transport=httpx.MockTransport(handler))

        profile, repositories = await client.fetch_user_and_repos("octocat")

        assert profile["login"] == "octocat"
        assert repositories == []
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_transport_error_becomes_upstream_error(self, github_settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = GitHubClient(github_settings, transport=httpx.MockTransport(handler))

        with pytest.raises(UpstreamError):
            await client.fetch_user_and_repos("octocat")
