"""GitHub REST API boundary."""

from .github_client import GitHubClient, extract_username

__all__ = ["GitHubClient", "extract_username"]
