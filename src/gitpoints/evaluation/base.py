"""Port: GitHub user data fetching."""

from __future__ import annotations

from typing import Protocol

from gitpoints.models import RepositoryRecord, UserProfile


class GitHubUserPort(Protocol):
    """Port for fetching a user's profile and repositories from GitHub."""

    async def fetch_user_profile(self, login: str) -> UserProfile:
        """Fetch the public profile of ``login``."""
        ...

    async def fetch_user_repositories(self, login: str) -> list[RepositoryRecord]:
        """Fetch the public repositories owned by ``login``, most recently updated first."""
        ...
