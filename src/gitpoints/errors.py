"""Exception hierarchy for gitpoints.

All exceptions inherit from GitpointsError (single catch point).
Messages are written for end users -- clear, actionable, no stack traces.
"""

from __future__ import annotations

from datetime import datetime


class GitpointsError(Exception):
    """Base exception for all gitpoints errors."""


class InvalidInputError(GitpointsError):
    """A caller-supplied value was rejected before any network interaction."""


class GitHubError(GitpointsError):
    """Error communicating with the GitHub API."""


class NotFoundError(GitHubError):
    """The requested GitHub user does not exist."""

    def __init__(self, login: str) -> None:
        self.login = login
        super().__init__(f"GitHub user '{login}' was not found. Check the spelling of the login.")


class RateLimitedError(GitHubError):
    """GitHub throttled the request."""

    def __init__(self, reset_at: datetime | None = None) -> None:
        self.reset_at = reset_at
        if reset_at is not None:
            message = (
                "GitHub API rate limit exceeded. "
                f"Try again after {reset_at.strftime('%Y-%m-%d %H:%M:%S')} UTC."
            )
        else:
            message = (
                "GitHub API rate limit exceeded. "
                "Set GITHUB_TOKEN to a personal access token to raise the limit."
            )
        super().__init__(message)


class TransportError(GitHubError):
    """Any other non-success HTTP outcome or network failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)
