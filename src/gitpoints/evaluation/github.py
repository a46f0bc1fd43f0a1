"""Fetch user profiles and repositories from the GitHub REST API.

API docs: https://docs.github.com/en/rest/users and https://docs.github.com/en/rest/repos
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from urllib.parse import quote as urlquote

import httpx

from gitpoints.config import Settings
from gitpoints.errors import NotFoundError, RateLimitedError, TransportError
from gitpoints.evaluation.normalize import parse_profile, parse_repositories
from gitpoints.models import RepositoryRecord, UserProfile

logger = logging.getLogger(__name__)

_API_VERSION = "2022-11-28"
_PER_PAGE = 100


# ─── Rate limit detection ──────────────────────────────────


def _is_rate_limited(resp: httpx.Response) -> bool:
    """GitHub signals throttling with 429, or 403 plus an exhausted quota."""
    if resp.status_code == 429:
        return True
    return resp.status_code == 403 and resp.headers.get("X-RateLimit-Remaining") == "0"


def _rate_limit_reset(resp: httpx.Response) -> datetime | None:
    """Parse ``X-RateLimit-Reset`` (epoch seconds) into a UTC datetime."""
    raw = resp.headers.get("X-RateLimit-Reset")
    if raw is None:
        return None
    try:
        return datetime.fromtimestamp(int(raw), tz=UTC)
    except (ValueError, OverflowError, OSError):
        return None


# ─── Client ───────────────────────────────────────────────


@dataclass
class GitHubClient:
    """Async client for the GitHub users and repositories endpoints.

    Implements ``GitHubUserPort``. Performs no retries and no caching;
    every failure surfaces as a ``GitHubError`` subclass.
    """

    http: httpx.AsyncClient
    settings: Settings = field(default_factory=Settings)

    def headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": _API_VERSION,
        }
        if self.settings.token:
            headers["Authorization"] = f"Bearer {self.settings.token}"
        return headers

    async def fetch_user_profile(self, login: str) -> UserProfile:
        """Fetch the public profile of ``login``.

        Raises:
            NotFoundError: The user does not exist.
            RateLimitedError: GitHub throttled the request.
            TransportError: Any other failure.
        """
        url = f"{self.settings.api_url}/users/{urlquote(login, safe='')}"
        data = await self._get_json(url, login)
        if not isinstance(data, dict):
            raise TransportError(f"Unexpected profile payload for '{login}'")
        return parse_profile(data, login)

    async def fetch_user_repositories(self, login: str) -> list[RepositoryRecord]:
        """Fetch repositories owned by ``login``, most recently updated first.

        Follows ``Link: rel="next"`` pagination up to ``settings.max_pages``.
        """
        url: str | None = f"{self.settings.api_url}/users/{urlquote(login, safe='')}/repos"
        params: dict[str, object] | None = {
            "type": "owner",
            "sort": "updated",
            "direction": "desc",
            "per_page": _PER_PAGE,
        }
        records: list[RepositoryRecord] = []
        page = 0
        while url and page < self.settings.max_pages:
            page += 1
            data, next_url = await self._get_page(url, login, params)
            if not isinstance(data, list):
                raise TransportError(f"Unexpected repository listing for '{login}'")
            records.extend(parse_repositories(data))
            logger.debug("Page %d for '%s': %d repositories", page, login, len(data))
            # The next link already carries the query string.
            url, params = next_url, None

        if url:
            logger.warning(
                "Stopped listing repositories for '%s' after %d pages", login, page
            )
        return records

    # ── Request helpers ──────────────────────────────────────────

    async def _get_json(self, url: str, login: str) -> object:
        data, _ = await self._get_page(url, login, None)
        return data

    async def _get_page(
        self,
        url: str,
        login: str,
        params: dict[str, object] | None,
    ) -> tuple[object, str | None]:
        """GET ``url`` and return (decoded JSON, next page URL)."""
        try:
            resp = await self.http.get(url, params=params, headers=self.headers())
        except httpx.HTTPError as exc:
            raise TransportError(f"Failed to reach GitHub for '{login}': {exc}") from exc

        self._raise_for_status(resp, login)

        try:
            data = resp.json()
        except ValueError as exc:
            raise TransportError(
                f"GitHub returned invalid JSON for '{login}'", resp.status_code
            ) from exc

        next_link = resp.links.get("next", {}).get("url")
        return data, next_link

    @staticmethod
    def _raise_for_status(resp: httpx.Response, login: str) -> None:
        if resp.is_success:
            return
        if resp.status_code == 404:
            raise NotFoundError(login)
        if _is_rate_limited(resp):
            reset_at = _rate_limit_reset(resp)
            logger.warning("GitHub API rate limit exhausted (reset at %s)", reset_at)
            raise RateLimitedError(reset_at)
        raise TransportError(f"GitHub request for '{login}' failed", resp.status_code)
