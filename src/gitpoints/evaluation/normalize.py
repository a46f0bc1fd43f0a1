"""Validate raw GitHub JSON into RepositoryRecord and UserProfile models.

Tolerant of missing or malformed fields -- uses explicit defaults rather
than crashing, so the scorer never sees upstream schema drift.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from gitpoints.models import License, RepositoryRecord, UserProfile

logger = logging.getLogger(__name__)


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO 8601 timestamp into an aware UTC datetime. Returns None on failure."""
    if not isinstance(value, str) or not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_repository(raw: dict) -> RepositoryRecord:
    """Shape a raw repository object into a RepositoryRecord.

    Text fields are stripped of surrounding whitespace, so the scorer's
    description length is measured on the stripped text.
    """
    return RepositoryRecord(
        id=_count(raw.get("id")),
        name=_text(raw.get("name")) or "",
        full_name=_text(raw.get("full_name")) or "",
        html_url=_text(raw.get("html_url")) or "",
        description=_text(raw.get("description")),
        language=_text(raw.get("language")),
        stargazers_count=_count(raw.get("stargazers_count")),
        forks_count=_count(raw.get("forks_count")),
        open_issues_count=_optional_count(raw.get("open_issues_count")),
        homepage=_text(raw.get("homepage")),
        license=_parse_license(raw.get("license")),
        topics=_parse_topics(raw.get("topics")),
        archived=raw.get("archived") is True,
        has_issues=raw.get("has_issues") is True,
        updated_at=parse_timestamp(raw.get("updated_at")),
        private=raw.get("private") is True,
        fork=raw.get("fork") is True,
    )


def parse_repositories(raw: object) -> list[RepositoryRecord]:
    """Parse a repository listing, skipping entries that are not objects."""
    if not isinstance(raw, list):
        return []
    records = []
    for entry in raw:
        if not isinstance(entry, dict):
            logger.debug("Skipping non-object repository entry: %r", entry)
            continue
        records.append(parse_repository(entry))
    return records


def parse_profile(raw: dict, login: str) -> UserProfile:
    """Shape a raw user object into a UserProfile.

    Falls back to the requested ``login`` when the payload has none.
    """
    return UserProfile(
        login=_text(raw.get("login")) or login,
        name=_text(raw.get("name")),
        avatar_url=_text(raw.get("avatar_url")) or "",
        html_url=_text(raw.get("html_url")) or "",
        bio=_text(raw.get("bio")),
        public_repos=_count(raw.get("public_repos")),
        followers=_count(raw.get("followers")),
        following=_count(raw.get("following")),
    )


# ── Field helpers ─────────────────────────────────────────────


def _text(value: object) -> str | None:
    """Return a stripped non-empty string, or None."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _optional_count(value: object) -> int | None:
    """Return a non-negative int, or None when missing or malformed."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 0:
        return None
    return value


def _count(value: object) -> int:
    count = _optional_count(value)
    return 0 if count is None else count


def _parse_license(value: object) -> License | None:
    if not isinstance(value, dict):
        return None
    name = _text(value.get("name"))
    if name is None:
        return None
    return License(
        name=name,
        key=_text(value.get("key")),
        spdx_id=_text(value.get("spdx_id")),
    )


def _parse_topics(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(topic for topic in (_text(t) for t in value) if topic)
