"""Compute quality scores from repository records."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from gitpoints.models import RepositoryRecord, ScoredRepository

_SECURITY_KEYWORDS = ("security", "secure")
_SUBSTANTIVE_DESCRIPTION_LENGTH = 20


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


def _recency_points(updated_at: datetime | None, now: datetime) -> int:
    """Score based on time since last update (max 15, tiers exclusive)."""
    if updated_at is None:
        return 0
    age = _as_utc(now) - _as_utc(updated_at)
    if age < timedelta(days=30):
        return 15
    if age < timedelta(days=90):
        return 10
    if age < timedelta(days=365):
        return 5
    return 0


def _issue_ratio_points(repo: RepositoryRecord) -> int:
    """Score based on open issues relative to engagement (max 10, tiers exclusive)."""
    open_issues = repo.open_issues_count
    if open_issues is None or open_issues < 0:
        return 0
    ratio = open_issues / (repo.stargazers_count + repo.forks_count + 1)
    if ratio < 0.10:
        return 10
    if ratio < 0.30:
        return 5
    return 0


def _mentions_security(description: str | None) -> bool:
    if not description:
        return False
    text = description.lower()
    return any(keyword in text for keyword in _SECURITY_KEYWORDS)


def score_breakdown(repo: RepositoryRecord, now: datetime) -> dict[str, int]:
    """Return the points awarded per signal. Values sum to the quality score."""
    description = repo.description or ""
    return {
        "issues_enabled": 5 if repo.has_issues else 0,
        "security": 5 if _mentions_security(repo.description) else 0,
        "homepage": 5 if repo.homepage else 0,
        "license": 10 if repo.license is not None else 0,
        "recency": _recency_points(repo.updated_at, now),
        "stars": 5 if repo.stargazers_count > 0 else 0,
        "forks": 5 if repo.forks_count > 0 else 0,
        "issue_ratio": _issue_ratio_points(repo),
        "description": 10 if len(description) > _SUBSTANTIVE_DESCRIPTION_LENGTH else 0,
        "language": 10 if repo.language else 0,
        "topics": 10 if repo.topics else 0,
        "not_archived": 10 if not repo.archived else 0,
    }


def score_repository(repo: RepositoryRecord, now: datetime) -> int:
    """Compute a 0-100 quality score for a repository.

    Scoring components (weights total exactly 100, the raw sum is the score):
    - issue tracking enabled: +5
    - description mentions security: +5
    - homepage set: +5
    - license present: +10
    - updated < 30d: +15, < 90d: +10, < 365d: +5
    - at least one star: +5
    - at least one fork: +5
    - open issues / (stars + forks + 1) < 0.10: +10, < 0.30: +5
    - description longer than 20 characters: +10
    - primary language set: +10
    - topics set: +10
    - not archived: +10

    Naive datetimes, for ``now`` or ``updated_at``, are taken as UTC.
    """
    return sum(score_breakdown(repo, now).values())


def score_repositories(
    repos: Iterable[RepositoryRecord],
    now: datetime,
) -> list[ScoredRepository]:
    """Score every repository against the same evaluation instant."""
    return [
        ScoredRepository(repository=repo, quality_score=score_repository(repo, now))
        for repo in repos
    ]

