"""analyze() -- fetch, score, aggregate and register a single user."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from gitpoints.comparison.registry import ComparisonRegistry
from gitpoints.errors import InvalidInputError
from gitpoints.evaluation.aggregate import aggregate
from gitpoints.evaluation.base import GitHubUserPort
from gitpoints.evaluation.scorer import score_repositories
from gitpoints.models import AnalysisResult

logger = logging.getLogger(__name__)


async def analyze(
    login: str,
    github: GitHubUserPort,
    *,
    registry: ComparisonRegistry | None = None,
    now: datetime | None = None,
) -> AnalysisResult:
    """Analyze a GitHub user's public repositories.

    Every repository is scored against the same evaluation instant
    (``now``, defaulting to the current UTC time). When ``registry`` is
    given, the user's stats are upserted under the profile's login, but
    only once both fetches succeeded: any error leaves it untouched.

    Raises:
        InvalidInputError: ``login`` is empty or blank.
        NotFoundError, RateLimitedError, TransportError: propagated
            unchanged from the GitHub client.
    """
    login = (login or "").strip()
    if not login:
        raise InvalidInputError("A GitHub login is required.")

    profile = await github.fetch_user_profile(login)
    records = await github.fetch_user_repositories(login)

    evaluated_at = now or datetime.now(tz=UTC)
    sorted_repos, stats = aggregate(score_repositories(records, evaluated_at))
    logger.debug(
        "Analyzed '%s': %d repositories, average score %d",
        profile.login,
        stats.total_repos,
        stats.avg_quality_score,
    )

    if registry is not None:
        registry.upsert(profile.login, profile, stats)

    return AnalysisResult(profile=profile, repositories=sorted_repos, stats=stats)
