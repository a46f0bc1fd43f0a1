"""Fold scored repositories into per-user summary statistics."""

from __future__ import annotations

import math
from collections.abc import Sequence

from gitpoints.models import ScoredRepository, UserStats


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def aggregate(repos: Sequence[ScoredRepository]) -> tuple[list[ScoredRepository], UserStats]:
    """Sort repositories by score and compute the user's stats.

    The sort is stable: equal scores keep their input order, which is
    most recently updated first as delivered by the GitHub listing.
    Repositories without a language count toward ``total_repos`` only.
    """
    sorted_repos = sorted(repos, key=lambda r: r.quality_score, reverse=True)

    total_stars = 0
    total_forks = 0
    total_score = 0
    languages: dict[str, int] = {}
    for repo in repos:
        total_stars += repo.stargazers_count
        total_forks += repo.forks_count
        total_score += repo.quality_score
        if repo.language:
            languages[repo.language] = languages.get(repo.language, 0) + 1

    total_repos = len(repos)
    avg = _round_half_up(total_score / total_repos) if total_repos else 0

    return sorted_repos, UserStats(
        total_repos=total_repos,
        total_stars=total_stars,
        total_forks=total_forks,
        avg_quality_score=avg,
        languages=languages,
    )
