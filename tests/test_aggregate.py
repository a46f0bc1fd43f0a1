"""Tests for per-user aggregation."""

from __future__ import annotations

from gitpoints.evaluation.aggregate import aggregate
from gitpoints.models import RepositoryRecord, ScoredRepository, UserStats


def _scored(
    repo_id: int,
    score: int,
    *,
    language: str | None = None,
    stars: int = 0,
    forks: int = 0,
) -> ScoredRepository:
    return ScoredRepository(
        repository=RepositoryRecord(
            id=repo_id,
            name=f"repo-{repo_id}",
            language=language,
            stargazers_count=stars,
            forks_count=forks,
        ),
        quality_score=score,
    )


class TestAggregate:
    def test_empty(self) -> None:
        sorted_repos, stats = aggregate([])
        assert sorted_repos == []
        assert stats == UserStats(
            total_repos=0, total_stars=0, total_forks=0, avg_quality_score=0, languages={}
        )

    def test_sorted_by_score_descending(self) -> None:
        repos = [_scored(1, 40), _scored(2, 90), _scored(3, 65)]
        sorted_repos, _ = aggregate(repos)
        assert [r.quality_score for r in sorted_repos] == [90, 65, 40]

    def test_sort_is_stable_for_equal_scores(self) -> None:
        repos = [_scored(1, 50), _scored(2, 80), _scored(3, 50), _scored(4, 80)]
        sorted_repos, _ = aggregate(repos)
        assert [r.repository.id for r in sorted_repos] == [2, 4, 1, 3]

    def test_input_is_not_mutated(self) -> None:
        repos = [_scored(1, 10), _scored(2, 90)]
        aggregate(repos)
        assert [r.repository.id for r in repos] == [1, 2]

    def test_totals(self) -> None:
        repos = [_scored(1, 10, stars=5, forks=1), _scored(2, 20, stars=7, forks=3)]
        _, stats = aggregate(repos)
        assert stats.total_repos == 2
        assert stats.total_stars == 12
        assert stats.total_forks == 4

    def test_average_rounds_half_up(self) -> None:
        _, stats = aggregate([_scored(1, 50), _scored(2, 51)])
        assert stats.avg_quality_score == 51

    def test_average_rounds_down_below_half(self) -> None:
        _, stats = aggregate([_scored(1, 50), _scored(2, 50), _scored(3, 51)])
        assert stats.avg_quality_score == 50

    def test_language_histogram_skips_missing_languages(self) -> None:
        repos = [
            _scored(1, 10, language="Python"),
            _scored(2, 10, language="Go"),
            _scored(3, 10, language="Python"),
            _scored(4, 10),
        ]
        _, stats = aggregate(repos)
        assert stats.total_repos == 4
        assert stats.languages == {"Python": 2, "Go": 1}
