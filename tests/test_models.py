"""Tests for domain models."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from gitpoints.models import License, RepositoryRecord, ScoredRepository, UserStats


def _scored() -> ScoredRepository:
    return ScoredRepository(
        repository=RepositoryRecord(
            id=1,
            name="pipeline",
            full_name="octocat/pipeline",
            language="Go",
            stargazers_count=3,
            forks_count=1,
            license=License(name="MIT License", spdx_id="MIT"),
            topics=("ci",),
            updated_at=datetime(2026, 2, 24, tzinfo=UTC),
        ),
        quality_score=90,
    )


class TestScoredRepository:
    def test_read_through_properties(self) -> None:
        scored = _scored()
        assert scored.name == "pipeline"
        assert scored.language == "Go"
        assert scored.stargazers_count == 3
        assert scored.forks_count == 1

    def test_to_dict(self) -> None:
        data = _scored().to_dict()
        assert data["full_name"] == "octocat/pipeline"
        assert data["license"] == "MIT License"
        assert data["topics"] == ["ci"]
        assert data["updated_at"] == "2026-02-24T00:00:00+00:00"
        assert data["quality_score"] == 90

    def test_frozen(self) -> None:
        scored = _scored()
        with pytest.raises(AttributeError):
            scored.quality_score = 10  # type: ignore[misc]


class TestUserStats:
    def test_defaults(self) -> None:
        stats = UserStats()
        assert stats.total_repos == 0
        assert stats.avg_quality_score == 0
        assert stats.languages == {}

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            UserStats().total_stars = 5  # type: ignore[misc]
