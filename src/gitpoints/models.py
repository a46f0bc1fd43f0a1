"""Domain models for gitpoints. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

# ─── Repository Models ────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class License:
    """License attached to a repository."""

    name: str
    key: str | None = None
    spdx_id: str | None = None


@dataclass(frozen=True, slots=True)
class RepositoryRecord:
    """A repository as returned by the GitHub API, validated at the boundary."""

    id: int
    name: str
    full_name: str = ""
    html_url: str = ""
    description: str | None = None
    language: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int | None = 0
    homepage: str | None = None
    license: License | None = None
    topics: tuple[str, ...] = ()
    archived: bool = False
    has_issues: bool = False
    updated_at: datetime | None = None
    private: bool = False
    fork: bool = False


@dataclass(frozen=True, slots=True)
class ScoredRepository:
    """A repository paired with the quality score computed for it."""

    repository: RepositoryRecord
    quality_score: int

    @property
    def name(self) -> str:
        return self.repository.name

    @property
    def language(self) -> str | None:
        return self.repository.language

    @property
    def stargazers_count(self) -> int:
        return self.repository.stargazers_count

    @property
    def forks_count(self) -> int:
        return self.repository.forks_count

    def to_dict(self) -> dict[str, object]:
        repo = self.repository
        return {
            "name": repo.name,
            "full_name": repo.full_name,
            "html_url": repo.html_url,
            "description": repo.description,
            "language": repo.language,
            "stars": repo.stargazers_count,
            "forks": repo.forks_count,
            "open_issues": repo.open_issues_count,
            "license": repo.license.name if repo.license else None,
            "topics": list(repo.topics),
            "archived": repo.archived,
            "updated_at": repo.updated_at.isoformat() if repo.updated_at else None,
            "quality_score": self.quality_score,
        }


# ─── User Models ──────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Public profile fields of a GitHub user."""

    login: str
    name: str | None = None
    avatar_url: str = ""
    html_url: str = ""
    bio: str | None = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0


@dataclass(frozen=True, slots=True)
class UserStats:
    """Summary statistics computed from a user's scored repositories."""

    total_repos: int = 0
    total_stars: int = 0
    total_forks: int = 0
    avg_quality_score: int = 0
    languages: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Outcome of analyzing a single user."""

    profile: UserProfile
    repositories: list[ScoredRepository]
    stats: UserStats


# ─── Comparison Models ────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ComparisonEntry:
    """A user's latest stats as held in the comparison registry."""

    login: str
    stats: UserStats
    name: str | None = None
    avatar_url: str = ""
