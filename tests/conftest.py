"""Shared test fixtures."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation instant so recency tiers are deterministic."""
    return NOW


@pytest.fixture(autouse=True)
def _no_gh_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    """Never shell out to the GitHub CLI during tests."""
    monkeypatch.setattr("gitpoints.config._resolve_gh_cli_token", lambda: None)
