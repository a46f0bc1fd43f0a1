"""Tests for the FastMCP server wiring."""

from __future__ import annotations

import asyncio

import pytest

from gitpoints.comparison.registry import ComparisonRegistry
from gitpoints.evaluation.github import GitHubClient
from gitpoints.server import AppContext, app_lifespan, mcp


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GITHUB_TOKEN", "GITPOINTS_API_URL", "GITPOINTS_MAX_PAGES", "GITPOINTS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestServer:
    async def test_tools_registered(self) -> None:
        tools = {tool.name for tool in await mcp.list_tools()}
        assert tools == {"analyze_user", "list_comparison", "remove_from_comparison"}

    async def test_lifespan_builds_app_context(self, monkeypatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_life")
        async with app_lifespan(mcp) as app:
            assert isinstance(app, AppContext)
            assert isinstance(app.github, GitHubClient)
            assert app.github.settings.token == "ghp_life"
            assert isinstance(app.comparison, ComparisonRegistry)
            assert isinstance(app.comparison_lock, asyncio.Lock)
        assert app.http_client.is_closed

    async def test_http_client_timeout_and_redirects(self, monkeypatch) -> None:
        monkeypatch.setenv("GITPOINTS_TIMEOUT", "12")
        async with app_lifespan(mcp) as app:
            assert app.http_client.timeout.read == 12.0
            assert app.http_client.timeout.connect == 10.0
            assert app.http_client.follow_redirects is True
