"""MCP server that scores GitHub users' repositories and compares users."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from gitpoints.comparison.registry import ComparisonRegistry
from gitpoints.config import Settings, load_settings
from gitpoints.evaluation.base import GitHubUserPort
from gitpoints.evaluation.github import GitHubClient
from gitpoints.tools.analyze import analyze_user
from gitpoints.tools.compare import list_comparison, remove_from_comparison


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations.

    The comparison registry lives for the whole process; upserts and
    removals are serialized through ``comparison_lock``.
    """

    http_client: httpx.AsyncClient
    settings: Settings
    github: GitHubUserPort
    comparison: ComparisonRegistry
    comparison_lock: asyncio.Lock


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage shared adapter lifecycle: the composition root."""
    settings = load_settings()
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout, connect=10.0),
        follow_redirects=True,
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
    ) as http_client:
        yield AppContext(
            http_client=http_client,
            settings=settings,
            github=GitHubClient(http_client, settings),
            comparison=ComparisonRegistry(),
            comparison_lock=asyncio.Lock(),
        )


mcp = FastMCP(
    "gitpoints",
    instructions=(
        "gitpoints scores the public GitHub repositories of a user and "
        "compares users side by side.\n\n"
        "### Tools\n"
        "- **analyze_user**: Fetch a user's repositories, score each one 0-100 "
        "(license, recency, stars/forks, open-issue ratio, description, language, "
        "topics, archived state) and return the user's totals, average score and "
        "language histogram. The user is added to the comparison set.\n"
        "- **list_comparison**: Show every analyzed user in the order first analyzed.\n"
        "- **remove_from_comparison**: Drop a user from the comparison set.\n\n"
        "### Notes\n"
        "- Re-analyzing a user refreshes their stats without changing their position.\n"
        "- The comparison set lasts only for this session.\n"
        "- On a rate_limited error, tell the user when the limit resets, or suggest "
        "setting GITHUB_TOKEN."
    ),
    lifespan=app_lifespan,
)

# ─── Read-only tools ──────────────────────────────────────────
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(list_comparison)

# ─── Stateful tools ───────────────────────────────────────────
mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, openWorldHint=True))(analyze_user)
mcp.tool(annotations=ToolAnnotations(destructiveHint=True))(remove_from_comparison)
