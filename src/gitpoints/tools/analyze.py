"""analyze_user tool -- score a GitHub user's repositories."""

from __future__ import annotations

from dataclasses import asdict
from datetime import UTC, datetime

from mcp.server.fastmcp import Context

from gitpoints.analysis import analyze
from gitpoints.config import Settings
from gitpoints.errors import GitpointsError, RateLimitedError
from gitpoints.evaluation.scorer import score_breakdown
from gitpoints.tools._helpers import error_result, get_context

_MAX_LIMIT = 100


async def analyze_user(
    login: str,
    ctx: Context,
    limit: int = 10,
    add_to_comparison: bool = True,
) -> dict[str, object]:
    """Analyze a GitHub user's public repositories and score their quality.

    Each repository gets a 0-100 quality score from license, recency,
    community engagement and documentation signals. The user's stats
    (total stars, forks, average score, language histogram) are added to
    the comparison set unless add_to_comparison is False; analyzing the
    same login again refreshes its entry in place.

    Args:
        login: GitHub login to analyze (e.g. "octocat").
        limit: Number of top-scoring repositories to include (1-100, default 10).
        add_to_comparison: Whether to upsert the stats into the comparison set.

    Returns:
        Result with success, profile, stats, repositories (best first, each
        with quality_score and score_breakdown), total_repositories,
        comparison_size, and github_auth (has_auth, auth_source). On failure:
        success=False with error kind ("invalid_input", "not_found",
        "rate_limited", "transport") and message; rate-limited failures also
        carry github_auth, since unauthenticated requests get a lower limit.
    """
    try:
        app = get_context(ctx)
        now = datetime.now(tz=UTC)
        result = await analyze(login, app.github, now=now)

        if add_to_comparison:
            async with app.comparison_lock:
                app.comparison.upsert(result.profile.login, result.profile, result.stats)

        limit = max(1, min(limit, _MAX_LIMIT))
        repositories: list[dict[str, object]] = []
        for scored in result.repositories[:limit]:
            entry = scored.to_dict()
            entry["score_breakdown"] = score_breakdown(scored.repository, now)
            repositories.append(entry)

        return {
            "success": True,
            "profile": asdict(result.profile),
            "stats": asdict(result.stats),
            "repositories": repositories,
            "total_repositories": len(result.repositories),
            "comparison_size": len(app.comparison),
            "github_auth": _auth_status(app.settings),
        }
    except RateLimitedError as exc:
        failure = error_result(exc)
        failure["github_auth"] = _auth_status(get_context(ctx).settings)
        return failure
    except GitpointsError as exc:
        return error_result(exc)
    except Exception as exc:
        await ctx.error(f"Unexpected error in analyze_user: {exc}")
        return {
            "success": False,
            "error": "internal",
            "message": f"Internal error: {type(exc).__name__}",
        }


def _auth_status(settings: Settings) -> dict[str, object]:
    return {"has_auth": settings.has_auth, "auth_source": settings.token_source}
