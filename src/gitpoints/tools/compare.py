"""Comparison tools -- list and remove analyzed users."""

from __future__ import annotations

from dataclasses import asdict

from mcp.server.fastmcp import Context

from gitpoints.models import ComparisonEntry
from gitpoints.tools._helpers import get_context


def _leaders(entries: list[ComparisonEntry]) -> dict[str, str | None]:
    """Logins leading on stars and on average quality. Ties go to the earlier entry."""
    if not entries:
        return {"most_stars": None, "highest_avg_quality": None}
    most_stars = max(entries, key=lambda e: e.stats.total_stars)
    best_quality = max(entries, key=lambda e: e.stats.avg_quality_score)
    return {"most_stars": most_stars.login, "highest_avg_quality": best_quality.login}


async def list_comparison(ctx: Context) -> dict[str, object]:
    """Show every user analyzed in this session, in the order first analyzed.

    Returns:
        Result with entries (login, name, avatar_url, stats) and leaders
        (most_stars, highest_avg_quality).
    """
    try:
        app = get_context(ctx)
        entries = app.comparison.list()
        return {
            "success": True,
            "entries": [asdict(entry) for entry in entries],
            "leaders": _leaders(entries),
        }
    except Exception as exc:
        await ctx.error(f"Unexpected error in list_comparison: {exc}")
        return {
            "success": False,
            "error": "internal",
            "message": f"Internal error: {type(exc).__name__}",
        }


async def remove_from_comparison(login: str, ctx: Context) -> dict[str, object]:
    """Remove a user from the comparison set.

    Removing a login that is not in the set is not an error.

    Args:
        login: Exact (case-sensitive) login as shown by list_comparison.

    Returns:
        Result with success, login, removed, and comparison_size.
    """
    try:
        app = get_context(ctx)
        async with app.comparison_lock:
            removed = app.comparison.remove(login)
        return {
            "success": True,
            "login": login,
            "removed": removed,
            "comparison_size": len(app.comparison),
        }
    except Exception as exc:
        await ctx.error(f"Unexpected error in remove_from_comparison: {exc}")
        return {
            "success": False,
            "error": "internal",
            "message": f"Internal error: {type(exc).__name__}",
        }
