"""Helpers for extracting AppContext from FastMCP Context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp.server.fastmcp import Context

from gitpoints.errors import (
    GitpointsError,
    InvalidInputError,
    NotFoundError,
    RateLimitedError,
    TransportError,
)

if TYPE_CHECKING:
    from gitpoints.server import AppContext


def get_context(ctx: Context) -> AppContext:
    """Extract AppContext from FastMCP's lifespan context.

    Raises TypeError if the lifespan context is not an AppContext instance.
    This catches misconfiguration early with a clear error message.
    """
    from gitpoints.server import AppContext

    app = ctx.request_context.lifespan_context
    if not isinstance(app, AppContext):
        msg = (
            f"Expected AppContext in lifespan_context, got {type(app).__name__}. "
            "Is the server configured with app_lifespan?"
        )
        raise TypeError(msg)
    return app


def error_result(exc: GitpointsError) -> dict[str, object]:
    """Render a gitpoints error as a tool result."""
    if isinstance(exc, InvalidInputError):
        kind = "invalid_input"
    elif isinstance(exc, NotFoundError):
        kind = "not_found"
    elif isinstance(exc, RateLimitedError):
        kind = "rate_limited"
    elif isinstance(exc, TransportError):
        kind = "transport"
    else:
        kind = "error"

    result: dict[str, object] = {"success": False, "error": kind, "message": str(exc)}
    if isinstance(exc, RateLimitedError) and exc.reset_at is not None:
        result["reset_at"] = exc.reset_at.isoformat()
    if isinstance(exc, TransportError) and exc.status_code is not None:
        result["status_code"] = exc.status_code
    return result
