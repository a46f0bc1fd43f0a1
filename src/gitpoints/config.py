"""Runtime settings resolved from the environment."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_MAX_PAGES = 10
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class Settings:
    """GitHub access settings shared by the client and the server."""

    api_url: str = DEFAULT_API_URL
    token: str | None = None
    token_source: str = "none"  # env | gh_cli | none
    max_pages: int = DEFAULT_MAX_PAGES
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def has_auth(self) -> bool:
        return bool(self.token)


def load_settings() -> Settings:
    """Build Settings from GITHUB_TOKEN and the GITPOINTS_* variables."""
    token, source = resolve_github_token()
    return Settings(
        api_url=os.environ.get("GITPOINTS_API_URL", "").strip().rstrip("/") or DEFAULT_API_URL,
        token=token,
        token_source=source,
        max_pages=_positive_int_env("GITPOINTS_MAX_PAGES", DEFAULT_MAX_PAGES),
        timeout=_positive_float_env("GITPOINTS_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
    )


def resolve_github_token() -> tuple[str | None, str]:
    """Resolve auth token: env first, then `gh auth token` fallback."""
    env_token = os.environ.get("GITHUB_TOKEN", "").strip()
    if env_token:
        return env_token, "env"

    gh_token = _resolve_gh_cli_token()
    if gh_token:
        logger.info("Using GitHub token from `gh auth token` fallback.")
        return gh_token, "gh_cli"

    logger.info(
        "No GitHub auth token found (checked GITHUB_TOKEN and `gh auth token`). "
        "Unauthenticated requests are limited to 60 per hour."
    )
    return None, "none"


def _resolve_gh_cli_token() -> str | None:
    """Try to read a token from local GitHub CLI auth context."""
    try:
        completed = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=2,
            check=False,
        )
    except (OSError, subprocess.SubprocessError):
        return None

    if completed.returncode != 0:
        return None
    token = completed.stdout.strip()
    return token or None


def _positive_int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    return value


def _positive_float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    return value
