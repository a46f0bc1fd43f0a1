"""ComparisonRegistry -- ordered, in-memory set of analyzed users."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from gitpoints.models import ComparisonEntry, UserProfile, UserStats

logger = logging.getLogger(__name__)


def _detached(entry: ComparisonEntry) -> ComparisonEntry:
    """Copy of ``entry`` that shares no mutable state with the stored one."""
    return replace(entry, stats=replace(entry.stats, languages=dict(entry.stats.languages)))


@dataclass
class ComparisonRegistry:
    """Deduplicated collection of ComparisonEntry keyed by login.

    Logins are case-sensitive. Order is kept in an explicit list of keys:
    a re-analyzed login keeps its original position and only its payload
    is replaced. Entries are copied on the way in and out, so no caller
    holds a reference to stored state. Not thread-safe; callers that
    upsert concurrently must serialize through a single lock.
    """

    _order: list[str] = field(default_factory=list, init=False, repr=False)
    _entries: dict[str, ComparisonEntry] = field(default_factory=dict, init=False, repr=False)

    def upsert(
        self,
        login: str,
        profile: UserProfile | None,
        stats: UserStats,
    ) -> ComparisonEntry:
        """Insert ``login`` at the end, or replace its entry in place."""
        entry = ComparisonEntry(
            login=login,
            stats=replace(stats, languages=dict(stats.languages)),
            name=profile.name if profile else None,
            avatar_url=profile.avatar_url if profile else "",
        )
        if login not in self._entries:
            self._order.append(login)
            logger.debug("Added '%s' to comparison (%d entries)", login, len(self._order))
        self._entries[login] = entry
        return _detached(entry)

    def remove(self, login: str) -> bool:
        """Remove ``login``. Returns False if it was not present."""
        if login not in self._entries:
            return False
        del self._entries[login]
        self._order.remove(login)
        return True

    def get(self, login: str) -> ComparisonEntry | None:
        entry = self._entries.get(login)
        return _detached(entry) if entry is not None else None

    def list(self) -> list[ComparisonEntry]:
        """Snapshot of entries in insertion order."""
        return [_detached(self._entries[login]) for login in self._order]

    def clear(self) -> None:
        self._order.clear()
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, login: object) -> bool:
        return login in self._entries
