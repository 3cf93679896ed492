"""Turns provider change events into tree refreshes.

Refreshes run as event-loop tasks so that nothing re-enters the tree while
the provider is still delivering an event.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ..models.account import AccountStatus

logger = logging.getLogger(__name__)


def should_refresh_on_status(status: AccountStatus | str) -> bool:
    """False for ``LoggedIn``: the filters-changed event that follows does the refresh.

    Refreshing on ``LoggedIn`` alone would briefly show the "select
    subscriptions" placeholder before the filter list arrives.
    """
    return AccountStatus(status) != AccountStatus.LOGGED_IN


class RefreshTrigger:
    """Schedules ``refresh`` in response to provider events."""

    def __init__(self, refresh: Callable[[], Awaitable[None]]) -> None:
        self._refresh = refresh
        self._pending: set[asyncio.Task[None]] = set()
        self._disposed = False

    @property
    def pending(self) -> int:
        return len(self._pending)

    def on_filters_changed(self, _event: None = None) -> None:
        self.schedule("filters_changed")

    def on_status_changed(self, status: AccountStatus | str) -> None:
        try:
            status = AccountStatus(status)
        except ValueError:
            logger.warning("Unknown account status, refreshing", extra={"status": str(status)})
            self.schedule("status_changed")
            return
        if should_refresh_on_status(status):
            self.schedule("status_changed")
        else:
            logger.debug("Skipping refresh on status change", extra={"status": status.value})

    def schedule(self, reason: str) -> asyncio.Task[None] | None:
        """Enqueue a refresh on the running loop; None once disposed."""
        if self._disposed:
            logger.debug("Ignoring refresh after dispose", extra={"reason": reason})
            return None
        task = asyncio.get_running_loop().create_task(self._run(reason), name=f"account-tree:refresh:{reason}")
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def dispose(self) -> None:
        """Cancel queued refreshes and ignore later events."""
        self._disposed = True
        for task in list(self._pending):
            task.cancel()

    async def wait_idle(self) -> None:
        """Wait for every refresh scheduled so far."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _run(self, reason: str) -> None:
        logger.debug("Refreshing account tree", extra={"reason": reason})
        try:
            await self._refresh()
        except Exception:
            logger.exception("Account tree refresh failed", extra={"reason": reason})
