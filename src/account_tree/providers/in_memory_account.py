"""In-process account provider.

Used by hosts that drive sign-in state themselves (and by the test suite) in
place of the external account extension. Status and filter updates fire the
same change events the real provider would.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence

from ..core.events import Disposable, EventEmitter
from ..models.account import AccountStatus, SubscriptionFilter

logger = logging.getLogger(__name__)


class InMemoryAccountProvider:
    """Account provider whose state is set directly by the owner."""

    def __init__(
        self,
        status: AccountStatus = AccountStatus.INITIALIZING,
        filters: Iterable[SubscriptionFilter] = (),
        *,
        filters_ready: bool = True,
    ) -> None:
        self._status = AccountStatus(status)
        self._filters: list[SubscriptionFilter] = list(filters)
        self._filters_ready = asyncio.Event()
        self._subscriptions_ready = asyncio.Event()
        if filters_ready:
            self._filters_ready.set()
        if not self._status.is_transient:
            self._subscriptions_ready.set()
        self._filters_changed: EventEmitter[None] = EventEmitter("filters_changed")
        self._status_changed: EventEmitter[AccountStatus] = EventEmitter("status_changed")

    @property
    def status(self) -> AccountStatus:
        return self._status

    @property
    def filters(self) -> Sequence[SubscriptionFilter]:
        return tuple(self._filters)

    async def wait_for_filters(self) -> bool:
        await self._filters_ready.wait()
        return True

    async def wait_for_subscriptions(self) -> bool:
        await self._subscriptions_ready.wait()
        return self._status == AccountStatus.LOGGED_IN

    def on_filters_changed(self, listener: Callable[[None], None]) -> Disposable:
        return self._filters_changed.subscribe(listener)

    def on_status_changed(self, listener: Callable[[AccountStatus], None]) -> Disposable:
        return self._status_changed.subscribe(listener)

    @property
    def listener_count(self) -> int:
        return self._filters_changed.listener_count + self._status_changed.listener_count

    def set_status(self, status: AccountStatus | str) -> None:
        """Move to a new status and notify listeners when it changed."""
        new_status = AccountStatus(status)
        if new_status == self._status:
            return
        logger.debug("Account status %s -> %s", self._status.value, new_status.value)
        self._status = new_status
        if new_status.is_transient:
            self._subscriptions_ready.clear()
        else:
            self._subscriptions_ready.set()
        self._status_changed.fire(new_status)

    def set_filters(self, filters: Iterable[SubscriptionFilter]) -> None:
        """Replace the filter list, mark it ready and notify listeners."""
        self._filters = list(filters)
        self._filters_ready.set()
        self._filters_changed.fire(None)

    def mark_filters_pending(self) -> None:
        """Block ``wait_for_filters`` until the next ``set_filters`` call."""
        self._filters_ready.clear()

    def sign_in(self, filters: Iterable[SubscriptionFilter]) -> None:
        """Complete a sign-in the way the real provider reports it."""
        self.set_status(AccountStatus.LOGGED_IN)
        self.set_filters(filters)

    def sign_out(self) -> None:
        self._filters = []
        self.set_status(AccountStatus.LOGGED_OUT)


class InMemoryExtension:
    """Host extension wrapper exporting an account provider."""

    def __init__(
        self,
        extension_id: str,
        provider: InMemoryAccountProvider,
        *,
        active: bool = False,
        activation_error: BaseException | None = None,
    ) -> None:
        self._id = extension_id
        self._provider = provider
        self._active = active
        self.activation_error = activation_error
        self.activation_count = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def exports(self) -> InMemoryAccountProvider:
        return self._provider

    async def activate(self) -> InMemoryAccountProvider:
        self.activation_count += 1
        # Yield so callers observe activation as a real suspension point
        await asyncio.sleep(0)
        if self.activation_error is not None:
            raise self.activation_error
        self._active = True
        return self._provider
