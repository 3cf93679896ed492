from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from ..core.events import Disposable
from ..models.account import AccountStatus, SubscriptionFilter


@runtime_checkable
class AccountProvider(Protocol):
    """Interface of the external account provider.

    The provider owns sign-in and the user's subscription filter selection;
    the tree only reads its state and listens for changes.

    Event contract:
        A status change to ``LoggedIn`` must eventually be followed by a
        filters-changed event. The tree does not refresh on ``LoggedIn``
        alone and would otherwise stay on its loading placeholder.
    """

    @property
    def status(self) -> AccountStatus | str:
        ...

    @property
    def filters(self) -> Sequence[SubscriptionFilter]:
        """Selected subscriptions in user-configured order."""
        ...

    async def wait_for_filters(self) -> bool:
        """Resolve once the filter list is ready to be read."""
        ...

    async def wait_for_subscriptions(self) -> bool:
        """Resolve once the subscription list is known (sign-in finished)."""
        ...

    def on_filters_changed(self, listener: Callable[[None], None]) -> Disposable:
        ...

    def on_status_changed(self, listener: Callable[[AccountStatus], None]) -> Disposable:
        ...


@runtime_checkable
class ProviderExtension(Protocol):
    """A locatable host extension that exports an account provider."""

    @property
    def id(self) -> str:
        ...

    @property
    def is_active(self) -> bool:
        ...

    @property
    def exports(self) -> AccountProvider:
        ...

    async def activate(self) -> AccountProvider:
        ...
