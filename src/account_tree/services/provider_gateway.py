"""Discovery and activation of the external account provider.

The provider is looked up as soon as the root node is created on a running
loop, otherwise on first use. A missing provider is a normal state
(``acquire`` returns None); a provider that fails to activate raises
``ProviderActivationError`` and is retried from scratch on the next
``acquire``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..core.config import Settings, get_settings_instance
from ..core.events import CompositeDisposable
from ..core.exceptions import AccountTreeException, ProviderActivationError
from ..host.base import SET_CONTEXT_COMMAND, TreeHost
from ..models.account import AccountStatus
from ..providers.base_account_provider import AccountProvider
from ..providers.registry import ExtensionRegistry

logger = logging.getLogger(__name__)


class ProviderGateway:
    """Owns the single account provider handle of one root node."""

    def __init__(
        self,
        registry: ExtensionRegistry,
        host: TreeHost,
        *,
        on_filters_changed: Callable[[None], None],
        on_status_changed: Callable[[AccountStatus], None],
        test_account: AccountProvider | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._registry = registry
        self._host = host
        self._on_filters_changed = on_filters_changed
        self._on_status_changed = on_status_changed
        self._test_account = test_account
        self._settings = settings or get_settings_instance()
        self._task: asyncio.Task[AccountProvider | None] | None = None
        self._subscriptions = CompositeDisposable()
        self._disposed = False

    @property
    def extension_id(self) -> str:
        return self._settings.provider_extension_id

    def start(self) -> asyncio.Task[AccountProvider | None]:
        """Begin acquiring the provider in the background on the running loop."""
        task = self._task
        if task is None or (task.done() and (task.cancelled() or task.exception() is not None)):
            task = self._task = asyncio.ensure_future(self._load())
            task.add_done_callback(_retrieve_exception)
        return task

    async def acquire(self) -> AccountProvider | None:
        """Return the provider, locating and activating it on first use.

        Concurrent callers share one in-flight load. Cancelling a caller does
        not cancel the shared load.
        """
        task = self.start()
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if task.cancelled() and self._task is task:
                self._task = None
            raise
        except Exception:
            # Forget the failed attempt so the next load retries activation
            if self._task is task:
                self._task = None
            raise

    def dispose(self) -> None:
        self._disposed = True
        self._subscriptions.dispose()

    async def _load(self) -> AccountProvider | None:
        account = self._test_account
        if account is None:
            account = await self._activate_extension()
        if account is None:
            logger.info("Account provider not installed", extra={"extension_id": self.extension_id})
            return None

        if self._disposed:
            return account

        self._subscriptions.add(account.on_filters_changed(self._on_filters_changed))
        self._subscriptions.add(account.on_status_changed(self._on_status_changed))
        await self._host.execute_command(SET_CONTEXT_COMMAND, self._settings.installed_context_key, True)
        logger.info(
            "Account provider acquired",
            extra={"extension_id": self.extension_id, "status": _status_value(account.status)},
        )
        return account

    async def _activate_extension(self) -> AccountProvider | None:
        extension = self._registry.get_extension(self.extension_id)
        if extension is None:
            return None

        if not extension.is_active:
            logger.debug("Activating account provider", extra={"extension_id": self.extension_id})
            try:
                await extension.activate()
            except AccountTreeException:
                raise
            except Exception as e:
                logger.error(
                    "Account provider activation failed",
                    extra={"extension_id": self.extension_id, "error": str(e)},
                )
                raise ProviderActivationError(self.extension_id, str(e)) from e

        return extension.exports


def _retrieve_exception(task: asyncio.Task[AccountProvider | None]) -> None:
    # Failures are logged in _activate_extension and re-raised to callers of acquire
    if not task.cancelled():
        task.exception()


def _status_value(status: AccountStatus | str) -> str:
    return status.value if isinstance(status, AccountStatus) else str(status)
