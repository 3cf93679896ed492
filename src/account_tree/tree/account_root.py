"""Root node showing an account's sign-in status and subscriptions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from ..core import constants
from ..core.config import Settings, get_settings_instance
from ..host.base import TreeHost
from ..models.account import AccountStatus
from ..models.context import ActionContext, SubscriptionContext, SubscriptionWizardContext
from ..providers.base_account_provider import AccountProvider
from ..providers.registry import ExtensionRegistry
from ..services.provider_gateway import ProviderGateway
from ..services.refresh_trigger import RefreshTrigger
from ..services.status_projector import StatusProjector
from ..services.subscription_reconciler import RootState, reconcile_subscriptions
from ..services.subscription_resolver import SubscriptionPromptStep, SubscriptionResolver
from .nodes import ParentTreeNode, SubscriptionTreeNode, TreeNode

logger = logging.getLogger(__name__)

SubscriptionFactory = Callable[
    [ParentTreeNode, SubscriptionContext],
    SubscriptionTreeNode | Awaitable[SubscriptionTreeNode],
]


class AccountTreeRoot(ParentTreeNode):
    """Top-level account node.

    Children are status placeholders ("Sign in to Azure...", "Loading...")
    or one node per selected subscription. Subscription nodes are created by
    ``subscription_factory`` (or an override of ``create_subscription_node``)
    and reused across refreshes for as long as the subscription stays
    selected.
    """

    context_value = constants.ACCOUNT_CONTEXT_VALUE
    child_type_label = constants.CHILD_TYPE_LABEL
    auto_select_in_tree_item_picker = True

    def __init__(
        self,
        host: TreeHost,
        registry: ExtensionRegistry,
        subscription_factory: SubscriptionFactory | None = None,
        *,
        parent: ParentTreeNode | None = None,
        test_account: AccountProvider | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(parent)
        self._host = host
        self._settings = settings or get_settings_instance()
        self._subscription_factory = subscription_factory
        self.label = self._settings.root_label

        self.state = RootState()
        self.refresh_trigger = RefreshTrigger(self.refresh)
        self.gateway = ProviderGateway(
            registry,
            host,
            on_filters_changed=self.refresh_trigger.on_filters_changed,
            on_status_changed=self.refresh_trigger.on_status_changed,
            test_account=test_account,
            settings=self._settings,
        )
        self.projector = StatusProjector(self, self._settings)
        self.resolver = SubscriptionResolver(self)

        # Without a running loop the provider is acquired on first use instead
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            self.gateway.start()

    @property
    def host(self) -> TreeHost:
        return self._host

    def create_subscription_node(
        self, root: SubscriptionContext
    ) -> SubscriptionTreeNode | Awaitable[SubscriptionTreeNode]:
        if self._subscription_factory is None:
            raise NotImplementedError(
                f"{type(self).__name__} needs a subscription_factory or a create_subscription_node override"
            )
        return self._subscription_factory(self, root)

    def dispose(self) -> None:
        """Stop listening to the account provider and drop queued refreshes."""
        self.gateway.dispose()
        self.refresh_trigger.dispose()

    async def load_more_children_impl(self, clear_cache: bool, context: ActionContext) -> list[TreeNode]:
        account = await self.gateway.acquire()
        if account is None:
            context.telemetry.properties[constants.ACCOUNT_STATUS_PROPERTY] = constants.NOT_INSTALLED_STATUS
            return list(self.projector.project(None) or [])

        status = AccountStatus(account.status)
        context.telemetry.properties[constants.ACCOUNT_STATUS_PROPERTY] = status.value

        pass_number, previous = self.state.begin_pass()
        try:
            placeholders = await self.projector.project_account(account)
            if placeholders is None:
                nodes = await reconcile_subscriptions(previous or [], account.filters, self.create_subscription_node)
        except BaseException:
            logger.warning("Reconciliation pass failed, keeping previous subscriptions", extra={"pass_number": pass_number})
            self.state.rollback(pass_number, previous)
            raise

        if placeholders is not None:
            self.state.commit(pass_number, [])
            return list(placeholders)
        self.state.commit(pass_number, nodes)
        return list(nodes)

    async def pick_child(self, expected_context_values: Sequence[str]) -> TreeNode | None:
        """Hold the host's picker until sign-in settles; never picks by itself."""
        account = await self.gateway.acquire()
        if account is not None and AccountStatus(account.status).is_transient:
            await self.host.with_progress(constants.WAITING_FOR_SIGN_IN_TITLE, account.wait_for_subscriptions)
        return None

    async def get_subscription_prompt_step(
        self, context: SubscriptionWizardContext
    ) -> SubscriptionPromptStep | None:
        return await self.resolver.resolve_prompt_step(context)
