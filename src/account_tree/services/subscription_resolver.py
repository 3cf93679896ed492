"""Resolves which subscription a downstream workflow should use.

With a single subscription the choice is made silently; with several, the
caller gets a prompt step that shows the host's subscription picker.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core import constants
from ..core.exceptions import UserCancelledError
from ..host.base import EXTENSION_OPEN_COMMAND
from ..models.context import ActionContext, SubscriptionWizardContext
from ..tree.nodes import SubscriptionTreeNode
from ..utils.non_null import non_null_value

if TYPE_CHECKING:
    from ..tree.account_root import AccountTreeRoot

logger = logging.getLogger(__name__)


@dataclass
class SubscriptionPromptStep:
    """Wizard step that asks the user to pick one of several subscriptions."""

    root: AccountTreeRoot
    context: SubscriptionWizardContext

    async def prompt(self) -> None:
        node = await self.root.host.show_tree_item_picker(SubscriptionTreeNode.context_value, self.context)
        if not isinstance(node, SubscriptionTreeNode):
            raise TypeError(f"Expected a subscription node, got {type(node).__name__}")
        self.context.apply_subscription(node.root)

    def should_prompt(self) -> bool:
        return not self.context.subscription_id


class SubscriptionResolver:
    def __init__(self, root: AccountTreeRoot) -> None:
        self._root = root

    async def resolve_prompt_step(self, context: SubscriptionWizardContext) -> SubscriptionPromptStep | None:
        """Fill ``context`` directly when only one subscription exists.

        Returns None when no prompting is needed, otherwise a prompt step.
        """
        subscriptions = await self.ensure_subscription_nodes(context)
        if len(subscriptions) == 1:
            context.apply_subscription(subscriptions[0].root)
            return None
        return SubscriptionPromptStep(self._root, context)

    async def ensure_subscription_nodes(self, context: ActionContext) -> list[SubscriptionTreeNode]:
        """Return the current subscription nodes, loading them if needed.

        Raises:
            UserCancelledError: the account provider is not installed.
        """
        account = await self._root.gateway.acquire()
        if account is None:
            context.telemetry.properties[constants.CANCEL_STEP_PROPERTY] = constants.REQUIRES_PROVIDER_STEP
            host = self._root.host
            choice = await host.show_warning_message(
                constants.REQUIRES_PROVIDER_MESSAGE,
                constants.VIEW_IN_MARKETPLACE,
            )
            if choice == constants.VIEW_IN_MARKETPLACE:
                await host.execute_command(EXTENSION_OPEN_COMMAND, self._root.gateway.extension_id)
            logger.info("Subscription workflow cancelled: account provider not installed")
            raise UserCancelledError(constants.REQUIRES_PROVIDER_STEP)

        if self._root.state.subscription_nodes is None:
            await self._root.get_cached_children(context)

        return list(non_null_value(self._root.state.subscription_nodes, "subscription_nodes"))
