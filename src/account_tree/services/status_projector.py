"""Maps the provider's sign-in status onto placeholder children.

Placeholders are rebuilt on every load; only the subscription branch is
cached. ``project`` returns None when the status calls for reconciling the
real subscription nodes instead.
"""

from __future__ import annotations

from ..core import constants
from ..core.config import Settings, get_settings_instance
from ..host.base import EXTENSION_OPEN_COMMAND
from ..models.account import AccountStatus
from ..providers.base_account_provider import AccountProvider
from ..tree.nodes import GenericTreeNode, ParentTreeNode


class StatusProjector:
    """Builds the status-derived children of the account root."""

    def __init__(self, parent: ParentTreeNode, settings: Settings | None = None) -> None:
        self._parent = parent
        self._settings = settings or get_settings_instance()

    def project(self, status: AccountStatus | str | None, filter_count: int = 0) -> list[GenericTreeNode] | None:
        """Return placeholders for ``status``, or None to reconcile subscriptions.

        ``status`` None means the provider is not installed.
        """
        if status is None:
            return [self._install_provider_node()]

        status = AccountStatus(status)
        if status == AccountStatus.INITIALIZING:
            return [self._loading_node(constants.LOADING_LABEL)]
        if status == AccountStatus.LOGGING_IN:
            return [self._loading_node(constants.SIGNING_IN_LABEL)]
        if status == AccountStatus.LOGGED_OUT:
            return [
                self._command_node(constants.SIGN_IN_LABEL, constants.SIGN_IN_COMMAND_ID),
                self._command_node(constants.CREATE_ACCOUNT_LABEL, constants.CREATE_ACCOUNT_COMMAND_ID),
            ]
        if filter_count == 0:
            return [self._command_node(constants.SELECT_SUBSCRIPTIONS_LABEL, constants.SELECT_SUBSCRIPTIONS_COMMAND_ID)]
        return None

    async def project_account(self, account: AccountProvider | None) -> list[GenericTreeNode] | None:
        """Project the provider's current state, waiting for filters once signed in."""
        if account is None:
            return self.project(None)
        status = AccountStatus(account.status)
        if status != AccountStatus.LOGGED_IN:
            return self.project(status)
        await account.wait_for_filters()
        return self.project(status, len(account.filters))

    def _install_provider_node(self) -> GenericTreeNode:
        return GenericTreeNode(
            self._parent,
            label=constants.INSTALL_PROVIDER_LABEL,
            command_id=EXTENSION_OPEN_COMMAND,
            command_args=[self._settings.provider_extension_id],
            context_value=constants.INSTALL_PROVIDER_CONTEXT_VALUE,
            include_in_tree_item_picker=True,
        )

    def _loading_node(self, label: str) -> GenericTreeNode:
        return GenericTreeNode(
            self._parent,
            label=label,
            command_id=constants.SIGN_IN_COMMAND_ID,
            context_value=constants.COMMAND_CONTEXT_VALUE,
            id=constants.SIGN_IN_COMMAND_ID,
            icon_path=self._settings.loading_icon_path(),
        )

    def _command_node(self, label: str, command_id: str) -> GenericTreeNode:
        return GenericTreeNode(
            self._parent,
            label=label,
            command_id=command_id,
            context_value=constants.COMMAND_CONTEXT_VALUE,
            id=command_id,
            include_in_tree_item_picker=True,
        )
