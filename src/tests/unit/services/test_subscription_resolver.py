"""
Unit tests for subscription resolution used by downstream wizards.
"""

import pytest

from account_tree.core import constants
from account_tree.core.exceptions import UserCancelledError
from account_tree.models.account import AccountStatus
from account_tree.models.context import SubscriptionContext, SubscriptionWizardContext
from account_tree.providers.in_memory_account import InMemoryAccountProvider
from account_tree.services.subscription_resolver import SubscriptionPromptStep
from account_tree.tree.account_root import AccountTreeRoot
from support import make_filter, subscription_path


def _root(host, registry, factory, settings, provider=None):
    return AccountTreeRoot(host, registry, factory, test_account=provider, settings=settings)


class TestResolvePromptStep:
    @pytest.mark.asyncio
    async def test_single_subscription_fills_context_without_prompt(self, host, registry, factory, settings):
        provider = InMemoryAccountProvider(AccountStatus.LOGGED_IN, [make_filter(1, display_name="Only")])
        root = _root(host, registry, factory, settings, provider)
        context = SubscriptionWizardContext()

        step = await root.get_subscription_prompt_step(context)

        assert step is None
        assert context.subscription_id == "00000000-0000-0000-0000-000000000001"
        assert context.subscription_path == subscription_path(1)
        assert context.subscription_display_name == "Only"
        assert context.tenant_id == "tenant-1"
        assert context.credentials == "credentials-tenant-1"
        host.show_tree_item_picker.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_several_subscriptions_return_prompt_step(self, host, registry, factory, settings):
        provider = InMemoryAccountProvider(AccountStatus.LOGGED_IN, [make_filter(1), make_filter(2)])
        root = _root(host, registry, factory, settings, provider)
        context = SubscriptionWizardContext()

        step = await root.get_subscription_prompt_step(context)

        assert isinstance(step, SubscriptionPromptStep)
        assert step.should_prompt()
        context.subscription_id = "already-chosen"
        assert not step.should_prompt()

    @pytest.mark.asyncio
    async def test_prompt_applies_picked_subscription(self, host, registry, factory, settings):
        provider = InMemoryAccountProvider(AccountStatus.LOGGED_IN, [make_filter(1), make_filter(2)])
        root = _root(host, registry, factory, settings, provider)
        context = SubscriptionWizardContext()
        step = await root.get_subscription_prompt_step(context)
        picked = root.state.subscription_nodes[1]
        host.show_tree_item_picker.return_value = picked

        await step.prompt()

        host.show_tree_item_picker.assert_awaited_once_with(constants.SUBSCRIPTION_CONTEXT_VALUE, context)
        assert context.subscription_path == subscription_path(2)
        assert not step.should_prompt()

    @pytest.mark.asyncio
    async def test_prompt_rejects_non_subscription_pick(self, host, registry, factory, settings):
        step = SubscriptionPromptStep(_root(host, registry, factory, settings), SubscriptionWizardContext())
        host.show_tree_item_picker.return_value = object()

        with pytest.raises(TypeError):
            await step.prompt()

    @pytest.mark.asyncio
    async def test_signed_out_account_still_returns_step(self, host, registry, factory, settings):
        provider = InMemoryAccountProvider(AccountStatus.LOGGED_OUT)
        root = _root(host, registry, factory, settings, provider)

        step = await root.get_subscription_prompt_step(SubscriptionWizardContext())

        assert isinstance(step, SubscriptionPromptStep)


class TestEnsureSubscriptionNodes:
    @pytest.mark.asyncio
    async def test_loads_children_when_never_loaded(self, host, registry, factory, settings):
        provider = InMemoryAccountProvider(AccountStatus.LOGGED_IN, [make_filter(1), make_filter(2)])
        root = _root(host, registry, factory, settings, provider)
        assert root.state.subscription_nodes is None

        nodes = await root.resolver.ensure_subscription_nodes(SubscriptionWizardContext())

        assert [n.id for n in nodes] == [subscription_path(1), subscription_path(2)]
        assert len(factory.calls) == 2

    @pytest.mark.asyncio
    async def test_uses_existing_nodes_without_reloading(self, host, registry, factory, settings):
        provider = InMemoryAccountProvider(AccountStatus.LOGGED_IN, [make_filter(1)])
        root = _root(host, registry, factory, settings, provider)
        existing = factory(root, SubscriptionContext.from_filter(make_filter(9)))
        root.state.subscription_nodes = [existing]

        nodes = await root.resolver.ensure_subscription_nodes(SubscriptionWizardContext())

        assert nodes == [existing]
        assert len(factory.calls) == 1

    @pytest.mark.asyncio
    async def test_missing_provider_cancels_with_warning(self, host, registry, factory, settings):
        root = _root(host, registry, factory, settings)
        context = SubscriptionWizardContext()

        with pytest.raises(UserCancelledError) as exc_info:
            await root.resolver.ensure_subscription_nodes(context)

        assert exc_info.value.step == "requiresAzureAccount"
        assert context.telemetry.properties["cancelStep"] == "requiresAzureAccount"
        host.show_warning_message.assert_awaited_once_with(
            constants.REQUIRES_PROVIDER_MESSAGE,
            constants.VIEW_IN_MARKETPLACE,
        )
        host.execute_command.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_provider_opens_marketplace_when_chosen(self, host, registry, factory, settings):
        root = _root(host, registry, factory, settings)
        host.show_warning_message.return_value = constants.VIEW_IN_MARKETPLACE

        with pytest.raises(UserCancelledError):
            await root.resolver.ensure_subscription_nodes(SubscriptionWizardContext())

        host.execute_command.assert_awaited_once_with("extension.open", "ms-vscode.azure-account")
