"""Test doubles shared across the unit test packages."""

from account_tree.models.account import AzureSession, AzureSubscription, SubscriptionFilter
from account_tree.tree.nodes import SubscriptionTreeNode


class FakeSubscriptionNode(SubscriptionTreeNode):
    """Subscription node with an empty subtree."""

    async def load_more_children_impl(self, clear_cache, context):
        return []


def make_filter(number: int, *, tenant_id: str = "tenant-1", display_name: str | None = None) -> SubscriptionFilter:
    """Build a filter for ``/subscriptions/<guid ending in number>``."""
    guid = f"00000000-0000-0000-0000-{number:012d}"
    return SubscriptionFilter(
        session=AzureSession(
            credentials=f"credentials-{tenant_id}",
            tenant_id=tenant_id,
            user_id="user@example.com",
            environment="AzureCloud",
        ),
        subscription=AzureSubscription(
            id=f"/subscriptions/{guid}",
            subscription_id=guid,
            display_name=display_name or f"Subscription {number}",
        ),
    )


def subscription_path(number: int) -> str:
    return f"/subscriptions/00000000-0000-0000-0000-{number:012d}"


class RecordingFactory:
    """Subscription node factory that remembers every context it was given."""

    def __init__(self):
        self.calls = []

    def __call__(self, parent, root):
        self.calls.append(root)
        return FakeSubscriptionNode(parent, root)
