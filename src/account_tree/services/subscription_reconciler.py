"""Subscription list reconciliation.

Each pass maps the provider's filter list onto subscription nodes, reusing
the node of the previous pass whenever the fully qualified subscription path
matches so that the node's cached subtree survives the refresh.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from ..core.exceptions import AccountTreeException, SubscriptionNodeCreationError
from ..models.account import SubscriptionFilter
from ..models.context import SubscriptionContext
from ..tree.nodes import SubscriptionTreeNode

logger = logging.getLogger(__name__)

SubscriptionNodeFactory = Callable[
    [SubscriptionContext],
    SubscriptionTreeNode | Awaitable[SubscriptionTreeNode],
]


@dataclass
class RootState:
    """Last materialized subscription nodes of one account root.

    ``subscription_nodes`` is None until the first load. Only a
    reconciliation pass writes it.

    Overlapping passes are not prevented: whichever finishes last wins, even
    if it started first. ``commit`` logs when that happens.
    """

    subscription_nodes: list[SubscriptionTreeNode] | None = None
    started_passes: int = 0
    committed_pass: int = 0

    def begin_pass(self) -> tuple[int, list[SubscriptionTreeNode] | None]:
        """Start a pass; returns its number and the nodes it may reuse."""
        self.started_passes += 1
        previous = self.subscription_nodes
        self.subscription_nodes = []
        return self.started_passes, previous

    def rollback(self, pass_number: int, previous: list[SubscriptionTreeNode] | None) -> None:
        """Undo a failed pass unless a newer pass already committed."""
        if self.committed_pass < pass_number:
            self.subscription_nodes = previous

    def commit(self, pass_number: int, nodes: list[SubscriptionTreeNode]) -> None:
        if pass_number < self.committed_pass:
            logger.warning(
                "Stale reconciliation pass overwrote a newer result",
                extra={"pass_number": pass_number, "committed_pass": self.committed_pass},
            )
        self.subscription_nodes = nodes
        self.committed_pass = pass_number


async def reconcile_subscriptions(
    previous: Sequence[SubscriptionTreeNode],
    filters: Sequence[SubscriptionFilter],
    factory: SubscriptionNodeFactory,
) -> list[SubscriptionTreeNode]:
    """Return one node per filter, in filter order.

    New nodes are created concurrently; a single factory failure fails the
    whole pass.
    """
    existing = {node.id: node for node in previous if node.id is not None}

    # A path listed twice still gets a single node
    to_create: dict[str | None, SubscriptionFilter] = {}
    for subscription_filter in filters:
        key = subscription_filter.identity_key
        if key not in existing and key not in to_create:
            to_create[key] = subscription_filter

    created_nodes = await asyncio.gather(*(_create_node(f, factory) for f in to_create.values()))
    created = dict(zip(to_create, created_nodes))

    nodes = [
        existing[f.identity_key] if f.identity_key in existing else created[f.identity_key]
        for f in filters
    ]

    kept = {f.identity_key for f in filters} & existing.keys()
    logger.info(
        "Reconciled subscriptions",
        extra={
            "subscription_count": len(nodes),
            "reused_count": len(kept),
            "created_count": len(created),
            "dropped_count": len(existing) - len(kept),
        },
    )
    return nodes


async def _create_node(
    subscription_filter: SubscriptionFilter,
    factory: SubscriptionNodeFactory,
) -> SubscriptionTreeNode:
    root = SubscriptionContext.from_filter(subscription_filter)
    try:
        node = factory(root)
        if inspect.isawaitable(node):
            node = await node
    except AccountTreeException:
        raise
    except Exception as e:
        raise SubscriptionNodeCreationError(root.subscription_path, str(e)) from e
    return node
