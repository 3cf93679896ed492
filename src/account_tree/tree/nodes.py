"""Minimal tree node base classes.

Hosts normally bring their own node hierarchy; these classes carry just the
attributes and child caching the account tree relies on.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..core.constants import SUBSCRIPTION_CONTEXT_VALUE

if TYPE_CHECKING:
    from ..host.base import TreeHost
    from ..models.context import ActionContext, SubscriptionContext


class TreeNode:
    """A single node in the host's tree view."""

    context_value: str = ""

    def __init__(self, parent: ParentTreeNode | None = None) -> None:
        self.parent = parent
        self.id: str | None = None
        self.label: str = ""
        self.description: str | None = None
        self.icon_path: Any = None
        self.command_id: str | None = None
        self.command_args: list[Any] = []
        self.include_in_tree_item_picker: bool = False

    @property
    def full_id(self) -> str:
        own = self.id if self.id is not None else self.label
        if self.parent is None:
            return own
        return f"{self.parent.full_id}/{own}"

    @property
    def host(self) -> TreeHost:
        if self.parent is None:
            raise RuntimeError(f"Tree node '{self.label}' is not attached to a host")
        return self.parent.host

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, label={self.label!r})"


class GenericTreeNode(TreeNode):
    """Display-only node that runs a command when selected."""

    def __init__(
        self,
        parent: ParentTreeNode | None,
        *,
        label: str,
        context_value: str,
        command_id: str | None = None,
        command_args: Sequence[Any] = (),
        id: str | None = None,  # noqa: A002
        icon_path: Any = None,
        description: str | None = None,
        include_in_tree_item_picker: bool = False,
    ) -> None:
        super().__init__(parent)
        self.label = label
        self.context_value = context_value
        self.command_id = command_id
        self.command_args = list(command_args)
        self.id = id
        self.icon_path = icon_path
        self.description = description
        self.include_in_tree_item_picker = include_in_tree_item_picker


class ParentTreeNode(TreeNode):
    """Node with lazily loaded, cached children.

    Child loading is serialized per node: concurrent ``get_cached_children``
    calls wait for the in-flight load instead of starting another one.
    """

    def __init__(self, parent: ParentTreeNode | None = None) -> None:
        super().__init__(parent)
        self._cached_children: list[TreeNode] | None = None
        self._cache_generation = 0
        self._load_lock = asyncio.Lock()

    def has_more_children(self) -> bool:
        return False

    async def load_more_children_impl(self, clear_cache: bool, context: ActionContext) -> list[TreeNode]:
        raise NotImplementedError

    async def pick_child(self, expected_context_values: Sequence[str]) -> TreeNode | None:
        """Hook for the host's picker; None lets the generic picker continue."""
        return None

    async def get_cached_children(self, context: ActionContext) -> list[TreeNode]:
        async with self._load_lock:
            if self._cached_children is not None:
                return list(self._cached_children)
            generation = self._cache_generation
            children = list(await self.load_more_children_impl(True, context))
            # A refresh during the load invalidates what was just loaded
            if generation == self._cache_generation:
                self._cached_children = children
            return list(children)

    async def get_children(self, context: ActionContext, force_refresh: bool = False) -> list[TreeNode]:
        if force_refresh:
            self.clear_cache()
        return await self.get_cached_children(context)

    def clear_cache(self) -> None:
        self._cache_generation += 1
        self._cached_children = None

    async def refresh(self) -> None:
        """Drop cached children and ask the host to redraw this node."""
        self.clear_cache()
        await self.host.refresh(self)


class SubscriptionTreeNode(ParentTreeNode):
    """Base for the per-subscription subtree built by a deployment's factory.

    The node id is the fully qualified subscription path, which is what the
    account tree uses to recognize the same subscription across refreshes.
    """

    context_value = SUBSCRIPTION_CONTEXT_VALUE

    def __init__(self, parent: ParentTreeNode | None, root: SubscriptionContext) -> None:
        super().__init__(parent)
        self.root = root
        self.id = root.subscription_path
        self.label = root.subscription_display_name
