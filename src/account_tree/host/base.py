"""Interfaces the tree expects from its host application.

The host renders nodes, runs commands and shows UI; the tree only calls into
it through these protocols.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..models.context import ActionContext
    from ..tree.nodes import TreeNode

T = TypeVar("T")

SET_CONTEXT_COMMAND = "setContext"
EXTENSION_OPEN_COMMAND = "extension.open"


@runtime_checkable
class TreeHost(Protocol):
    """Host tree-view and command layer."""

    async def execute_command(self, command_id: str, *args: Any) -> Any:
        ...

    async def show_warning_message(self, message: str, *items: str) -> str | None:
        """Show a warning with action buttons; return the chosen item, if any."""
        ...

    async def with_progress(self, title: str, task: Callable[[], Awaitable[T]]) -> T:
        """Run ``task`` while a progress notification titled ``title`` is shown."""
        ...

    async def show_tree_item_picker(
        self,
        expected_context_values: str | Sequence[str],
        context: ActionContext,
    ) -> TreeNode:
        """Let the user pick a node whose context value matches."""
        ...

    async def refresh(self, node: TreeNode) -> None:
        """Tell the view that ``node``'s children changed."""
        ...


@runtime_checkable
class WizardPromptStep(Protocol):
    """A step the host's wizard runs only while ``should_prompt`` is true."""

    async def prompt(self) -> None:
        ...

    def should_prompt(self) -> bool:
        ...
