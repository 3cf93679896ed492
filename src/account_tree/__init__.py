"""Account status and subscription tree for host navigation views."""

from .core.exceptions import (
    AccountTreeException,
    MissingPropertyError,
    ProviderActivationError,
    SubscriptionNodeCreationError,
    UserCancelledError,
)
from .models import (
    AccountStatus,
    ActionContext,
    AzureSession,
    AzureSubscription,
    SubscriptionContext,
    SubscriptionFilter,
    SubscriptionWizardContext,
)
from .providers import AccountProvider, ExtensionRegistry, InMemoryAccountProvider, InMemoryExtension
from .tree.account_root import AccountTreeRoot
from .tree.nodes import GenericTreeNode, ParentTreeNode, SubscriptionTreeNode, TreeNode

__version__ = "0.1.0"

__all__ = [
    "AccountProvider",
    "AccountStatus",
    "AccountTreeException",
    "AccountTreeRoot",
    "ActionContext",
    "AzureSession",
    "AzureSubscription",
    "ExtensionRegistry",
    "GenericTreeNode",
    "InMemoryAccountProvider",
    "InMemoryExtension",
    "MissingPropertyError",
    "ParentTreeNode",
    "ProviderActivationError",
    "SubscriptionContext",
    "SubscriptionFilter",
    "SubscriptionNodeCreationError",
    "SubscriptionTreeNode",
    "SubscriptionWizardContext",
    "TreeNode",
    "UserCancelledError",
]
