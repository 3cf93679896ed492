from .base_account_provider import AccountProvider, ProviderExtension
from .in_memory_account import InMemoryAccountProvider, InMemoryExtension
from .registry import ExtensionRegistry

__all__ = [
    "AccountProvider",
    "ExtensionRegistry",
    "InMemoryAccountProvider",
    "InMemoryExtension",
    "ProviderExtension",
]
