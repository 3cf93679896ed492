from __future__ import annotations

import logging

from .base_account_provider import ProviderExtension

logger = logging.getLogger(__name__)


class ExtensionRegistry:
    """Lookup of installed host extensions by identifier.

    Hosts populate the registry with whatever extensions are installed; the
    tree only ever asks for the account provider's identifier.
    """

    def __init__(self, extensions: list[ProviderExtension] | None = None) -> None:
        self._extensions: dict[str, ProviderExtension] = {}
        for extension in extensions or []:
            self.register(extension)

    def register(self, extension: ProviderExtension) -> None:
        key = _normalize(extension.id)
        if key in self._extensions:
            logger.warning("Replacing registered extension", extra={"extension_id": extension.id})
        self._extensions[key] = extension

    def unregister(self, extension_id: str) -> None:
        self._extensions.pop(_normalize(extension_id), None)

    def get_extension(self, extension_id: str) -> ProviderExtension | None:
        """Return the extension, or None when it is not installed."""
        return self._extensions.get(_normalize(extension_id))

    def __contains__(self, extension_id: str) -> bool:
        return _normalize(extension_id) in self._extensions


def _normalize(extension_id: str) -> str:
    # Extension identifiers are case-insensitive
    return (extension_id or "").strip().lower()
