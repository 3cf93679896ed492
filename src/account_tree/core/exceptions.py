"""Custom exceptions for the account tree.

A missing account provider is not an exception: it is rendered as an
"install" placeholder. Everything here is a real failure or a cancellation
that the host's error reporting path receives.
"""

from typing import Any


class AccountTreeException(Exception):
    """Base exception class for the account tree."""

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ProviderActivationError(AccountTreeException):
    """Raised when the account provider extension fails to activate."""

    def __init__(self, extension_id: str, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Failed to activate account provider '{extension_id}': {reason}",
            error_code="PROVIDER_ACTIVATION_FAILED",
            details=details or {"extension_id": extension_id, "reason": reason},
        )


class UserCancelledError(AccountTreeException):
    """Raised when a workflow is abandoned by the user.

    Callers treat this as a cancellation, never as a retryable fault.
    """

    def __init__(self, step: str | None = None, details: dict[str, Any] | None = None):
        self.step = step
        super().__init__(
            message="Operation cancelled.",
            error_code="USER_CANCELLED",
            details=details or ({"step": step} if step else {}),
        )


class SubscriptionNodeCreationError(AccountTreeException):
    """Raised when the subscription node factory fails during a reconciliation pass."""

    def __init__(self, subscription_path: str, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Failed to create tree node for subscription '{subscription_path}': {reason}",
            error_code="SUBSCRIPTION_NODE_CREATION_FAILED",
            details=details or {"subscription_path": subscription_path, "reason": reason},
        )


class MissingPropertyError(AccountTreeException):
    """Raised when a required value is unexpectedly absent."""

    def __init__(self, name: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Internal error: Expected value to be neither null nor undefined: {name}",
            error_code="MISSING_PROPERTY",
            details=details or {"name": name},
        )
