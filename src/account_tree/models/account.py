"""Account provider value types.

These mirror what the account provider reports. They are treated as
immutable snapshots for the duration of one reconciliation pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AccountStatus(str, Enum):
    """Sign-in status reported by the account provider."""

    INITIALIZING = "Initializing"
    LOGGING_IN = "LoggingIn"
    LOGGED_OUT = "LoggedOut"
    LOGGED_IN = "LoggedIn"

    @property
    def is_transient(self) -> bool:
        """True while the provider has not settled on signed-in or signed-out."""
        return self in (AccountStatus.INITIALIZING, AccountStatus.LOGGING_IN)


@dataclass(frozen=True)
class AzureSession:
    """Signed-in session a subscription belongs to."""

    credentials: Any
    tenant_id: str
    user_id: str
    environment: Any


@dataclass(frozen=True)
class AzureSubscription:
    """Subscription identity as reported by the provider.

    Attributes:
        id: Fully qualified id, e.g. ``/subscriptions/<guid>``. Used as the
            tree identity key.
        subscription_id: The bare guid, used when building API clients.
        display_name: Human readable subscription name.
    """

    id: str | None
    subscription_id: str | None
    display_name: str | None


@dataclass(frozen=True)
class SubscriptionFilter:
    """One user-selected subscription together with its session."""

    session: AzureSession
    subscription: AzureSubscription

    @property
    def identity_key(self) -> str | None:
        return self.subscription.id
