"""Contexts passed between the host, the tree and downstream workflows."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from ..utils.non_null import non_null_prop
from .account import SubscriptionFilter


@dataclass(frozen=True)
class SubscriptionContext:
    """Resolved subscription context handed to subtree factories.

    ``subscription_path`` is the fully qualified id and doubles as the tree
    node id; ``subscription_id`` is the bare guid.
    """

    credentials: Any
    subscription_display_name: str
    subscription_id: str
    subscription_path: str
    tenant_id: str
    user_id: str
    environment: Any

    @classmethod
    def from_filter(cls, subscription_filter: SubscriptionFilter) -> "SubscriptionContext":
        subscription = subscription_filter.subscription
        session = subscription_filter.session
        return cls(
            credentials=session.credentials,
            subscription_display_name=non_null_prop(subscription, "display_name"),
            subscription_id=non_null_prop(subscription, "subscription_id"),
            subscription_path=non_null_prop(subscription, "id"),
            tenant_id=session.tenant_id,
            user_id=session.user_id,
            environment=session.environment,
        )


@dataclass
class TelemetryData:
    properties: dict[str, str] = field(default_factory=dict)
    measurements: dict[str, float] = field(default_factory=dict)


@dataclass
class ActionContext:
    """Per-invocation context supplied by the host for every command."""

    telemetry: TelemetryData = field(default_factory=TelemetryData)


@dataclass
class SubscriptionWizardContext(ActionContext):
    """Action context that a wizard fills in with a chosen subscription."""

    credentials: Any = None
    subscription_display_name: str | None = None
    subscription_id: str | None = None
    subscription_path: str | None = None
    tenant_id: str | None = None
    user_id: str | None = None
    environment: Any = None

    def apply_subscription(self, root: SubscriptionContext) -> None:
        """Copy every field of a resolved subscription into this context."""
        for f in fields(root):
            setattr(self, f.name, getattr(root, f.name))
