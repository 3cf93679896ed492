"""Value types exchanged with the account provider and the host."""

from .account import AccountStatus, AzureSession, AzureSubscription, SubscriptionFilter
from .context import (
    ActionContext,
    SubscriptionContext,
    SubscriptionWizardContext,
    TelemetryData,
)

__all__ = [
    "AccountStatus",
    "ActionContext",
    "AzureSession",
    "AzureSubscription",
    "SubscriptionContext",
    "SubscriptionFilter",
    "SubscriptionWizardContext",
    "TelemetryData",
]
