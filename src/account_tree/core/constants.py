"""Command identifiers and display strings used by the account tree."""

# Commands contributed by the account provider
SIGN_IN_COMMAND_ID = "azure-account.login"
CREATE_ACCOUNT_COMMAND_ID = "azure-account.createAccount"
SELECT_SUBSCRIPTIONS_COMMAND_ID = "azure-account.selectSubscriptions"

# Context values
ACCOUNT_CONTEXT_VALUE = "azureextensionui.azureAccount"
SUBSCRIPTION_CONTEXT_VALUE = "azureextensionui.azureSubscription"
COMMAND_CONTEXT_VALUE = "azureCommand"
INSTALL_PROVIDER_CONTEXT_VALUE = "installAzureAccount"

# Placeholder labels
INSTALL_PROVIDER_LABEL = "Install Azure Account Extension..."
LOADING_LABEL = "Loading..."
SIGNING_IN_LABEL = "Waiting for Azure sign-in..."
SIGN_IN_LABEL = "Sign in to Azure..."
CREATE_ACCOUNT_LABEL = "Create a Free Azure Account..."
SELECT_SUBSCRIPTIONS_LABEL = "Select Subscriptions..."
CHILD_TYPE_LABEL = "subscription"

# Prompts
REQUIRES_PROVIDER_MESSAGE = "This functionality requires installing the Azure Account extension."
VIEW_IN_MARKETPLACE = "View in Marketplace"
WAITING_FOR_SIGN_IN_TITLE = "Waiting for Azure sign-in..."

# Telemetry
ACCOUNT_STATUS_PROPERTY = "accountStatus"
NOT_INSTALLED_STATUS = "notInstalled"
CANCEL_STEP_PROPERTY = "cancelStep"
REQUIRES_PROVIDER_STEP = "requiresAzureAccount"
