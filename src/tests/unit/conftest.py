"""
Shared pytest fixtures and path setup for unit tests.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

# Add src to sys.path so account_tree.* imports work when running pytest from repo root,
# and this directory so test modules can import the shared support module.
PROJECT_SRC = Path(__file__).resolve().parents[2]
for path in (PROJECT_SRC, Path(__file__).resolve().parent):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

import pytest

from account_tree.core.config import Settings
from account_tree.providers.registry import ExtensionRegistry
from support import RecordingFactory


@pytest.fixture
def settings():
    """Settings with package defaults, independent of the environment."""
    return Settings(
        ACCOUNT_TREE_PROVIDER_EXTENSION_ID="ms-vscode.azure-account",
        ACCOUNT_TREE_INSTALLED_CONTEXT_KEY="isAzureAccountInstalled",
        ACCOUNT_TREE_ROOT_LABEL="Azure",
        ACCOUNT_TREE_RESOURCES_DIR="/opt/account-tree/resources",
    )


@pytest.fixture
def host():
    """Mock TreeHost; with_progress runs the task it is given."""
    mock = MagicMock()
    mock.execute_command = AsyncMock(return_value=None)
    mock.show_warning_message = AsyncMock(return_value=None)
    mock.show_tree_item_picker = AsyncMock()
    mock.refresh = AsyncMock(return_value=None)

    async def _with_progress(title, task):
        return await task()

    mock.with_progress = AsyncMock(side_effect=_with_progress)
    return mock


@pytest.fixture
def registry():
    return ExtensionRegistry()


@pytest.fixture
def factory():
    return RecordingFactory()
