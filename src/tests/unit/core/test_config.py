"""
Unit tests for Settings validation.
"""

import pytest
from pydantic import ValidationError

from account_tree.core import config
from account_tree.core.config import Settings


def test_defaults_match_the_account_extension():
    settings = Settings()

    assert settings.provider_extension_id == "ms-vscode.azure-account"
    assert settings.installed_context_key == "isAzureAccountInstalled"
    assert settings.root_label == "Azure"


def test_log_level_is_normalized():
    assert Settings(ACCOUNT_TREE_LOG_LEVEL="debug").log_level == "DEBUG"


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValidationError, match="Log level"):
        Settings(ACCOUNT_TREE_LOG_LEVEL="verbose")


def test_invalid_log_format_is_rejected():
    with pytest.raises(ValidationError, match="Log format"):
        Settings(ACCOUNT_TREE_LOG_FORMAT="xml")


def test_relative_resources_dir_is_resolved(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    settings = Settings(ACCOUNT_TREE_RESOURCES_DIR="assets")

    assert settings.resources_dir == str((tmp_path / "assets").resolve())


def test_loading_icon_has_light_and_dark_variants():
    settings = Settings(ACCOUNT_TREE_RESOURCES_DIR="/srv/icons")

    assert settings.loading_icon_path() == {
        "light": "/srv/icons/light/Loading.svg",
        "dark": "/srv/icons/dark/Loading.svg",
    }


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("ACCOUNT_TREE_ROOT_LABEL", "Cloud")

    assert config.get_settings().root_label == "Cloud"


def test_global_instance_is_created_once(monkeypatch):
    monkeypatch.setattr(config, "settings", None)

    first = config.get_settings_instance()

    assert config.get_settings_instance() is first
