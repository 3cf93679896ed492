"""Configuration management for the account tree.

Uses Pydantic Settings for type-safe, environment-based configuration.
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv(override=True)

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Account tree settings with environment variable support."""

    # Account provider discovery
    provider_extension_id: str = Field("ms-vscode.azure-account", alias="ACCOUNT_TREE_PROVIDER_EXTENSION_ID")
    # Host context flag set once the provider has been acquired
    installed_context_key: str = Field("isAzureAccountInstalled", alias="ACCOUNT_TREE_INSTALLED_CONTEXT_KEY")

    # Presentation
    root_label: str = Field("Azure", alias="ACCOUNT_TREE_ROOT_LABEL")
    resources_dir: str = Field(str(PACKAGE_ROOT / "resources"), alias="ACCOUNT_TREE_RESOURCES_DIR")

    # Logging configuration
    environment: str = Field("development", alias="ACCOUNT_TREE_ENVIRONMENT")
    log_level: str = Field("INFO", alias="ACCOUNT_TREE_LOG_LEVEL")
    log_format: str = Field("text", alias="ACCOUNT_TREE_LOG_FORMAT")  # text or json

    @field_validator("resources_dir", mode="before")
    @classmethod
    def _resolve_resources_dir(cls, v: str) -> str:
        p = Path(v).expanduser()
        if p.is_absolute():
            return str(p)
        return str(p.resolve())

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level setting."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format setting."""
        valid_formats = ["text", "json"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    def loading_icon_path(self) -> dict[str, str]:
        """Light and dark variants of the loading placeholder icon."""
        base = Path(self.resources_dir)
        return {
            "light": str(base / "light" / "Loading.svg"),
            "dark": str(base / "dark" / "Loading.svg"),
        }

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Build a fresh settings instance from the environment."""
    return Settings()  # type: ignore[call-arg]


# Global settings instance - will be created when first accessed
settings = None


def get_settings_instance() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global settings  # noqa: PLW0603
    if settings is None:
        settings = get_settings()
    return settings
