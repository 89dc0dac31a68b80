"""Configuration management with Pydantic and XDG base directory support."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sinkchain.utils.crypto import load_or_create_fernet_key


def get_xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME directory, defaulting to ~/.config."""
    xdg_config = os.getenv("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


TransformMode = Literal["reversible", "label"]


class Settings(BaseSettings):
    """SinkChain configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="SINKCHAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_dir: Path | None = Field(
        default=None,
        description="Override config directory (defaults to XDG_CONFIG_HOME/sinkchain)",
    )

    # Decorator transforms
    transform_mode: TransformMode = Field(
        default="reversible",
        description="'reversible' uses real encryption/compression; 'label' only annotates text",
    )

    encryption_key_path: Path | None = Field(
        default=None,
        description="Location of the Fernet key used by the encryption decorator",
    )

    compression_level: int = Field(
        default=6,
        ge=0,
        le=9,
        description="zlib compression level used by the compression decorator",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root logging level for the runner",
    )

    def get_config_dir(self) -> Path:
        """Get the config directory, creating if necessary."""
        if self.config_dir:
            config_dir = self.config_dir
        else:
            config_dir = get_xdg_config_home() / "sinkchain"

        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def get_encryption_key(self) -> bytes:
        """Return the Fernet key used by the encryption decorator."""
        key_path = (
            self.encryption_key_path
            if self.encryption_key_path is not None
            else self.get_config_dir() / "sink.key"
        )
        return load_or_create_fernet_key(key_path)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
