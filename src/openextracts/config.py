"""Settings and configuration file loading for OpenExtracts."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from openextracts.domain.rules_config import ModConfig


class ConfigError(RuntimeError):
    """Raised when the configuration file is missing or malformed."""


class Settings(BaseSettings):
    """Where to find the configuration and the location database."""

    model_config = SettingsConfigDict(
        env_prefix="OPENEXTRACTS_", env_file=".env", env_file_encoding="utf-8"
    )

    config_path: Path = Field(
        default=Path("config/config.json"), description="Extract rule configuration file"
    )
    database_dir: Path = Field(
        default=Path("database/locations"),
        description="Folder holding one sub-folder with a base.json per location",
    )
    log_level: str = Field(default="INFO", description="Console log level")
    color: bool = Field(default=True, description="Render log lines with ANSI colors")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()


def load_mod_config(path: Path) -> ModConfig:
    """Read and validate the extract rule configuration."""

    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise ConfigError(f"configuration file not found: {path}") from exc

    try:
        return ModConfig.model_validate_json(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration in {path}: {exc}") from exc
