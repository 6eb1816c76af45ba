"""Application configuration helpers."""

from __future__ import annotations

from .env import ConfigurationError, MissingConfigurationError, env_flag, require_env_vars
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "StorageConfig",
    "configure_logging",
    "env_flag",
    "get_database_config",
    "get_storage_config",
    "require_env_vars",
]
