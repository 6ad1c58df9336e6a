"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .processing import ReleaseProcessingConfig, get_release_processing_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "ReleaseProcessingConfig",
    "StorageConfig",
    "configure_logging",
    "env_flag",
    "get_database_config",
    "get_release_processing_config",
    "get_storage_config",
    "require_env_vars",
]
