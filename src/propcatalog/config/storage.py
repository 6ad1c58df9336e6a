"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "propcatalog"
DEFAULT_DB_FILENAME: Final[str] = "propcatalog.db"
METADATA_DIR_NAME: Final[str] = "metadata"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME
    metadata_dirname: str = METADATA_DIR_NAME
    metadata_override: Path | None = None

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def database_path(self, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return base / self.database_filename

    def metadata_dir(self, *, ensure: bool = True) -> Path:
        if self.metadata_override is not None:
            directory = self.metadata_override.expanduser().resolve()
        else:
            directory = self.resolve_data_dir() / self.metadata_dirname
        if ensure:
            directory.mkdir(parents=True, exist_ok=True)
        return directory

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.database_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return (base_path / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("PROPCATALOG_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else _default_data_dir()
    env_metadata = os.getenv("PROPCATALOG_METADATA_DIR")
    metadata_override = Path(env_metadata) if env_metadata else None
    return StorageConfig(data_dir=data_dir, metadata_override=metadata_override)


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    env_uri = os.getenv("DATABASE_URI")
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    storage_config = storage or get_storage_config()
    return DatabaseConfig(uri=storage_config.database_uri())
