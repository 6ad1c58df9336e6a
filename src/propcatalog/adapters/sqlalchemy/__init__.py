"""SQLAlchemy adapter package for propcatalog."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyArtifactRepository,
    SqlAlchemyCatalogRepository,
    SqlAlchemyReleaseRepository,
    SqlAlchemyRunRepository,
)
from .unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    SqlAlchemyRunUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyArtifactRepository",
    "SqlAlchemyCatalogRepository",
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemyReleaseRepository",
    "SqlAlchemyRunRepository",
    "SqlAlchemyRunUnitOfWork",
    "StartupError",
    "create_all_tables",
    "mapper_registry",
    "shutdown",
    "startup",
    "start_mappers",
]
