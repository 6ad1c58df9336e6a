"""Domain port definitions for adapters."""

from __future__ import annotations

from .events import ArtifactReleased, ReleaseEventPublisher
from .metadata import MetadataDocumentReader, MetadataStore
from .persistence import (
    ArtifactRepository,
    CatalogRepository,
    ReleaseRepository,
    Repository,
    RunRepository,
)
from .scheduling import RunExecution, RunHandler, RunOutcome, RunParameters, RunScheduler
from .unit_of_work import (
    CatalogRepositories,
    CatalogUnitOfWork,
    RepositoryCollection,
    RunRepositories,
    RunUnitOfWork,
    UnitOfWork,
)

__all__ = [
    "ArtifactReleased",
    "ArtifactRepository",
    "CatalogRepositories",
    "CatalogRepository",
    "CatalogUnitOfWork",
    "MetadataDocumentReader",
    "MetadataStore",
    "ReleaseEventPublisher",
    "ReleaseRepository",
    "Repository",
    "RepositoryCollection",
    "RunExecution",
    "RunHandler",
    "RunOutcome",
    "RunParameters",
    "RunRepositories",
    "RunRepository",
    "RunScheduler",
    "RunUnitOfWork",
    "UnitOfWork",
]
