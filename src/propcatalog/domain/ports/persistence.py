"""Ports for persisting domain aggregates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from propcatalog.domain.model import Artifact, ArtifactRelease, RunRecord

if TYPE_CHECKING:
    from propcatalog.domain.model import ArtifactCoordinates, CatalogEntry
    from propcatalog.domain.reconciliation import ReconciliationResult


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ArtifactRepository(Repository[Artifact], Protocol):
    """Persistence contract for artifacts."""

    def find(self, group_id: str, artifact_id: str) -> Artifact | None: ...


@runtime_checkable
class ReleaseRepository(Repository[ArtifactRelease], Protocol):
    """Persistence contract for release records."""

    def find(self, coordinates: ArtifactCoordinates) -> ArtifactRelease | None: ...

    def exists(self, coordinates: ArtifactCoordinates) -> bool: ...


@runtime_checkable
class CatalogRepository(Protocol):
    """Persistence contract for an artifact's property catalog."""

    def load(self, artifact: Artifact) -> dict[str, CatalogEntry]:
        """Return the current catalog of ``artifact`` keyed by property name."""
        ...

    def apply(self, artifact: Artifact, result: ReconciliationResult) -> None:
        """Write the inserts, updates and deletes described by ``result``."""
        ...


@runtime_checkable
class RunRepository(Repository[RunRecord], Protocol):
    """Persistence contract for scheduled run bookkeeping."""

    def find(self, run_key: str) -> RunRecord | None: ...
