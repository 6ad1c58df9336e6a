"""Ports for storing and reading uploaded property metadata documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from propcatalog.domain.model import ArtifactCoordinates, PropertyDefinition


@runtime_checkable
class MetadataStore(Protocol):
    """Keeps one metadata document per artifact release."""

    def get(self, coordinates: ArtifactCoordinates) -> Path | None:
        """Return a handle to the stored document, or ``None`` when nothing was uploaded."""
        ...

    def save(self, coordinates: ArtifactCoordinates, content: bytes) -> Path: ...

    def remove(self, coordinates: ArtifactCoordinates) -> None: ...


@runtime_checkable
class MetadataDocumentReader(Protocol):
    """Callable port turning a stored document into property definitions."""

    def __call__(self, document: Path) -> list[PropertyDefinition]: ...
