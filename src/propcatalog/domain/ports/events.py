"""Domain events and the port used to publish them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uuid import UUID

    from propcatalog.domain.model import ArtifactCoordinates


@dataclass(frozen=True, slots=True)
class ArtifactReleased:
    """A new artifact release was registered together with its metadata."""

    entity_id: UUID
    coordinates: ArtifactCoordinates


@runtime_checkable
class ReleaseEventPublisher(Protocol):
    def publish(self, event: ArtifactReleased) -> None: ...
