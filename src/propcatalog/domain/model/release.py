"""Artifacts and their released versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from propcatalog.domain.model.coordinates import ArtifactCoordinates
from propcatalog.domain.model.entity import Entity, utcnow

if TYPE_CHECKING:
    from datetime import datetime

    from propcatalog.domain.model.version import Version


@dataclass(eq=False, kw_only=True)
class Artifact(Entity):
    """Version independent identity of ``group_id:artifact_id``.

    ``last_processed_version`` is the version of the most recent release whose
    properties were folded into this artifact's catalog.
    """

    group_id: str
    artifact_id: str
    last_processed_version: Version | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def mark_processed(self, version: Version) -> None:
        self.last_processed_version = version
        self.updated_at = utcnow()


@dataclass(eq=False, kw_only=True)
class ArtifactRelease(Entity):
    """Release record for one set of coordinates."""

    artifact: Artifact
    version: Version
    checksum: str | None = None
    released_at: datetime = field(default_factory=utcnow)

    @property
    def coordinates(self) -> ArtifactCoordinates:
        return ArtifactCoordinates(self.artifact.group_id, self.artifact.artifact_id, self.version)
