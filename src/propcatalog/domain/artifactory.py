"""Registering artifact releases and querying their property catalogs."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from propcatalog.domain.errors import (
    ArtifactoryError,
    ArtifactVersionExistsError,
    ArtifactVersionNotFoundError,
    MetadataStoreError,
)
from propcatalog.domain.model import Artifact, ArtifactRelease, utcnow
from propcatalog.domain.ports.events import ArtifactReleased

if TYPE_CHECKING:
    from collections.abc import Callable

    from propcatalog.domain.model import ArtifactCoordinates, CatalogEntry
    from propcatalog.domain.ports import (
        CatalogUnitOfWork,
        MetadataStore,
        ReleaseEventPublisher,
    )

log = getLogger(__name__)


@dataclass(slots=True)
class Artifactory:
    unit_of_work_factory: Callable[[], CatalogUnitOfWork]
    metadata_store: MetadataStore
    publisher: ReleaseEventPublisher

    def get(self, coordinates: ArtifactCoordinates) -> ArtifactRelease | None:
        with self.unit_of_work_factory() as uow:
            return uow.repositories.releases.find(coordinates)

    def exists(self, coordinates: ArtifactCoordinates) -> bool:
        with self.unit_of_work_factory() as uow:
            return uow.repositories.releases.exists(coordinates)

    def release(self, coordinates: ArtifactCoordinates, document: bytes) -> ArtifactRelease:
        """Record a new release, store its metadata document and announce it."""

        with self.unit_of_work_factory() as uow:
            repositories = uow.repositories
            if repositories.releases.exists(coordinates):
                raise ArtifactVersionExistsError(coordinates)

            artifact = repositories.artifacts.find(coordinates.group_id, coordinates.artifact_id)
            if artifact is None:
                artifact = Artifact(
                    group_id=coordinates.group_id,
                    artifact_id=coordinates.artifact_id,
                )
                repositories.artifacts.add(artifact)
            else:
                artifact.updated_at = utcnow()

            release = ArtifactRelease(
                artifact=artifact,
                version=coordinates.version,
                checksum=hashlib.sha256(document).hexdigest(),
            )
            repositories.releases.add(release)

            try:
                self.metadata_store.save(coordinates, document)
            except MetadataStoreError as exc:
                raise ArtifactoryError(
                    "Unexpected error occurred while storing metadata for artifact: "
                    f"{coordinates}"
                ) from exc

            uow.commit()

        log.info("Released %s", coordinates)
        self.publisher.publish(ArtifactReleased(release.id, coordinates))
        return release

    def properties(self, coordinates: ArtifactCoordinates) -> list[CatalogEntry]:
        """Return the current catalog of the artifact the coordinates belong to.

        The version only has to name a known release; it does not select a
        historical catalog state.
        """

        with self.unit_of_work_factory() as uow:
            release = uow.repositories.releases.find(coordinates)
            if release is None:
                raise ArtifactVersionNotFoundError(coordinates)
            catalog = uow.repositories.catalog.load(release.artifact)
        return sorted(catalog.values(), key=lambda entry: entry.name)
