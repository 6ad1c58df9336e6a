"""File system backed metadata document store."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from propcatalog.domain.errors import MetadataStoreError

if TYPE_CHECKING:
    from pathlib import Path

    from propcatalog.domain.model import ArtifactCoordinates

log = getLogger(__name__)

DOCUMENT_SUFFIX = ".json"

_FORBIDDEN_CHARACTERS = frozenset('/\\:*?"<>|\0')
_RESERVED_SEGMENTS = frozenset({".", ".."})


class FileSystemMetadataStore:
    """Keep one ``<group>/<artifact>/<version>.json`` file per release under ``directory``.

    Every coordinate part becomes one path segment. Parts that could name
    another directory or are not portable file names are rejected with
    ``MetadataStoreError``.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def path_for(self, coordinates: ArtifactCoordinates) -> Path:
        group_id = _segment(coordinates, coordinates.group_id)
        artifact_id = _segment(coordinates, coordinates.artifact_id)
        version = _segment(coordinates, coordinates.version.original)
        path = self.directory / group_id / artifact_id / f"{version}{DOCUMENT_SUFFIX}"

        root = self.directory.resolve()
        if not path.resolve().is_relative_to(root):
            raise MetadataStoreError(
                f"Metadata location for {coordinates} is outside of the store directory"
            )
        return path

    def get(self, coordinates: ArtifactCoordinates) -> Path | None:
        path = self.path_for(coordinates)
        return path if path.is_file() else None

    def save(self, coordinates: ArtifactCoordinates, content: bytes) -> Path:
        path = self.path_for(coordinates)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            raise MetadataStoreError(
                f"Unexpected error occurred while storing metadata for: {coordinates}"
            ) from exc
        log.debug("Stored metadata for %s at %s", coordinates, path)
        return path

    def remove(self, coordinates: ArtifactCoordinates) -> None:
        path = self.path_for(coordinates)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise MetadataStoreError(
                f"Unexpected error occurred while removing metadata for: {coordinates}"
            ) from exc


def _segment(coordinates: ArtifactCoordinates, value: str) -> str:
    if (
        not value
        or value != value.strip()
        or value in _RESERVED_SEGMENTS
        or not _FORBIDDEN_CHARACTERS.isdisjoint(value)
    ):
        raise MetadataStoreError(
            f"Artifact coordinates can not be used as a metadata location: {coordinates!r}"
        )
    return value
