"""Maven style ``group:artifact:version`` coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from propcatalog.domain.model.version import Version, parse_version


@total_ordering
@dataclass(frozen=True, slots=True)
class ArtifactCoordinates:
    """Address of a single artifact release.

    Coordinates order by group id, then artifact id, then version.
    """

    group_id: str
    artifact_id: str
    version: Version

    @classmethod
    def of(cls, group_id: str, artifact_id: str, version: str | Version) -> ArtifactCoordinates:
        if not isinstance(version, Version):
            version = parse_version(version)
        return cls(group_id, artifact_id, version)

    @classmethod
    def parse(cls, coordinates: str | None) -> ArtifactCoordinates:
        if coordinates is None or not coordinates.strip():
            raise ValueError("Artifact coordinates must not be null or blank")

        parts = coordinates.split(":")
        if len(parts) != 3 or not parts[0].strip() or not parts[1].strip():
            raise ValueError(f"Invalid Artifact coordinates: {coordinates}")

        group_id, artifact_id, version = parts
        return cls(group_id, artifact_id, parse_version(version))

    @property
    def artifact_key(self) -> tuple[str, str]:
        """Version independent identity of the artifact."""

        return (self.group_id, self.artifact_id)

    def format(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version.original}"

    def __str__(self) -> str:
        return self.format()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ArtifactCoordinates):
            return NotImplemented
        if self.artifact_key != other.artifact_key:
            return self.artifact_key < other.artifact_key
        return self.version < other.version
