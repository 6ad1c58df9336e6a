"""Public domain model surface."""

from __future__ import annotations

from propcatalog.domain.model.coordinates import ArtifactCoordinates
from propcatalog.domain.model.entity import Entity, new_id, utcnow
from propcatalog.domain.model.enums import ChangeKind, DataType, PropertyType, RunStatus
from propcatalog.domain.model.property import (
    FINGERPRINT_SIZE,
    CatalogEntry,
    Deprecation,
    PropertyDefinition,
    normalize_hints,
)
from propcatalog.domain.model.release import Artifact, ArtifactRelease
from propcatalog.domain.model.run import RunRecord, run_key
from propcatalog.domain.model.version import (
    CalendarVersion,
    InvalidVersionError,
    MetadataVersion,
    SemanticVersion,
    UnknownVersion,
    Version,
    parse_version,
)

__all__ = [  # noqa: RUF022
    # identity
    "Entity",
    "new_id",
    "utcnow",
    # enums
    "ChangeKind",
    "DataType",
    "PropertyType",
    "RunStatus",
    # versions
    "CalendarVersion",
    "InvalidVersionError",
    "MetadataVersion",
    "SemanticVersion",
    "UnknownVersion",
    "Version",
    "parse_version",
    # artifacts
    "Artifact",
    "ArtifactCoordinates",
    "ArtifactRelease",
    # properties
    "FINGERPRINT_SIZE",
    "CatalogEntry",
    "Deprecation",
    "PropertyDefinition",
    "normalize_hints",
    # runs
    "RunRecord",
    "run_key",
]
