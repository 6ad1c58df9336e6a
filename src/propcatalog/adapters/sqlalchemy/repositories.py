"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update

from propcatalog.adapters.sqlalchemy.mappings import (
    artifact_release_table,
    artifact_table,
    property_definition_table,
    run_record_table,
)
from propcatalog.domain.model import (
    Artifact,
    ArtifactRelease,
    CatalogEntry,
    Deprecation,
    PropertyDefinition,
    RunRecord,
)

if TYPE_CHECKING:
    from sqlalchemy import Row
    from sqlalchemy.orm import Session

    from propcatalog.domain.model import ArtifactCoordinates
    from propcatalog.domain.reconciliation import ReconciliationResult


class SqlAlchemyArtifactRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Artifact) -> None:
        self.session.add(entity)

    def find(self, group_id: str, artifact_id: str) -> Artifact | None:
        stmt = (
            select(Artifact)
            .where(artifact_table.c.group_id == group_id)
            .where(artifact_table.c.artifact_id == artifact_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyReleaseRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: ArtifactRelease) -> None:
        self.session.add(entity)

    def find(self, coordinates: ArtifactCoordinates) -> ArtifactRelease | None:
        stmt = (
            select(ArtifactRelease)
            .join(artifact_table, artifact_release_table.c.artifact_id == artifact_table.c.id)
            .where(artifact_table.c.group_id == coordinates.group_id)
            .where(artifact_table.c.artifact_id == coordinates.artifact_id)
            .where(artifact_release_table.c.version == coordinates.version)
        )
        return self.session.execute(stmt).unique().scalar_one_or_none()

    def exists(self, coordinates: ArtifactCoordinates) -> bool:
        stmt = (
            select(artifact_release_table.c.id)
            .join(artifact_table, artifact_release_table.c.artifact_id == artifact_table.c.id)
            .where(artifact_table.c.group_id == coordinates.group_id)
            .where(artifact_table.c.artifact_id == coordinates.artifact_id)
            .where(artifact_release_table.c.version == coordinates.version)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none() is not None


class SqlAlchemyCatalogRepository:
    """Catalog rows are value objects keyed by ``(artifact_id, name)``.

    They are written with Core statements so that a reconciliation result maps
    onto exactly one insert, update or delete per changed property.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def load(self, artifact: Artifact) -> dict[str, CatalogEntry]:
        stmt = (
            select(property_definition_table)
            .where(property_definition_table.c.artifact_id == artifact.id)
            .order_by(property_definition_table.c.name)
        )
        self.session.flush()
        rows = self.session.execute(stmt).all()
        return {row.name: _entry_from_row(row) for row in rows}

    def apply(self, artifact: Artifact, result: ReconciliationResult) -> None:
        self.session.flush()
        table = property_definition_table

        if result.removed:
            self.session.execute(
                delete(table)
                .where(table.c.artifact_id == artifact.id)
                .where(table.c.name.in_(result.removed))
            )

        for entry in result.updated:
            self.session.execute(
                update(table)
                .where(table.c.artifact_id == artifact.id)
                .where(table.c.name == entry.name)
                .values(**_entry_values(entry))
            )

        added = result.added
        if added:
            self.session.execute(
                insert(table),
                [
                    {"artifact_id": artifact.id, "name": entry.name, **_entry_values(entry)}
                    for entry in added
                ],
            )


class SqlAlchemyRunRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: RunRecord) -> None:
        self.session.add(entity)

    def find(self, run_key: str) -> RunRecord | None:
        stmt = select(RunRecord).where(run_record_table.c.run_key == run_key)
        return self.session.execute(stmt).scalar_one_or_none()


def _entry_values(entry: CatalogEntry) -> dict[str, Any]:
    definition = entry.definition
    deprecation = definition.deprecation
    return {
        "data_type": definition.data_type,
        "type": definition.type,
        "type_name": definition.type_name,
        "description": definition.description,
        "default_value": definition.default_value,
        "hints": definition.hints,
        "deprecation_reason": deprecation.reason if deprecation else None,
        "deprecation_replacement": deprecation.replacement if deprecation else None,
        "fingerprint": entry.fingerprint,
        "occurrences": entry.occurrences,
        "first_seen": entry.first_seen,
        "last_seen": entry.last_seen,
    }


def _entry_from_row(row: Row[Any]) -> CatalogEntry:
    deprecation = None
    if row.deprecation_reason is not None or row.deprecation_replacement is not None:
        deprecation = Deprecation(
            reason=row.deprecation_reason,
            replacement=row.deprecation_replacement,
        )
    definition = PropertyDefinition(
        name=row.name,
        data_type=row.data_type,
        type=row.type,
        type_name=row.type_name,
        description=row.description,
        default_value=row.default_value,
        hints=row.hints,
        deprecation=deprecation,
    )
    return CatalogEntry(
        definition=definition,
        fingerprint=bytes(row.fingerprint),
        occurrences=row.occurrences,
        first_seen=row.first_seen,
        last_seen=row.last_seen,
    )
