"""SQLAlchemy mapping metadata for the property catalog."""

from __future__ import annotations

import json
import logging
import uuid
from datetime import UTC, datetime
from functools import cache
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Dialect,
    Enum,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    String,
    Table,
    Text,
    TypeDecorator,
    UniqueConstraint,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers, relationship

from propcatalog.domain.model import (
    Artifact,
    ArtifactRelease,
    DataType,
    PropertyType,
    RunRecord,
    RunStatus,
    Version,
    parse_version,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


class VersionType(TypeDecorator[Version]):
    """Stores a version as the text it was parsed from."""

    impl = String(255)
    cache_ok = True

    def process_bind_param(self, value: Version | str | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> Version | None:
        _ = dialect
        if value is None:
            return None
        return parse_version(value)


class HintsType(TypeDecorator[tuple[str, ...]]):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value: tuple[str, ...] | None, dialect: Dialect) -> str | None:
        _ = dialect
        if not value:
            return None
        return json.dumps(list(value))

    def process_result_value(self, value: str | None, dialect: Dialect) -> tuple[str, ...]:
        _ = dialect
        if value is None:
            return ()
        loaded = json.loads(value)
        if not isinstance(loaded, list):
            return ()
        items = cast(list[Any], loaded)
        return tuple(item for item in items if isinstance(item, str))


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

artifact_table = Table(
    "artifact",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("group_id", String(255), nullable=False),
    Column("artifact_id", String(255), nullable=False),
    Column("last_processed_version", VersionType, nullable=True),
    Column("created_at", UTCDateTime, nullable=False),
    Column("updated_at", UTCDateTime, nullable=False),
    UniqueConstraint("group_id", "artifact_id"),
)

artifact_release_table = Table(
    "artifact_release",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "artifact_id",
        UUIDColumnType,
        ForeignKey("artifact.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("version", VersionType, nullable=False),
    Column("checksum", String(64), nullable=True),
    Column("released_at", UTCDateTime, nullable=False),
    UniqueConstraint("artifact_id", "version"),
)

property_definition_table = Table(
    "property_definition",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "artifact_id",
        UUIDColumnType,
        ForeignKey("artifact.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(1024), nullable=False),
    Column("data_type", Enum(DataType, native_enum=False, length=32), nullable=False),
    Column("type", Enum(PropertyType, native_enum=False, length=32), nullable=False),
    Column("type_name", String(1024), nullable=False),
    Column("description", Text, nullable=True),
    Column("default_value", Text, nullable=True),
    Column("hints", HintsType, nullable=True),
    Column("deprecation_reason", Text, nullable=True),
    Column("deprecation_replacement", String(1024), nullable=True),
    Column("fingerprint", LargeBinary(32), nullable=False),
    Column("occurrences", Integer, nullable=False),
    Column("first_seen", VersionType, nullable=False),
    Column("last_seen", VersionType, nullable=False),
    UniqueConstraint("artifact_id", "name"),
)

run_record_table = Table(
    "run_record",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("run_name", String(255), nullable=False),
    Column("run_key", Text, nullable=False, unique=True),
    Column("parameters", JSON, nullable=False),
    Column("status", Enum(RunStatus, native_enum=False, length=16), nullable=False),
    Column("message", Text, nullable=True),
    Column("started_at", UTCDateTime, nullable=False),
    Column("finished_at", UTCDateTime, nullable=True),
    Index("ix_run_record_run_name", "run_name"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(Artifact, artifact_table)

    mapper_registry.map_imperatively(
        ArtifactRelease,
        artifact_release_table,
        properties={
            "_artifact_id": artifact_release_table.c.artifact_id,
            "artifact": relationship(Artifact, lazy="joined", innerjoin=True),
        },
    )

    mapper_registry.map_imperatively(RunRecord, run_record_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
