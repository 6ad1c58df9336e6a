"""Initial catalog schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""

from __future__ import annotations

from typing import TYPE_CHECKING

import sqlalchemy as sa
from alembic import op

if TYPE_CHECKING:
    from collections.abc import Sequence

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

_DATA_TYPES = ("ATOMIC", "ARRAY", "COLLECTION", "MAP")
_PROPERTY_TYPES = (
    "STRING",
    "BOOLEAN",
    "INTEGER",
    "LONG",
    "DOUBLE",
    "BIG_DECIMAL",
    "DURATION",
    "PERIOD",
    "DATA_SIZE",
    "CHARSET",
    "LOCALE",
    "MIME_TYPE",
    "ENUM",
    "CLASS",
    "RESOURCE",
    "INET_ADDRESS",
    "URI",
    "URL",
    "PATTERN",
    "DATE",
    "TIME",
    "DATE_TIME",
    "OBJECT",
)
_RUN_STATUSES = ("STARTED", "COMPLETED", "FAILED")


def upgrade() -> None:
    op.create_table(
        "artifact",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("group_id", sa.String(length=255), nullable=False),
        sa.Column("artifact_id", sa.String(length=255), nullable=False),
        sa.Column("last_processed_version", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_artifact"),
        sa.UniqueConstraint("group_id", "artifact_id", name="uq_artifact_group_id"),
    )
    op.create_table(
        "artifact_release",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("artifact_id", sa.Uuid(), nullable=False),
        sa.Column("version", sa.String(length=255), nullable=False),
        sa.Column("checksum", sa.String(length=64), nullable=True),
        sa.Column("released_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["artifact_id"],
            ["artifact.id"],
            name="fk_artifact_release_artifact_id_artifact",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_artifact_release"),
        sa.UniqueConstraint(
            "artifact_id",
            "version",
            name="uq_artifact_release_artifact_id",
        ),
    )
    op.create_table(
        "property_definition",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("artifact_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=1024), nullable=False),
        sa.Column(
            "data_type",
            sa.Enum(*_DATA_TYPES, name="datatype", native_enum=False, length=32),
            nullable=False,
        ),
        sa.Column(
            "type",
            sa.Enum(*_PROPERTY_TYPES, name="propertytype", native_enum=False, length=32),
            nullable=False,
        ),
        sa.Column("type_name", sa.String(length=1024), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("default_value", sa.Text(), nullable=True),
        sa.Column("hints", sa.Text(), nullable=True),
        sa.Column("deprecation_reason", sa.Text(), nullable=True),
        sa.Column("deprecation_replacement", sa.String(length=1024), nullable=True),
        sa.Column("fingerprint", sa.LargeBinary(length=32), nullable=False),
        sa.Column("occurrences", sa.Integer(), nullable=False),
        sa.Column("first_seen", sa.String(length=255), nullable=False),
        sa.Column("last_seen", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(
            ["artifact_id"],
            ["artifact.id"],
            name="fk_property_definition_artifact_id_artifact",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_property_definition"),
        sa.UniqueConstraint(
            "artifact_id",
            "name",
            name="uq_property_definition_artifact_id",
        ),
    )
    op.create_table(
        "run_record",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("run_name", sa.String(length=255), nullable=False),
        sa.Column("run_key", sa.Text(), nullable=False),
        sa.Column("parameters", sa.JSON(), nullable=False),
        sa.Column(
            "status",
            sa.Enum(*_RUN_STATUSES, name="runstatus", native_enum=False, length=16),
            nullable=False,
        ),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("finished_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_run_record"),
        sa.UniqueConstraint("run_key", name="uq_run_record_run_key"),
    )
    op.create_index("ix_run_record_run_name", "run_record", ["run_name"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_run_record_run_name", table_name="run_record")
    op.drop_table("run_record")
    op.drop_table("property_definition")
    op.drop_table("artifact_release")
    op.drop_table("artifact")
