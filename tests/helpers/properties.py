"""Builders for property definitions and metadata documents used across tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from propcatalog.domain.model import (
    ArtifactCoordinates,
    DataType,
    Deprecation,
    PropertyDefinition,
    PropertyType,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

GROUP_ID = "com.konfigyr"
ARTIFACT_ID = "konfigyr-licences"


def coordinates(version: str, *, artifact_id: str = ARTIFACT_ID) -> ArtifactCoordinates:
    return ArtifactCoordinates.of(GROUP_ID, artifact_id, version)


def make_definition(
    name: str = "konfigyr.licences.enabled",
    *,
    data_type: DataType = DataType.ATOMIC,
    type: PropertyType = PropertyType.BOOLEAN,  # noqa: A002
    type_name: str = "java.lang.Boolean",
    description: str | None = None,
    default_value: str | None = None,
    hints: Iterable[str] = (),
    deprecation: Deprecation | None = None,
) -> PropertyDefinition:
    return PropertyDefinition(
        name=name,
        data_type=data_type,
        type=type,
        type_name=type_name,
        description=description,
        default_value=default_value,
        hints=tuple(hints),
        deprecation=deprecation,
    )


def definition_payload(definition: PropertyDefinition) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": definition.name,
        "data_type": str(definition.data_type),
        "type": str(definition.type),
        "type_name": definition.type_name,
    }
    if definition.description is not None:
        payload["description"] = definition.description
    if definition.default_value is not None:
        payload["default_value"] = definition.default_value
    if definition.hints:
        payload["hints"] = list(definition.hints)
    if definition.deprecation is not None:
        payload["deprecation"] = {
            "reason": definition.deprecation.reason,
            "replacement": definition.deprecation.replacement,
        }
    return payload


def metadata_document(*definitions: PropertyDefinition) -> bytes:
    return json.dumps([definition_payload(item) for item in definitions]).encode("utf-8")


def licences_release(version: str) -> list[PropertyDefinition]:
    """Property sets of the three konfigyr-licences releases used in scenario tests."""

    enabled = make_definition(
        "konfigyr.licences.enabled",
        description="Enables the licence service",
        default_value="true",
    )
    types_v1 = make_definition(
        "konfigyr.licences.types",
        data_type=DataType.COLLECTION,
        type=PropertyType.STRING,
        type_name="java.util.List<java.lang.String>",
        hints=("team", "enterprise"),
    )
    types_v2 = make_definition(
        "konfigyr.licences.types",
        data_type=DataType.COLLECTION,
        type=PropertyType.STRING,
        type_name="java.util.List<java.lang.String>",
        hints=("team", "enterprise", "community"),
    )
    duration = make_definition(
        "konfigyr.licences.licence-duration",
        type=PropertyType.DURATION,
        type_name="java.time.Duration",
        default_value="365d",
    )
    cleanup_enabled = make_definition(
        "konfigyr.licences.cleanup.enabled",
        default_value="false",
    )
    cron_v1 = make_definition(
        "konfigyr.licences.cleanup.cron",
        type=PropertyType.STRING,
        type_name="java.lang.String",
        default_value="0 0 * * * *",
    )
    cron_v3 = make_definition(
        "konfigyr.licences.cleanup.cron",
        type=PropertyType.STRING,
        type_name="java.lang.String",
        default_value="0 0 0 * * *",
        deprecation=Deprecation(reason="Use a scheduler", replacement="konfigyr.scheduler.cron"),
    )
    expiry = make_definition(
        "konfigyr.licences.licence-expiry",
        type=PropertyType.DURATION,
        type_name="java.time.Duration",
    )

    releases = {
        "1.0.0": [enabled, types_v1, duration, cleanup_enabled, cron_v1],
        "1.0.1": [enabled, types_v2, duration, cleanup_enabled, cron_v1],
        "1.0.2": [types_v2, duration, cleanup_enabled, cron_v3, expiry],
    }
    return releases[version]
