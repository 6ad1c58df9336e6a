from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from propcatalog.adapters.metadata import parse_metadata_document, read_metadata_document
from propcatalog.domain.errors import MetadataDocumentError
from propcatalog.domain.model import DataType, Deprecation, PropertyType

if TYPE_CHECKING:
    from pathlib import Path


def _document(*items: dict[str, object]) -> bytes:
    return json.dumps(list(items)).encode()


def test_parses_snake_case_properties() -> None:
    content = _document(
        {
            "name": "konfigyr.licences.types",
            "data_type": "COLLECTION",
            "type": "STRING",
            "type_name": "java.util.List<java.lang.String>",
            "default_value": "team",
            "description": "Supported licence types",
            "hints": ["team", "", "enterprise", "team"],
            "deprecation": {"reason": "Replaced", "replacement": "konfigyr.licences.tiers"},
            "source_type": "com.konfigyr.LicenceProperties",
        }
    )

    (definition,) = parse_metadata_document(content)

    assert definition.name == "konfigyr.licences.types"
    assert definition.data_type is DataType.COLLECTION
    assert definition.type is PropertyType.STRING
    assert definition.default_value == "team"
    assert definition.hints == ("team", "enterprise")
    assert definition.deprecation == Deprecation("Replaced", "konfigyr.licences.tiers")


def test_optional_fields_default_to_empty() -> None:
    (definition,) = parse_metadata_document(
        _document(
            {
                "name": "konfigyr.enabled",
                "data_type": "atomic",
                "type": "boolean",
                "type_name": "java.lang.Boolean",
                "description": "   ",
                "deprecation": {"reason": "", "replacement": None},
            }
        )
    )

    assert definition.data_type is DataType.ATOMIC
    assert definition.type is PropertyType.BOOLEAN
    assert definition.description is None
    assert definition.default_value is None
    assert definition.hints == ()
    assert definition.deprecation is None


def test_empty_document_has_no_properties() -> None:
    assert parse_metadata_document(b"[]") == []


@pytest.mark.parametrize(
    "content",
    [
        b"not json",
        b'{"name": "konfigyr.enabled"}',
        _document({"name": "konfigyr.enabled", "type": "BOOLEAN", "type_name": "boolean"}),
        _document(
            {"name": " ", "data_type": "ATOMIC", "type": "BOOLEAN", "type_name": "boolean"}
        ),
        _document(
            {"name": "a", "data_type": "ATOMIC", "type": "NUMBER", "type_name": "boolean"}
        ),
    ],
)
def test_invalid_documents_are_rejected(content: bytes) -> None:
    with pytest.raises(MetadataDocumentError):
        parse_metadata_document(content)


def test_read_document_from_path(tmp_path: Path) -> None:
    path = tmp_path / "metadata.json"
    path.write_bytes(
        _document({"name": "a", "data_type": "MAP", "type": "OBJECT", "type_name": "Map"})
    )

    (definition,) = read_metadata_document(path)

    assert definition.data_type is DataType.MAP


def test_unreadable_document_is_reported(tmp_path: Path) -> None:
    with pytest.raises(MetadataDocumentError, match="Could not read metadata document"):
        read_metadata_document(tmp_path / "missing.json")
