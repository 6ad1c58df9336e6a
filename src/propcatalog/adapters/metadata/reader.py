"""Turn stored metadata documents into property definitions."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from propcatalog.domain.errors import MetadataDocumentError
from propcatalog.domain.model import Deprecation, PropertyDefinition

from .schema import PropertyMetadataDocument, PropertyMetadataPayload

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


def parse_metadata_document(content: bytes | str) -> list[PropertyDefinition]:
    """Validate a JSON metadata document and translate it into definitions."""

    try:
        payloads = PropertyMetadataDocument.validate_json(content)
    except ValidationError as exc:
        raise MetadataDocumentError(
            f"{exc.error_count()} validation error(s): {_describe(exc)}"
        ) from exc
    return [translate_property(payload) for payload in payloads]


def read_metadata_document(document: Path) -> list[PropertyDefinition]:
    try:
        content = document.read_bytes()
    except OSError as exc:
        raise MetadataDocumentError(f"Could not read metadata document {document}") from exc
    definitions = parse_metadata_document(content)
    log.debug("Read %d property definitions from %s", len(definitions), document)
    return definitions


def translate_property(payload: PropertyMetadataPayload) -> PropertyDefinition:
    deprecation = None
    if payload.deprecation is not None:
        candidate = Deprecation(
            reason=payload.deprecation.reason,
            replacement=payload.deprecation.replacement,
        )
        deprecation = None if candidate.is_empty else candidate
    return PropertyDefinition(
        name=payload.name,
        data_type=payload.data_type,
        type=payload.type,
        type_name=payload.type_name,
        description=payload.description,
        default_value=payload.default_value,
        hints=tuple(payload.hints or ()),
        deprecation=deprecation,
    )


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]
