"""Metadata document adapters: payload schema, reader and file system store."""

from __future__ import annotations

from .reader import parse_metadata_document, read_metadata_document, translate_property
from .schema import DeprecationPayload, PropertyMetadataDocument, PropertyMetadataPayload
from .store import FileSystemMetadataStore

__all__ = [
    "DeprecationPayload",
    "FileSystemMetadataStore",
    "PropertyMetadataDocument",
    "PropertyMetadataPayload",
    "parse_metadata_document",
    "read_metadata_document",
    "translate_property",
]
