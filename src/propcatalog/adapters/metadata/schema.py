"""Pydantic models describing uploaded property metadata documents."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator

from propcatalog.domain.model import DataType, PropertyType


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class MetadataBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class DeprecationPayload(MetadataBaseModel):
    reason: str | None = None
    replacement: str | None = None

    _normalize_text = field_validator("reason", "replacement", mode="before")(_blank_to_none)


class PropertyMetadataPayload(MetadataBaseModel):
    name: str
    data_type: DataType
    type: PropertyType
    type_name: str
    default_value: str | None = None
    description: str | None = None
    hints: list[str] | None = None
    deprecation: DeprecationPayload | None = None

    _normalize_text = field_validator("description", "default_value", mode="before")(
        _blank_to_none
    )

    @field_validator("name", "type_name")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("data_type", "type", mode="before")
    @classmethod
    def _upper_case_enum(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


PropertyMetadataDocument: TypeAdapter[list[PropertyMetadataPayload]] = TypeAdapter(
    list[PropertyMetadataPayload]
)
