"""Configuration property definitions and their catalog entries."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import total_ordering
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from propcatalog.domain.model.enums import DataType, PropertyType
    from propcatalog.domain.model.version import Version

FINGERPRINT_SIZE: Final[int] = 32


def _has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def normalize_hints(hints: Iterable[str] | None) -> tuple[str, ...]:
    """Drop blank hints and collapse duplicates, keeping first-seen order."""

    if not hints:
        return ()
    return tuple(dict.fromkeys(hint for hint in hints if _has_text(hint)))


@dataclass(frozen=True, slots=True)
class Deprecation:
    reason: str | None = None
    replacement: str | None = None

    @property
    def is_empty(self) -> bool:
        return not _has_text(self.reason) and not _has_text(self.replacement)


@total_ordering
@dataclass(frozen=True, slots=True, kw_only=True)
class PropertyDefinition:
    """A property as described by one release's metadata document."""

    name: str
    data_type: DataType
    type: PropertyType
    type_name: str
    description: str | None = None
    default_value: str | None = None
    hints: tuple[str, ...] = ()
    deprecation: Deprecation | None = None

    def __post_init__(self) -> None:
        if not _has_text(self.name):
            raise ValueError("Property name must not be blank")
        object.__setattr__(self, "hints", normalize_hints(self.hints))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PropertyDefinition):
            return NotImplemented
        return self.name < other.name


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogEntry:
    """Current state of one property name within an artifact's catalog.

    ``occurrences`` counts the consecutive processed releases, ending at
    ``last_seen`` and starting at ``first_seen``, that carried a definition with
    this ``fingerprint``.
    """

    definition: PropertyDefinition
    fingerprint: bytes = field(repr=False)
    occurrences: int = 1
    first_seen: Version
    last_seen: Version

    def __post_init__(self) -> None:
        if len(self.fingerprint) != FINGERPRINT_SIZE:
            raise ValueError(
                f"Fingerprint must be {FINGERPRINT_SIZE} bytes, got {len(self.fingerprint)}"
            )
        if self.occurrences < 1:
            raise ValueError("Occurrences must be a positive number")

    @classmethod
    def first_sighting(
        cls,
        definition: PropertyDefinition,
        *,
        fingerprint: bytes,
        version: Version,
    ) -> CatalogEntry:
        return cls(
            definition=definition,
            fingerprint=fingerprint,
            occurrences=1,
            first_seen=version,
            last_seen=version,
        )

    @property
    def name(self) -> str:
        return self.definition.name

    def extend(self, definition: PropertyDefinition, *, version: Version) -> CatalogEntry:
        """Continue the streak up to ``version`` with the latest payload."""

        if definition.name != self.name:
            raise ValueError(f"Cannot extend {self.name!r} with {definition.name!r}")
        return replace(
            self,
            definition=definition,
            occurrences=self.occurrences + 1,
            last_seen=version,
        )
