"""Fold one release's property definitions into an artifact's catalog.

The engine is pure: it never mutates the catalog it is given and returns the
next catalog state together with one change event per affected property.

Streak semantics assume releases of one artifact are reconciled one at a time
in non-decreasing version order. The engine does not check this; the release
orchestrator is responsible for feeding it the right previous state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from propcatalog.domain.errors import DuplicatePropertyError
from propcatalog.domain.fingerprint import fingerprint
from propcatalog.domain.model import CatalogEntry, ChangeKind

from .changes import PropertyChange, ReconciliationResult

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from propcatalog.domain.model import PropertyDefinition, Version

    type Fingerprinter = Callable[[PropertyDefinition], bytes]


@dataclass(slots=True)
class ReconciliationEngine:
    """Merge extracted property definitions with the persisted catalog."""

    fingerprinter: Fingerprinter = fingerprint

    def reconcile(
        self,
        existing: Mapping[str, CatalogEntry],
        extracted: Iterable[PropertyDefinition],
        current_version: Version,
    ) -> ReconciliationResult:
        catalog: dict[str, CatalogEntry] = {}
        changes: list[PropertyChange] = []

        for definition in extracted:
            name = definition.name
            if name in catalog:
                raise DuplicatePropertyError(name)

            digest = self.fingerprinter(definition)
            previous = existing.get(name)

            if previous is None:
                kind = ChangeKind.ADDED
                entry = CatalogEntry.first_sighting(
                    definition, fingerprint=digest, version=current_version
                )
            elif previous.fingerprint == digest:
                kind = ChangeKind.UNCHANGED
                entry = previous.extend(definition, version=current_version)
            else:
                # no history is kept for the superseded streak
                kind = ChangeKind.CHANGED
                entry = CatalogEntry.first_sighting(
                    definition, fingerprint=digest, version=current_version
                )

            catalog[name] = entry
            changes.append(PropertyChange(kind, name, entry=entry, previous=previous))

        for name, previous in existing.items():
            if name not in catalog:
                changes.append(PropertyChange(ChangeKind.REMOVED, name, previous=previous))

        return ReconciliationResult(catalog=catalog, changes=tuple(changes))


def reconcile(
    existing: Mapping[str, CatalogEntry],
    extracted: Iterable[PropertyDefinition],
    current_version: Version,
) -> ReconciliationResult:
    """Reconcile using the default fingerprint algorithm."""

    return ReconciliationEngine().reconcile(existing, extracted, current_version)
