"""Result types produced by the reconciliation engine."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from propcatalog.domain.model import ChangeKind

if TYPE_CHECKING:
    from propcatalog.domain.model import CatalogEntry


@dataclass(frozen=True, slots=True)
class PropertyChange:
    """What happened to one property name during a reconciliation.

    ``entry`` is the resulting catalog entry (``None`` for removals) and
    ``previous`` the entry it replaced (``None`` for additions).
    """

    kind: ChangeKind
    name: str
    entry: CatalogEntry | None = None
    previous: CatalogEntry | None = None


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    catalog: dict[str, CatalogEntry] = field(default_factory=dict)
    changes: tuple[PropertyChange, ...] = ()

    def of_kind(self, *kinds: ChangeKind) -> tuple[PropertyChange, ...]:
        return tuple(change for change in self.changes if change.kind in kinds)

    def counts(self) -> dict[ChangeKind, int]:
        counter = Counter(change.kind for change in self.changes)
        return {kind: counter.get(kind, 0) for kind in ChangeKind}

    @property
    def added(self) -> list[CatalogEntry]:
        return [change.entry for change in self.of_kind(ChangeKind.ADDED) if change.entry]

    @property
    def updated(self) -> list[CatalogEntry]:
        return [
            change.entry
            for change in self.of_kind(ChangeKind.UNCHANGED, ChangeKind.CHANGED)
            if change.entry
        ]

    @property
    def removed(self) -> list[str]:
        return [change.name for change in self.of_kind(ChangeKind.REMOVED)]
