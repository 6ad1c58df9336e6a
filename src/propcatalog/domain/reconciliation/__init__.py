"""Reconciliation core for folding release metadata into the property catalog.

Per release, every extracted property definition is fingerprinted and compared
with the catalog entry of the same name:

1) no entry yet: a new streak starts at this release
2) same fingerprint: the streak is extended to this release
3) different fingerprint: the streak is reset to this release
4) entries whose name is absent from the release are removed
"""

from __future__ import annotations

from .changes import PropertyChange, ReconciliationResult
from .engine import ReconciliationEngine, reconcile

__all__ = [
    "PropertyChange",
    "ReconciliationEngine",
    "ReconciliationResult",
    "reconcile",
]
