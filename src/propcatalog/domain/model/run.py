"""Bookkeeping for scheduled runs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from propcatalog.domain.model.entity import Entity, utcnow
from propcatalog.domain.model.enums import RunStatus

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime


def run_key(run_name: str, parameters: Mapping[str, str]) -> str:
    """Identity of a run: its name plus its parameters in a stable order."""

    return json.dumps([run_name, sorted(parameters.items())], separators=(",", ":"))


@dataclass(eq=False, kw_only=True)
class RunRecord(Entity):
    run_name: str
    run_key: str
    parameters: dict[str, str] = field(default_factory=dict)
    status: RunStatus = RunStatus.STARTED
    message: str | None = None
    started_at: datetime = field(default_factory=utcnow)
    finished_at: datetime | None = None

    def restart(self) -> None:
        self.status = RunStatus.STARTED
        self.message = None
        self.started_at = utcnow()
        self.finished_at = None

    def finish(self, status: RunStatus, message: str | None = None) -> None:
        if not status.is_terminal:
            raise ValueError(f"Cannot finish a run with non-terminal status {status}")
        self.status = status
        self.message = message
        self.finished_at = utcnow()
