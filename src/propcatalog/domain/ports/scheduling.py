"""Contracts between the run scheduler and the units of work it executes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from propcatalog.domain.model import RunStatus

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

type RunParameters = Mapping[str, str]


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """Terminal state reported by a run handler."""

    status: RunStatus
    message: str | None = None

    @classmethod
    def completed(cls, message: str | None = None) -> RunOutcome:
        return cls(RunStatus.COMPLETED, message)

    @classmethod
    def failed(cls, message: str) -> RunOutcome:
        return cls(RunStatus.FAILED, message)

    @property
    def succeeded(self) -> bool:
        return self.status is RunStatus.COMPLETED


@dataclass(frozen=True, slots=True)
class RunExecution:
    """What the scheduler reports back for a started run."""

    run_name: str
    parameters: dict[str, str]
    outcome: RunOutcome
    started_at: datetime | None = None
    finished_at: datetime | None = None

    @property
    def status(self) -> RunStatus:
        return self.outcome.status


@runtime_checkable
class RunHandler(Protocol):
    """A named unit of work the scheduler can execute."""

    def validate(self, params: RunParameters) -> object:
        """Raise ``InvalidRunParametersError`` when ``params`` cannot start a run."""
        ...

    def run(self, params: RunParameters) -> RunOutcome: ...


@runtime_checkable
class RunScheduler(Protocol):
    """Starts named runs, rejecting duplicates of running or completed ones."""

    def start(self, run_name: str, params: RunParameters) -> RunExecution: ...
