from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from propcatalog.adapters.scheduling import LocalRunScheduler
from propcatalog.domain.errors import (
    InvalidRunParametersError,
    RunAlreadyCompletedError,
    RunAlreadyRunningError,
    UnknownRunError,
)
from propcatalog.domain.model import RunStatus
from propcatalog.domain.ports import RunOutcome, RunParameters

if TYPE_CHECKING:
    from collections.abc import Callable

    from propcatalog.adapters.sqlalchemy.unit_of_work import SqlAlchemyRunUnitOfWork


@dataclass
class _ScriptedHandler:
    outcomes: list[RunOutcome | Exception] = field(default_factory=list)
    calls: list[dict[str, str]] = field(default_factory=list)
    on_run: Callable[[RunParameters], None] | None = None

    def validate(self, params: RunParameters) -> None:
        if "artifact" not in params:
            raise InvalidRunParametersError(
                "The run parameters do not contain required keys: [artifact]"
            )

    def run(self, params: RunParameters) -> RunOutcome:
        self.calls.append(dict(params))
        if self.on_run is not None:
            self.on_run(params)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


PARAMS = {"artifact": "com.konfigyr:konfigyr-licences:1.0.0"}


@pytest.fixture
def scheduler(
    run_unit_of_work: Callable[[], SqlAlchemyRunUnitOfWork],
) -> LocalRunScheduler:
    return LocalRunScheduler(run_unit_of_work)


def test_unknown_runs_are_rejected(scheduler: LocalRunScheduler) -> None:
    with pytest.raises(UnknownRunError, match="missing-run"):
        scheduler.start("missing-run", PARAMS)


def test_invalid_parameters_are_rejected_before_recording(scheduler: LocalRunScheduler) -> None:
    handler = _ScriptedHandler()
    scheduler.register("artifact-release", handler)

    with pytest.raises(InvalidRunParametersError, match=r"\[artifact\]"):
        scheduler.start("artifact-release", {})

    assert handler.calls == []
    assert scheduler.find("artifact-release", {}) is None


def test_completed_runs_are_recorded_and_not_replayed(scheduler: LocalRunScheduler) -> None:
    handler = _ScriptedHandler(outcomes=[RunOutcome.completed("done")])
    scheduler.register("artifact-release", handler)

    execution = scheduler.start("artifact-release", PARAMS)

    assert execution.status is RunStatus.COMPLETED
    assert execution.parameters == PARAMS
    assert execution.finished_at is not None
    record = scheduler.find("artifact-release", PARAMS)
    assert record is not None
    assert record.status is RunStatus.COMPLETED
    assert record.message == "done"

    with pytest.raises(RunAlreadyCompletedError):
        scheduler.start("artifact-release", dict(PARAMS))
    assert len(handler.calls) == 1


def test_failed_runs_may_be_restarted(scheduler: LocalRunScheduler) -> None:
    handler = _ScriptedHandler(
        outcomes=[RunOutcome.failed("metadata missing"), RunOutcome.completed()]
    )
    scheduler.register("artifact-release", handler)

    first = scheduler.start("artifact-release", PARAMS)
    second = scheduler.start("artifact-release", PARAMS)

    assert first.status is RunStatus.FAILED
    assert first.outcome.message == "metadata missing"
    assert second.status is RunStatus.COMPLETED
    record = scheduler.find("artifact-release", PARAMS)
    assert record is not None
    assert record.status is RunStatus.COMPLETED
    assert record.message is None


def test_running_runs_reject_concurrent_starts(scheduler: LocalRunScheduler) -> None:
    observed: list[Exception] = []

    def _start_again(params: RunParameters) -> None:
        try:
            scheduler.start("artifact-release", params)
        except RunAlreadyRunningError as exc:
            observed.append(exc)

    handler = _ScriptedHandler(outcomes=[RunOutcome.completed()], on_run=_start_again)
    scheduler.register("artifact-release", handler)

    scheduler.start("artifact-release", PARAMS)

    assert len(observed) == 1
    assert len(handler.calls) == 1


def test_handler_errors_fail_the_run_and_propagate(scheduler: LocalRunScheduler) -> None:
    handler = _ScriptedHandler(outcomes=[RuntimeError("database gone")])
    scheduler.register("artifact-release", handler)

    with pytest.raises(RuntimeError, match="database gone"):
        scheduler.start("artifact-release", PARAMS)

    record = scheduler.find("artifact-release", PARAMS)
    assert record is not None
    assert record.status is RunStatus.FAILED
    assert record.message == "RuntimeError: database gone"
