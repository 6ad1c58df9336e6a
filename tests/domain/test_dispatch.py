from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from propcatalog.domain.dispatch import RunDispatcher
from propcatalog.domain.errors import RunAlreadyCompletedError
from propcatalog.domain.model import new_id
from propcatalog.domain.ports import ArtifactReleased, RunExecution, RunOutcome, RunParameters
from tests.helpers.properties import coordinates


@dataclass
class _RecordingScheduler:
    calls: list[tuple[str, dict[str, str]]] = field(default_factory=list)
    error: Exception | None = None

    def start(self, run_name: str, params: RunParameters) -> RunExecution:
        self.calls.append((run_name, dict(params)))
        if self.error is not None:
            raise self.error
        return RunExecution(run_name, dict(params), RunOutcome.completed())


def test_release_event_starts_release_run() -> None:
    scheduler = _RecordingScheduler()
    dispatcher = RunDispatcher(scheduler)
    event = ArtifactReleased(new_id(), coordinates("1.0.0"))

    execution = dispatcher.on_released(event)

    assert scheduler.calls == [
        ("artifact-release", {"artifact": "com.konfigyr:konfigyr-licences:1.0.0"})
    ]
    assert execution.status.is_terminal
    assert execution.outcome.succeeded


def test_scheduler_errors_propagate_without_retry() -> None:
    target = coordinates("1.0.0")
    error = RunAlreadyCompletedError("artifact-release", {"artifact": target.format()})
    scheduler = _RecordingScheduler(error=error)
    dispatcher = RunDispatcher(scheduler)

    with pytest.raises(RunAlreadyCompletedError) as excinfo:
        dispatcher.on_released(ArtifactReleased(new_id(), target))

    assert excinfo.value is error
    assert len(scheduler.calls) == 1


def test_launch_forwards_arbitrary_runs() -> None:
    scheduler = _RecordingScheduler()

    RunDispatcher(scheduler).launch("cleanup", {"dry-run": "true"})

    assert scheduler.calls == [("cleanup", {"dry-run": "true"})]
