"""Turn release notifications into scheduled release runs."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from propcatalog.domain.release_processing import ARTIFACT_PARAMETER, RELEASE_RUN_NAME

if TYPE_CHECKING:
    from propcatalog.domain.ports import (
        ArtifactReleased,
        RunExecution,
        RunParameters,
        RunScheduler,
    )

log = getLogger(__name__)


@dataclass(slots=True)
class RunDispatcher:
    """Ask the scheduler for one release run per released artifact.

    Scheduler rejections propagate unchanged and are never retried here.
    """

    scheduler: RunScheduler

    def on_released(self, event: ArtifactReleased) -> RunExecution:
        return self.launch(RELEASE_RUN_NAME, {ARTIFACT_PARAMETER: event.coordinates.format()})

    def launch(self, run_name: str, params: RunParameters) -> RunExecution:
        log.info("Launching %s with parameters %s", run_name, dict(params))
        return self.scheduler.start(run_name, params)
