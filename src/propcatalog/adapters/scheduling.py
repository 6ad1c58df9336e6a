"""Run scheduler executing registered handlers in the calling thread."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from propcatalog.domain.errors import (
    RunAlreadyCompletedError,
    RunAlreadyRunningError,
    UnknownRunError,
)
from propcatalog.domain.model import RunRecord, RunStatus, run_key
from propcatalog.domain.ports.scheduling import RunExecution, RunOutcome

if TYPE_CHECKING:
    from collections.abc import Callable

    from propcatalog.domain.ports import (
        RunHandler,
        RunParameters,
        RunUnitOfWork,
    )

log = getLogger(__name__)


class LocalRunScheduler:
    """Start named runs once per identity and record their outcome.

    A run identity is its name plus its parameters. Identities that are running
    or completed are rejected; a failed identity may be started again.
    """

    def __init__(self, unit_of_work_factory: Callable[[], RunUnitOfWork]) -> None:
        self.unit_of_work_factory = unit_of_work_factory
        self._handlers: dict[str, RunHandler] = {}

    def register(self, run_name: str, handler: RunHandler) -> None:
        self._handlers[run_name] = handler

    def start(self, run_name: str, params: RunParameters) -> RunExecution:
        handler = self._handlers.get(run_name)
        if handler is None:
            raise UnknownRunError(run_name)

        parameters = dict(params)
        handler.validate(parameters)
        key = run_key(run_name, parameters)
        self._begin(run_name, key, parameters)
        log.info("Run %s started with parameters %s", run_name, parameters)

        try:
            outcome = handler.run(parameters)
        except Exception as exc:
            self._finish(key, RunOutcome.failed(f"{type(exc).__name__}: {exc}"))
            log.exception("Run %s with parameters %s raised", run_name, parameters)
            raise

        record = self._finish(key, outcome)
        log.info("Run %s with parameters %s finished as %s", run_name, parameters, outcome.status)
        return RunExecution(
            run_name=run_name,
            parameters=parameters,
            outcome=outcome,
            started_at=record.started_at,
            finished_at=record.finished_at,
        )

    def find(self, run_name: str, params: RunParameters) -> RunRecord | None:
        """Return the bookkeeping record of a run identity, if it was ever started."""

        with self.unit_of_work_factory() as uow:
            return uow.repositories.runs.find(run_key(run_name, params))

    def _begin(self, run_name: str, key: str, parameters: dict[str, str]) -> None:
        with self.unit_of_work_factory() as uow:
            runs = uow.repositories.runs
            record = runs.find(key)
            if record is None:
                runs.add(RunRecord(run_name=run_name, run_key=key, parameters=parameters))
            elif record.status is RunStatus.STARTED:
                raise RunAlreadyRunningError(run_name, parameters)
            elif record.status is RunStatus.COMPLETED:
                raise RunAlreadyCompletedError(run_name, parameters)
            else:
                log.info("Restarting failed run %s with parameters %s", run_name, parameters)
                record.restart()
            try:
                uow.commit()
            except IntegrityError as exc:
                raise RunAlreadyRunningError(run_name, parameters) from exc

    def _finish(self, key: str, outcome: RunOutcome) -> RunRecord:
        with self.unit_of_work_factory() as uow:
            record = uow.repositories.runs.find(key)
            if record is None:
                raise LookupError(f"Run record disappeared while running: {key}")
            record.finish(outcome.status, outcome.message)
            uow.commit()
            return record
