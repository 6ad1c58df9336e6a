"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from propcatalog.adapters.events import InProcessEventBus
from propcatalog.adapters.metadata import FileSystemMetadataStore, read_metadata_document
from propcatalog.adapters.scheduling import LocalRunScheduler
from propcatalog.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    SqlAlchemyRunUnitOfWork,
    is_started,
    startup,
)
from propcatalog.config import get_release_processing_config, get_storage_config
from propcatalog.domain.artifactory import Artifactory
from propcatalog.domain.dispatch import RunDispatcher
from propcatalog.domain.model import ArtifactCoordinates
from propcatalog.domain.ports.unit_of_work import CatalogUnitOfWork, RunUnitOfWork
from propcatalog.domain.release_processing import (
    ARTIFACT_PARAMETER,
    RELEASE_RUN_NAME,
    ReleaseOrchestrator,
)

if TYPE_CHECKING:
    from propcatalog.config import ReleaseProcessingConfig, StorageConfig
    from propcatalog.domain.model import ArtifactRelease, CatalogEntry, RunRecord
    from propcatalog.domain.ports import MetadataStore, RunExecution

CatalogUnitOfWorkFactory = Callable[[], CatalogUnitOfWork]
RunUnitOfWorkFactory = Callable[[], RunUnitOfWork]

log = getLogger(__name__)


@dataclass(slots=True)
class Application:
    """The wired services behind the command line entry points."""

    artifactory: Artifactory
    orchestrator: ReleaseOrchestrator
    scheduler: LocalRunScheduler
    dispatcher: RunDispatcher
    events: InProcessEventBus


@dataclass(frozen=True, slots=True)
class ReleaseReport:
    release: ArtifactRelease
    run: RunRecord | None


def build_application(
    *,
    storage: StorageConfig | None = None,
    processing: ReleaseProcessingConfig | None = None,
    metadata_store: MetadataStore | None = None,
    catalog_unit_of_work_factory: CatalogUnitOfWorkFactory | None = None,
    run_unit_of_work_factory: RunUnitOfWorkFactory | None = None,
) -> Application:
    """Wire adapters and domain services, starting the database adapter if needed."""

    if not is_started():
        startup()
    effective_processing = processing or get_release_processing_config()
    effective_store = metadata_store or FileSystemMetadataStore(
        (storage or get_storage_config()).metadata_dir()
    )
    effective_catalog_uow = catalog_unit_of_work_factory or SqlAlchemyCatalogUnitOfWork
    effective_run_uow = run_unit_of_work_factory or SqlAlchemyRunUnitOfWork

    orchestrator = ReleaseOrchestrator(
        unit_of_work_factory=effective_catalog_uow,
        metadata_store=effective_store,
        read_document=read_metadata_document,
        enforce_version_order=effective_processing.enforce_version_order,
    )
    scheduler = LocalRunScheduler(effective_run_uow)
    scheduler.register(RELEASE_RUN_NAME, orchestrator)
    dispatcher = RunDispatcher(scheduler)

    events = InProcessEventBus()
    events.subscribe(dispatcher.on_released)

    artifactory = Artifactory(
        unit_of_work_factory=effective_catalog_uow,
        metadata_store=effective_store,
        publisher=events,
    )
    return Application(
        artifactory=artifactory,
        orchestrator=orchestrator,
        scheduler=scheduler,
        dispatcher=dispatcher,
        events=events,
    )


def release_artifact(
    coordinates: str,
    document: bytes,
    *,
    application: Application | None = None,
) -> ReleaseReport:
    """Register a release with its metadata document; the release run follows immediately."""

    app = application or build_application()
    parsed = ArtifactCoordinates.parse(coordinates)
    log.info("Releasing %s (%d bytes of metadata)", parsed, len(document))

    release = app.artifactory.release(parsed, document)
    run = app.scheduler.find(RELEASE_RUN_NAME, {ARTIFACT_PARAMETER: parsed.format()})
    return ReleaseReport(release=release, run=run)


def reconcile_artifact(
    coordinates: str,
    *,
    application: Application | None = None,
) -> RunExecution:
    """Start a release run for an already registered release."""

    app = application or build_application()
    parsed = ArtifactCoordinates.parse(coordinates)
    return app.dispatcher.launch(RELEASE_RUN_NAME, {ARTIFACT_PARAMETER: parsed.format()})


def list_properties(
    coordinates: str,
    *,
    application: Application | None = None,
) -> list[CatalogEntry]:
    app = application or build_application()
    return app.artifactory.properties(ArtifactCoordinates.parse(coordinates))
