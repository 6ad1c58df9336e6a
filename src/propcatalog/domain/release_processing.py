"""Application service reconciling one artifact release into its catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from propcatalog.domain.errors import (
    DuplicatePropertyError,
    InvalidRunParametersError,
    MetadataDocumentError,
)
from propcatalog.domain.model import ArtifactCoordinates, ChangeKind, RunStatus
from propcatalog.domain.ports.scheduling import RunOutcome
from propcatalog.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from collections.abc import Callable

    from propcatalog.domain.model import Artifact
    from propcatalog.domain.ports import (
        CatalogUnitOfWork,
        MetadataDocumentReader,
        MetadataStore,
        RunParameters,
    )
    from propcatalog.domain.reconciliation import PropertyChange, ReconciliationResult

RELEASE_RUN_NAME: Final[str] = "artifact-release"
ARTIFACT_PARAMETER: Final[str] = "artifact"

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReleaseRunOutcome(RunOutcome):
    """Outcome of a release run, with the reconciliation result when it completed."""

    coordinates: ArtifactCoordinates | None = None
    result: ReconciliationResult | None = None

    @property
    def changes(self) -> tuple[PropertyChange, ...]:
        return self.result.changes if self.result is not None else ()


@dataclass(slots=True)
class ReleaseOrchestrator:
    """Drive one reconciliation run for the release named by the ``artifact`` parameter.

    Unresolvable releases and metadata documents are reported as ``FAILED``
    outcomes. Invalid parameters raise ``InvalidRunParametersError`` before any
    work is done. Everything else runs inside a single unit of work.
    """

    unit_of_work_factory: Callable[[], CatalogUnitOfWork]
    metadata_store: MetadataStore
    read_document: MetadataDocumentReader
    engine: ReconciliationEngine = field(default_factory=ReconciliationEngine)
    enforce_version_order: bool = True

    def validate(self, params: RunParameters) -> ArtifactCoordinates:
        raw = params.get(ARTIFACT_PARAMETER)
        if raw is None or not raw.strip():
            raise InvalidRunParametersError(
                f"The run parameters do not contain required keys: [{ARTIFACT_PARAMETER}]"
            )
        try:
            return ArtifactCoordinates.parse(raw)
        except ValueError as exc:
            raise InvalidRunParametersError(
                f"Invalid '{ARTIFACT_PARAMETER}' run parameter: {exc}"
            ) from exc

    def run(self, params: RunParameters) -> ReleaseRunOutcome:
        coordinates = self.validate(params)
        log.info("Starting release run for %s", coordinates)

        with self.unit_of_work_factory() as uow:
            outcome = self._process(uow, coordinates)

        if outcome.succeeded:
            log.info("Release run for %s completed: %s", coordinates, outcome.message)
        else:
            log.warning("Release run for %s failed: %s", coordinates, outcome.message)
        return outcome

    def _process(
        self,
        uow: CatalogUnitOfWork,
        coordinates: ArtifactCoordinates,
    ) -> ReleaseRunOutcome:
        repositories = uow.repositories

        release = repositories.releases.find(coordinates)
        if release is None:
            return _failed(
                coordinates,
                f"Can not find artifact version with following coordinates: {coordinates}",
            )

        document = self.metadata_store.get(coordinates)
        if document is None:
            return _failed(
                coordinates,
                "Could not find uploaded artifact property metadata for coordinates: "
                f"{coordinates}",
            )

        artifact = release.artifact
        rejection = self._check_order(artifact, coordinates)
        if rejection is not None:
            return _failed(coordinates, rejection)

        try:
            definitions = self.read_document(document)
            existing = repositories.catalog.load(artifact)
            result = self.engine.reconcile(existing, definitions, coordinates.version)
        except (MetadataDocumentError, DuplicatePropertyError) as exc:
            return _failed(
                coordinates,
                f"Invalid artifact property metadata for coordinates: {coordinates}: {exc}",
            )

        repositories.catalog.apply(artifact, result)
        artifact.mark_processed(coordinates.version)
        uow.commit()

        for change in result.of_kind(ChangeKind.CHANGED, ChangeKind.REMOVED):
            log.debug("Property %s of %s was %s", change.name, coordinates, change.kind)

        return ReleaseRunOutcome(
            RunStatus.COMPLETED,
            _summary(result),
            coordinates=coordinates,
            result=result,
        )

    def _check_order(self, artifact: Artifact, coordinates: ArtifactCoordinates) -> str | None:
        last = artifact.last_processed_version
        if last is None or not self.enforce_version_order:
            return None
        if not coordinates.version.comparable_with(last):
            log.warning(
                "Version %s is not comparable with the last processed version %s; "
                "streaks may be inaccurate",
                coordinates,
                last,
            )
            return None
        order = coordinates.version.compare_to(last)
        if order < 0 or (order == 0 and coordinates.version.original == last.original):
            return (
                f"Artifact version {coordinates} is not newer than the last processed "
                f"version {last}"
            )
        if order == 0:
            log.info(
                "Version %s has the same precedence as the last processed version %s",
                coordinates,
                last,
            )
        return None


def _failed(coordinates: ArtifactCoordinates, message: str) -> ReleaseRunOutcome:
    return ReleaseRunOutcome(RunStatus.FAILED, message, coordinates=coordinates)


def _summary(result: ReconciliationResult) -> str:
    counts = result.counts()
    return ", ".join(f"{kind}={counts[kind]}" for kind in ChangeKind)
