from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from propcatalog.app import (
    Application,
    build_application,
    list_properties,
    reconcile_artifact,
    release_artifact,
)
from propcatalog.config import ReleaseProcessingConfig
from propcatalog.domain.errors import ArtifactVersionExistsError, RunAlreadyCompletedError
from propcatalog.domain.model import RunStatus
from tests.helpers.properties import licences_release, metadata_document

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from propcatalog.adapters.metadata import FileSystemMetadataStore

LICENCES = "com.konfigyr:konfigyr-licences:{version}"


@pytest.fixture
def application(
    started_adapter: Engine,
    metadata_store: FileSystemMetadataStore,
) -> Application:
    _ = started_adapter
    return build_application(
        processing=ReleaseProcessingConfig(),
        metadata_store=metadata_store,
    )


def _release(application: Application, version: str) -> None:
    report = release_artifact(
        LICENCES.format(version=version),
        metadata_document(*licences_release(version)),
        application=application,
    )
    assert report.run is not None
    assert report.run.status is RunStatus.COMPLETED, report.run.message


def test_three_releases_build_the_catalog(application: Application) -> None:
    for version in ("1.0.0", "1.0.1", "1.0.2"):
        _release(application, version)

    entries = {
        entry.name: entry
        for entry in list_properties(LICENCES.format(version="1.0.0"), application=application)
    }

    assert sorted(entries) == [
        "konfigyr.licences.cleanup.cron",
        "konfigyr.licences.cleanup.enabled",
        "konfigyr.licences.licence-duration",
        "konfigyr.licences.licence-expiry",
        "konfigyr.licences.types",
    ]
    streaks = {
        name: (entry.occurrences, str(entry.first_seen), str(entry.last_seen))
        for name, entry in entries.items()
    }
    assert streaks == {
        "konfigyr.licences.cleanup.cron": (1, "1.0.2", "1.0.2"),
        "konfigyr.licences.cleanup.enabled": (3, "1.0.0", "1.0.2"),
        "konfigyr.licences.licence-duration": (3, "1.0.0", "1.0.2"),
        "konfigyr.licences.licence-expiry": (1, "1.0.2", "1.0.2"),
        "konfigyr.licences.types": (2, "1.0.1", "1.0.2"),
    }
    cron = entries["konfigyr.licences.cleanup.cron"].definition
    assert cron.deprecation is not None
    assert cron.deprecation.replacement == "konfigyr.scheduler.cron"


def test_releasing_twice_is_rejected(application: Application) -> None:
    _release(application, "1.0.0")

    with pytest.raises(ArtifactVersionExistsError):
        release_artifact(
            LICENCES.format(version="1.0.0"),
            metadata_document(*licences_release("1.0.0")),
            application=application,
        )


def test_reconciling_a_completed_release_again_is_rejected(application: Application) -> None:
    _release(application, "1.0.0")
    before = list_properties(LICENCES.format(version="1.0.0"), application=application)

    with pytest.raises(RunAlreadyCompletedError):
        reconcile_artifact(LICENCES.format(version="1.0.0"), application=application)

    after = list_properties(LICENCES.format(version="1.0.0"), application=application)
    assert after == before

def test_invalid_metadata_fails_and_can_be_retried(
    application: Application,
    metadata_store: FileSystemMetadataStore,
) -> None:
    coordinates = LICENCES.format(version="1.0.0")

    report = release_artifact(coordinates, b"{not json", application=application)

    assert report.run is not None
    assert report.run.status is RunStatus.FAILED
    assert report.run.message is not None
    assert "Invalid artifact property metadata" in report.run.message
    assert list_properties(coordinates, application=application) == []

    metadata_store.save(report.release.coordinates, metadata_document(*licences_release("1.0.0")))
    execution = reconcile_artifact(coordinates, application=application)

    assert execution.status is RunStatus.COMPLETED
    assert len(list_properties(coordinates, application=application)) == 5


def test_out_of_order_release_fails_when_order_is_enforced(application: Application) -> None:
    _release(application, "1.0.1")

    report = release_artifact(
        LICENCES.format(version="1.0.0"),
        metadata_document(*licences_release("1.0.0")),
        application=application,
    )

    assert report.run is not None
    assert report.run.status is RunStatus.FAILED
    assert report.run.message is not None
    assert "is not newer than the last processed version 1.0.1" in report.run.message
