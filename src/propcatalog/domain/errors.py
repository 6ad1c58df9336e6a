"""Domain error hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from propcatalog.domain.model import ArtifactCoordinates


class PropcatalogError(Exception):
    """Base class for errors raised by the property catalog."""


class RunRequestError(PropcatalogError):
    """A run was rejected before it started."""


class UnknownRunError(RunRequestError):
    def __init__(self, run_name: str) -> None:
        super().__init__(f"No run is registered under the name: {run_name}")
        self.run_name = run_name


class RunAlreadyRunningError(RunRequestError):
    def __init__(self, run_name: str, parameters: dict[str, str]) -> None:
        super().__init__(f"A run of {run_name} is already running with parameters: {parameters}")
        self.run_name = run_name
        self.parameters = parameters


class RunAlreadyCompletedError(RunRequestError):
    def __init__(self, run_name: str, parameters: dict[str, str]) -> None:
        super().__init__(
            f"A run of {run_name} already completed with parameters: {parameters}"
        )
        self.run_name = run_name
        self.parameters = parameters


class InvalidRunParametersError(RunRequestError):
    """Run parameters are missing or malformed."""


class DuplicatePropertyError(PropcatalogError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Property is defined more than once: {name}")
        self.name = name


class MetadataStoreError(PropcatalogError):
    """The metadata store failed to read or write a document."""


class MetadataDocumentError(PropcatalogError):
    """A metadata document could not be parsed into property definitions."""


class ArtifactoryError(PropcatalogError):
    """Registering or querying artifact releases failed."""


class ArtifactVersionExistsError(ArtifactoryError):
    def __init__(self, coordinates: ArtifactCoordinates) -> None:
        super().__init__(f"Artifact version already exists: {coordinates.format()}")
        self.coordinates = coordinates


class ArtifactVersionNotFoundError(ArtifactoryError):
    def __init__(self, coordinates: ArtifactCoordinates) -> None:
        super().__init__(f"Artifact version not found: {coordinates.format()}")
        self.coordinates = coordinates


__all__ = [
    "ArtifactVersionExistsError",
    "ArtifactVersionNotFoundError",
    "ArtifactoryError",
    "DuplicatePropertyError",
    "InvalidRunParametersError",
    "MetadataDocumentError",
    "MetadataStoreError",
    "PropcatalogError",
    "RunAlreadyCompletedError",
    "RunAlreadyRunningError",
    "RunRequestError",
    "UnknownRunError",
]
