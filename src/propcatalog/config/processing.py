"""Release processing switches."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag

ENFORCE_VERSION_ORDER_VAR = "PROPCATALOG_ENFORCE_VERSION_ORDER"


@dataclass(frozen=True, slots=True)
class ReleaseProcessingConfig:
    enforce_version_order: bool = True


def get_release_processing_config() -> ReleaseProcessingConfig:
    return ReleaseProcessingConfig(
        enforce_version_order=env_flag(ENFORCE_VERSION_ORDER_VAR, default=True),
    )
