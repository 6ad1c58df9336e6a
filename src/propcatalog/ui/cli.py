# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from propcatalog.app import list_properties, reconcile_artifact, release_artifact
from propcatalog.config import configure_logging
from propcatalog.domain.model import ArtifactCoordinates, RunStatus

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from propcatalog.domain.model import CatalogEntry

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maintain configuration property catalogs")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    release = subparsers.add_parser(
        "release",
        help="Register an artifact release and reconcile its properties",
    )
    release.add_argument("coordinates", help="Release coordinates as group:artifact:version")
    release.add_argument(
        "metadata_file",
        type=Path,
        help="JSON metadata document describing the release's properties",
    )

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Start a release run for an already registered release",
    )
    reconcile.add_argument("coordinates", help="Release coordinates as group:artifact:version")

    properties = subparsers.add_parser(
        "properties",
        help="Print the current property catalog of an artifact as JSON lines",
    )
    properties.add_argument("coordinates", help="Coordinates of any release of the artifact")

    return parser.parse_args(list(argv))


def entry_to_json(entry: CatalogEntry) -> dict[str, Any]:
    definition = entry.definition
    deprecation = None
    if definition.deprecation is not None:
        deprecation = {
            "reason": definition.deprecation.reason,
            "replacement": definition.deprecation.replacement,
        }
    return {
        "name": definition.name,
        "data_type": str(definition.data_type),
        "type": str(definition.type),
        "type_name": definition.type_name,
        "description": definition.description,
        "default_value": definition.default_value,
        "hints": list(definition.hints),
        "deprecation": deprecation,
        "fingerprint": entry.fingerprint.hex(),
        "occurrences": entry.occurrences,
        "first_seen": str(entry.first_seen),
        "last_seen": str(entry.last_seen),
    }


def _report_run(status: RunStatus, message: str | None) -> None:
    if status is RunStatus.COMPLETED:
        log.info("Release run completed: %s", message)
        return
    raise RuntimeError(f"Release run {status.lower()}: {message}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        ArtifactCoordinates.parse(parsed_args.coordinates)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "release":
            document = parsed_args.metadata_file.read_bytes()
            report = release_artifact(parsed_args.coordinates, document)
            log.info("Released %s", report.release.coordinates)
            if report.run is None:
                raise RuntimeError("No release run was recorded")  # noqa: TRY301
            _report_run(report.run.status, report.run.message)
        elif parsed_args.command == "reconcile":
            execution = reconcile_artifact(parsed_args.coordinates)
            _report_run(execution.status, execution.outcome.message)
        elif parsed_args.command == "properties":
            for entry in list_properties(parsed_args.coordinates):
                print(json.dumps(entry_to_json(entry), sort_keys=True))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
