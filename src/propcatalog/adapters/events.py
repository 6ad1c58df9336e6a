"""Synchronous in-process delivery of release notifications."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from propcatalog.domain.ports import ArtifactReleased

    type ReleaseSubscriber = Callable[[ArtifactReleased], object]

log = getLogger(__name__)


class InProcessEventBus:
    """Deliver each event to every subscriber in registration order.

    Subscriber errors propagate to the publisher; later subscribers are not
    called for that event.
    """

    def __init__(self) -> None:
        self._subscribers: list[ReleaseSubscriber] = []

    def subscribe(self, subscriber: ReleaseSubscriber) -> None:
        self._subscribers.append(subscriber)

    def publish(self, event: ArtifactReleased) -> None:
        log.debug(
            "Publishing release of %s to %d subscriber(s)",
            event.coordinates,
            len(self._subscribers),
        )
        for subscriber in self._subscribers:
            subscriber(event)
