"""Errors raised by the listener registry."""

from __future__ import annotations

from collections.abc import Hashable

from emitter.domain.models import ListenerKind


class ListenerLimitExceeded(RuntimeError):
    """Raised when an event's listener list grows past the max-listeners threshold.

    This is a leak-detection heuristic, not a hard cap: the listener that
    crossed the threshold has already been registered when this is raised.
    """

    def __init__(
        self,
        event: Hashable,
        count: int,
        limit: int,
        kind: ListenerKind = ListenerKind.PERSISTENT,
    ) -> None:
        self.event = event
        self.count = count
        self.limit = limit
        self.kind = kind
        super().__init__(
            f"Possible EventEmitter memory leak detected. {count} {event!r} "
            f"listeners added. Use emitter.set_max_listeners() to increase limit"
        )
