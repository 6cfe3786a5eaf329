"""Synchronous in-process listener registry."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any, Generic, TypeVar

from emitter.config import default_max_listeners as _initial_max_listeners
from emitter.domain.errors import ListenerLimitExceeded
from emitter.domain.models import EmitterSettings, Listener, ListenerKind
from emitter.repos.memory import ListenerRepository
from emitter.services.dispatch import call_listeners, drain_once_listeners

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Hashable)


class EventEmitter(Generic[E]):
    """Publish/subscribe registry for named events.

    Persistent listeners (``on``) fire on every emission; one-shot listeners
    (``once``) fire on the next emission that reaches them and are then
    dropped. Listeners are called synchronously, in registration order, on
    the caller's stack.

    Listeners are matched for removal by identity or equality, so
    ``off(event, obj.method)`` removes what ``on(event, obj.method)`` added.
    Every mutating method returns the emitter so calls can be chained.
    """

    default_max_listeners: int = _initial_max_listeners()

    def __init__(self, max_listeners: int | None = None) -> None:
        self._on = ListenerRepository()
        self._once = ListenerRepository()
        if max_listeners is None:
            max_listeners = type(self).default_max_listeners
        self._max_listeners = EmitterSettings(max_listeners=max_listeners).max_listeners

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(events={self.event_names()!r}, "
            f"max_listeners={self._max_listeners})"
        )

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def on(self, event: E, listener: Listener) -> EventEmitter[E]:
        """Append a persistent listener for ``event``."""
        count = self._on.append(event, listener)
        return self._added(event, listener, count, ListenerKind.PERSISTENT)

    def add_listener(self, event: E, listener: Listener) -> EventEmitter[E]:
        """Alias for :meth:`on`."""
        return self.on(event, listener)

    def once(self, event: E, listener: Listener) -> EventEmitter[E]:
        """Append a one-shot listener for ``event``."""
        count = self._once.append(event, listener)
        return self._added(event, listener, count, ListenerKind.ONCE)

    def prepend_listener(self, event: E, listener: Listener) -> EventEmitter[E]:
        """Insert a persistent listener at the head of ``event``'s list."""
        count = self._on.prepend(event, listener)
        return self._added(event, listener, count, ListenerKind.PERSISTENT)

    def prepend_once_listener(self, event: E, listener: Listener) -> EventEmitter[E]:
        """Insert a one-shot listener at the head of ``event``'s list."""
        count = self._once.prepend(event, listener)
        return self._added(event, listener, count, ListenerKind.ONCE)

    def _added(
        self, event: E, listener: Listener, count: int, kind: ListenerKind
    ) -> EventEmitter[E]:
        logger.debug("Added %s listener %r to event %r (%d)", kind, listener, event, count)
        if count > self._max_listeners:
            logger.warning(
                "Event %r has %d %s listeners, above the limit of %d",
                event,
                count,
                kind,
                self._max_listeners,
            )
            raise ListenerLimitExceeded(event, count, self._max_listeners, kind)
        return self

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def off(self, event: E, listener: Listener) -> EventEmitter[E]:
        """Remove the first registration of ``listener`` for ``event``.

        One-shot registrations are searched before persistent ones. Unknown
        listeners are ignored.
        """
        if self._once.remove_first(event, listener):
            logger.debug("Removed once listener %r from event %r", listener, event)
        elif self._on.remove_first(event, listener):
            logger.debug("Removed on listener %r from event %r", listener, event)
        return self

    def remove_listener(self, event: E, listener: Listener) -> EventEmitter[E]:
        """Alias for :meth:`off`."""
        return self.off(event, listener)

    def remove_all_listeners(self, *events: E) -> EventEmitter[E]:
        """Drop every listener, or only those of the given events."""
        if not events:
            self._on.clear()
            self._once.clear()
            logger.debug("Removed all listeners")
            return self
        for event in events:
            self._on.delete(event)
            self._once.delete(event)
        logger.debug("Removed all listeners for events %r", events)
        return self

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def emit(self, event: E, *args: Any, **kwargs: Any) -> bool:
        """Call the listeners of ``event`` with the given arguments.

        Persistent listeners run first, then one-shot listeners, which are
        removed as they fire. Returns ``False`` without calling anything when
        ``event`` has no persistent listener; one-shot listeners alone are
        never triggered. Exceptions raised by a listener propagate and stop
        the emission.
        """
        if self._on.count(event) == 0:
            logger.debug("Emitting %r with no persistent listeners", event)
            return False

        called = call_listeners(self._on, event, args, kwargs)
        if self._once.count(event) > 0:
            called += drain_once_listeners(self._once, event, args, kwargs)
        logger.debug("Emitted %r to %d listeners", event, called)
        return True

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def event_names(self) -> list[E]:
        names: list[E] = []
        for event in self._on.events() + self._once.events():
            if event not in names:
                names.append(event)
        return names

    def listener_count(self, event: E) -> int:
        return self._on.count(event) + self._once.count(event)

    def listeners(self, event: E) -> list[Listener]:
        """Return persistent then one-shot listeners of ``event`` as a new list."""
        return self._on.list_for_event(event) + self._once.list_for_event(event)

    # ------------------------------------------------------------------
    # Threshold
    # ------------------------------------------------------------------

    def set_max_listeners(self, n: int) -> EventEmitter[E]:
        """Set the per-event listener count above which additions raise.

        Only later additions are checked against the new value.
        """
        self._max_listeners = EmitterSettings(max_listeners=n).max_listeners
        return self

    def get_max_listeners(self) -> int:
        return self._max_listeners
