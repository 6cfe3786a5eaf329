"""In-memory stores for registered listeners."""

from __future__ import annotations

from collections.abc import Hashable

from emitter.domain.models import Listener


class ListenerRepository:
    """Dict-backed store mapping an event to its ordered list of listeners.

    A listener matches an entry when it is the same object or compares
    equal to it, so ``obj.method`` matches a later ``obj.method`` access.
    """

    def __init__(self) -> None:
        self._store: dict[Hashable, list[Listener]] = {}

    def append(self, event: Hashable, listener: Listener) -> int:
        """Add a listener at the end of the event's list; return the new length."""
        listeners = self._store.setdefault(event, [])
        listeners.append(listener)
        return len(listeners)

    def prepend(self, event: Hashable, listener: Listener) -> int:
        """Add a listener at the head of the event's list; return the new length."""
        listeners = self._store.setdefault(event, [])
        listeners.insert(0, listener)
        return len(listeners)

    def index(self, event: Hashable, listener: Listener) -> int:
        for i, candidate in enumerate(self._store.get(event, ())):
            if candidate is listener or candidate == listener:
                return i
        return -1

    def remove_first(self, event: Hashable, listener: Listener) -> bool:
        """Drop the first entry that is ``listener``; return whether one was found."""
        i = self.index(event, listener)
        if i == -1:
            return False
        del self._store[event][i]
        return True

    def list_for_event(self, event: Hashable) -> list[Listener]:
        return list(self._store.get(event, ()))

    def count(self, event: Hashable) -> int:
        return len(self._store.get(event, ()))

    def events(self) -> list[Hashable]:
        return list(self._store)

    def delete(self, event: Hashable) -> None:
        self._store.pop(event, None)

    def clear(self) -> None:
        self._store.clear()
