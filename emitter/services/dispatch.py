"""Service for delivering an emission to registered listeners."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from emitter.repos.memory import ListenerRepository


def call_listeners(
    repo: ListenerRepository,
    event: Hashable,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> int:
    """Invoke every listener registered for ``event`` when the call starts.

    Listeners added or removed while this runs do not change who gets called.
    Returns the number of listeners invoked. Listener exceptions propagate.
    """
    listeners = repo.list_for_event(event)
    for listener in listeners:
        listener(*args, **kwargs)
    return len(listeners)


def drain_once_listeners(
    repo: ListenerRepository,
    event: Hashable,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> int:
    """Invoke and remove the one-shot listeners registered for ``event``.

    Each entry is detached before it is called, so a reentrant emission of the
    same event cannot reach it again. Entries already consumed or removed by
    the time their turn comes are skipped.

    Returns the number of listeners invoked.
    """
    fired = 0
    for listener in repo.list_for_event(event):
        if not repo.remove_first(event, listener):
            continue
        listener(*args, **kwargs)
        fired += 1
    return fired
