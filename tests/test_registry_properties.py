"""Property-based tests for the registry."""

from __future__ import annotations

from hypothesis import given, strategies as st

from emitter.domain.registry import EventEmitter

event_ids = st.one_of(st.text(max_size=8), st.integers())
payloads = st.lists(st.one_of(st.integers(), st.text(max_size=5), st.none()), max_size=4)


@given(event=event_ids, args=payloads)
def test_on_then_emit_delivers_once(event, args):
    emitter = EventEmitter()
    received: list[tuple] = []
    emitter.on(event, lambda *a: received.append(a))

    assert emitter.emit(event, *args) is True
    assert received == [tuple(args)]


@given(event=event_ids, args=payloads)
def test_once_alone_never_fires(event, args):
    emitter = EventEmitter()
    received: list[tuple] = []
    emitter.once(event, lambda *a: received.append(a))

    assert emitter.emit(event, *args) is False
    assert received == []


@given(on_count=st.integers(0, 10), once_count=st.integers(0, 10))
def test_listener_count_sums_both_lists(on_count, once_count):
    emitter = EventEmitter()
    for _ in range(on_count):
        emitter.on("e", lambda: None)
    for _ in range(once_count):
        emitter.once("e", lambda: None)

    assert emitter.listener_count("e") == on_count + once_count
    assert len(emitter.listeners("e")) == on_count + once_count


@given(events=st.lists(event_ids, max_size=12))
def test_event_names_unique_in_first_seen_order(events):
    emitter = EventEmitter(max_listeners=len(events))
    for event in events:
        emitter.on(event, lambda: None)

    assert emitter.event_names() == list(dict.fromkeys(events))


@given(on_count=st.integers(1, 5), once_count=st.integers(0, 5))
def test_second_emit_reaches_only_persistent(on_count, once_count):
    emitter = EventEmitter()
    hits = {"on": 0, "once": 0}

    def on_listener():
        hits["on"] += 1

    def once_listener():
        hits["once"] += 1

    for _ in range(on_count):
        emitter.on("e", on_listener)
    for _ in range(once_count):
        emitter.once("e", once_listener)

    emitter.emit("e")
    emitter.emit("e")

    assert hits == {"on": 2 * on_count, "once": once_count}
    assert emitter.listener_count("e") == on_count
