"""Tests for the value-passing wrappers built on the engine."""
from __future__ import annotations

import gc
import queue

import pytest

from crux_coro import (
    AttrSlot,
    CancellationToken,
    CoIterator,
    CoroutineKilled,
    CoroutineState,
    FaultCode,
    ItemSlot,
    Slot,
    enumerate_values,
    generate,
    loop,
    new_iterator,
)


def _one_two_three_done(yield_value):
    for i in (1, 2, 3):
        yield_value(i)
    return "done"


def test_generate_reports_values_in_order_then_return_value():
    gen = generate(_one_two_three_done)
    returned: Slot[str] = Slot()
    yielded: Slot[int] = Slot()

    seen = []
    while gen.next(returned, yielded):
        seen.append(yielded.value)
        assert not returned.filled  # nosec B101 - pytest assert in tests

    assert seen == [1, 2, 3]  # nosec B101 - pytest assert in tests
    assert returned.value == "done"  # nosec B101 - pytest assert in tests
    assert gen.next(returned, yielded) is False  # nosec B101 - pytest assert in tests


def test_generate_writes_into_the_slots_of_each_call():
    gen = generate(_one_two_three_done)
    returned: Slot[str] = Slot()
    first, second = Slot(), Slot()

    assert gen.next(returned, first) is True  # nosec B101 - pytest assert in tests
    assert gen.next(returned, second) is True  # nosec B101 - pytest assert in tests
    assert (first.value, second.value) == (1, 2)  # nosec B101 - pytest assert in tests
    gen.close()


def test_generate_iteration_keeps_returned_value():
    gen = generate(_one_two_three_done)
    assert list(gen) == [1, 2, 3]  # nosec B101 - pytest assert in tests
    assert gen.returned == "done"  # nosec B101 - pytest assert in tests


def test_enumerate_values_order_and_iteration():
    def body(yield_value):
        for word in ("foo", "bar", "baz"):
            yield_value(word)

    enum = enumerate_values(body)
    slot: Slot[str] = Slot()
    assert enum.next(slot) is True and slot.value == "foo"  # nosec B101 - pytest assert in tests
    assert list(enum) == ["bar", "baz"]  # nosec B101 - pytest assert in tests
    assert enum(slot) is False  # nosec B101 - pytest assert in tests


def test_loop_only_returns_a_value():
    def body(yield_):
        total = 0
        for i in range(4):
            total += i
            yield_()
        return total

    handle = loop(body)
    returned: Slot[int] = Slot()
    turns = 0
    while handle.next(returned):
        turns += 1
    assert turns == 4  # nosec B101 - pytest assert in tests
    assert returned.value == 6  # nosec B101 - pytest assert in tests


def test_killed_generator_leaves_returned_slot_empty():
    token = CancellationToken()
    gen = generate(_one_two_three_done, cancellation_token=token)
    returned, yielded = Slot(), Slot()
    assert gen.next(returned, yielded) is True  # nosec B101 - pytest assert in tests
    token.cancel()
    assert gen.next(returned, yielded) is False  # nosec B101 - pytest assert in tests
    assert returned.filled is False  # nosec B101 - pytest assert in tests


def test_new_iterator_uses_dynamic_assignment():
    class Target:
        yielded = None

    target = Target()
    results = {}
    resume = new_iterator(AttrSlot(target, "yielded"), ItemSlot(results, "returned"), _one_two_three_done)

    seen = []
    while resume():
        seen.append(target.yielded)
    assert seen == [1, 2, 3]  # nosec B101 - pytest assert in tests
    assert results == {"returned": "done"}  # nosec B101 - pytest assert in tests


def test_new_iterator_rejects_objects_without_set():
    with pytest.raises(TypeError, match=r"set\(value\)"):
        new_iterator(object(), Slot(), _one_two_three_done)


@pytest.mark.parametrize(
    "bad_next",
    [
        lambda gen: gen.next(Slot(), None),
        lambda gen: gen.next(object(), Slot()),
    ],
)
def test_generator_rejects_bad_slots_without_resuming(bad_next, recording_spawn):
    gen = generate(_one_two_three_done, spawn=recording_spawn)
    with pytest.raises(TypeError, match=r"set\(value\)"):
        bad_next(gen)
    assert gen.state is CoroutineState.NOT_STARTED  # nosec B101 - pytest assert in tests

    assert list(gen) == [1, 2, 3]  # nosec B101 - pytest assert in tests
    assert gen.returned == "done"  # nosec B101 - pytest assert in tests
    recording_spawn.join()
    assert recording_spawn.drain() == []  # nosec B101 - pytest assert in tests


def test_enumerator_rejects_missing_slot_and_keeps_running(recording_spawn):
    values = enumerate_values(_one_two_three_done, spawn=recording_spawn)
    slot: Slot[int] = Slot()
    assert values.next(slot) is True  # nosec B101 - pytest assert in tests

    with pytest.raises(TypeError, match="yielded"):
        values.next(None)
    assert values.state is CoroutineState.SUSPENDED  # nosec B101 - pytest assert in tests

    assert values.next(slot) is True and slot.value == 2  # nosec B101 - pytest assert in tests
    values.close()
    recording_spawn.join()
    assert recording_spawn.drain() == []  # nosec B101 - pytest assert in tests


def test_loop_rejects_missing_slot_and_keeps_running(recording_spawn):
    def body(yield_):
        yield_()
        return 7

    looped = loop(body, spawn=recording_spawn)
    with pytest.raises(TypeError, match="returned"):
        looped.next(None)

    returned: Slot[int] = Slot()
    assert looped.next(returned) is True  # nosec B101 - pytest assert in tests
    assert looped.next(returned) is False  # nosec B101 - pytest assert in tests
    assert returned.value == 7  # nosec B101 - pytest assert in tests
    recording_spawn.join()
    assert recording_spawn.drain() == []  # nosec B101 - pytest assert in tests


def test_typed_iterator_wrapper():
    def body(yield_value):
        for v in ("foo", "bar"):
            yield_value(v)
        return RuntimeError("done")

    it: CoIterator[str, Exception] = CoIterator(body)
    seen = []
    while it.next():
        seen.append(it.yielded)
    assert seen == ["foo", "bar"]  # nosec B101 - pytest assert in tests
    assert isinstance(it.returned, RuntimeError) and str(it.returned) == "done"  # nosec B101


def test_dropped_typed_iterator_kills_its_body():
    observed: "queue.Queue" = queue.Queue()

    def body(yield_value):
        try:
            while True:
                yield_value(1)
        except CoroutineKilled as exc:
            observed.put(exc.reason)
            raise

    def drive():
        it = CoIterator(body)
        assert it.next() is True  # nosec B101 - pytest assert in tests

    drive()
    gc.collect()
    assert observed.get(timeout=5).kind is FaultCode.LEAKED  # nosec B101 - pytest assert in tests


def test_wrapper_close_via_context_manager():
    observed: "queue.Queue" = queue.Queue()

    def body(yield_value):
        try:
            while True:
                yield_value(0)
        except CoroutineKilled as exc:
            observed.put(exc.reason)
            raise

    with enumerate_values(body) as enum:
        assert enum.next(Slot()) is True  # nosec B101 - pytest assert in tests
    assert observed.get(timeout=5).cause == "resume handle closed"  # nosec B101 - pytest assert in tests
