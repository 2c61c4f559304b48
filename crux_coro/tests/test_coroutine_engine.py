"""Behavioural tests for the turn-taking engine.

Covers liveness echo, strict alternation, lazy start, repeated resume after
termination, fault propagation policy and option handling.
"""
from __future__ import annotations

import threading
import time

import pytest
from pydantic import ValidationError

from crux_coro import (
    CoroutineOptions,
    CoroutineState,
    new_coroutine,
)


def test_resume_echoes_each_yield_then_false_forever():
    def body(yield_):
        for _ in range(3):
            yield_()

    resume = new_coroutine(body)
    results = [resume() for _ in range(6)]
    assert results == [True, True, True, False, False, False]  # nosec B101 - pytest assert in tests


def test_body_does_not_start_before_first_resume():
    started = threading.Event()

    def body(yield_):
        started.set()
        yield_()

    resume = new_coroutine(body)
    assert not started.wait(timeout=0.05)  # nosec B101 - pytest assert in tests
    assert resume.state is CoroutineState.NOT_STARTED  # nosec B101 - pytest assert in tests

    assert resume() is True  # nosec B101 - pytest assert in tests
    assert started.is_set()  # nosec B101 - pytest assert in tests
    assert resume.state is CoroutineState.SUSPENDED  # nosec B101 - pytest assert in tests
    assert resume() is False  # nosec B101 - pytest assert in tests
    assert resume.state is CoroutineState.FINISHED  # nosec B101 - pytest assert in tests


def test_body_without_yields_returns_false_on_first_resume():
    ran = []
    resume = new_coroutine(lambda yield_: ran.append(True))
    assert resume() is False  # nosec B101 - pytest assert in tests
    assert ran == [True]  # nosec B101 - pytest assert in tests


def test_controller_and_body_never_overlap():
    lock = threading.Lock()
    active = 0
    peak = 0

    def enter():
        nonlocal active, peak
        with lock:
            active += 1
            peak = max(peak, active)

    def leave():
        nonlocal active
        with lock:
            active -= 1

    def body(yield_):
        for _ in range(25):
            enter()
            time.sleep(0.001)
            leave()
            yield_()

    resume = new_coroutine(body)
    while True:
        enter()
        time.sleep(0.001)
        leave()
        if not resume():
            break

    assert peak == 1  # nosec B101 - pytest assert in tests


def test_values_written_by_body_are_visible_to_controller():
    shared = {"n": 0}

    def body(yield_):
        for i in range(1, 4):
            shared["n"] = i
            yield_()

    resume = new_coroutine(body)
    seen = []
    while resume():
        seen.append(shared["n"])
    assert seen == [1, 2, 3]  # nosec B101 - pytest assert in tests


def test_application_fault_is_not_absorbed(recording_spawn):
    def body(yield_):
        yield_()
        raise ValueError("boom")

    resume = new_coroutine(body, spawn=recording_spawn)
    assert resume() is True  # nosec B101 - pytest assert in tests
    assert resume() is False  # nosec B101 - pytest assert in tests
    assert resume() is False  # nosec B101 - pytest assert in tests
    assert resume.state is CoroutineState.FAILED  # nosec B101 - pytest assert in tests

    recording_spawn.join()
    faults = recording_spawn.drain()
    assert len(faults) == 1 and isinstance(faults[0], ValueError)  # nosec B101 - pytest assert in tests


def test_normal_return_leaves_no_fault(recording_spawn):
    resume = new_coroutine(lambda yield_: yield_(), spawn=recording_spawn)
    assert resume() is True  # nosec B101 - pytest assert in tests
    assert resume() is False  # nosec B101 - pytest assert in tests
    recording_spawn.join()
    assert recording_spawn.drain() == []  # nosec B101 - pytest assert in tests


def test_spawn_failure_propagates_to_constructor():
    def broken_spawn(task):
        raise RuntimeError("no threads left")

    with pytest.raises(RuntimeError, match="no threads left"):
        new_coroutine(lambda yield_: None, spawn=broken_spawn)


def test_options_overrides_are_merged_and_validated():
    base = CoroutineOptions(name="worker")
    resume = new_coroutine(lambda yield_: None, base, leak_detection=False)
    assert resume.name == "worker"  # nosec B101 - pytest assert in tests
    assert resume() is False  # nosec B101 - pytest assert in tests

    with pytest.raises(ValidationError):
        new_coroutine(lambda yield_: None, spawn="not callable")
    with pytest.raises(ValidationError):
        new_coroutine(lambda yield_: None, cancellation_token=object())


def test_options_are_immutable():
    options = CoroutineOptions()
    with pytest.raises(ValidationError):
        options.name = "changed"  # type: ignore[misc]
    assert options.cancellation_token.cancelled is False  # nosec B101 - pytest assert in tests
