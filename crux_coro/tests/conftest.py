"""Pytest configuration for the coroutine test suite.

Provides a spawn function that records faults escaping a body's task, so
tests can assert which faults the engine absorbs and which it re-raises
without relying on ``threading.excepthook`` output.
"""

from __future__ import annotations

import queue
import threading
from typing import Callable, Iterator, List

import pytest


class RecordingSpawn:
    """Spawn function starting daemon threads and collecting escaped faults."""

    def __init__(self) -> None:
        self.faults: "queue.Queue[BaseException]" = queue.Queue()
        self.threads: List[threading.Thread] = []

    def __call__(self, task: Callable[[], None]) -> None:
        def target() -> None:
            try:
                task()
            except BaseException as exc:  # noqa: BLE001 - recorded for assertions
                self.faults.put(exc)

        thread = threading.Thread(target=target, name=f"recording-{len(self.threads) + 1}", daemon=True)
        self.threads.append(thread)
        thread.start()

    def join(self, timeout: float = 5.0) -> None:
        for thread in self.threads:
            thread.join(timeout)

    def drain(self) -> List[BaseException]:
        out: List[BaseException] = []
        while not self.faults.empty():
            out.append(self.faults.get_nowait())
        return out


@pytest.fixture()
def recording_spawn() -> Iterator[RecordingSpawn]:
    """Yield a ``RecordingSpawn`` and join its threads after the test."""

    spawn = RecordingSpawn()
    yield spawn
    spawn.join(timeout=1.0)


@pytest.fixture(autouse=True)
def _rebind_log_stream() -> Iterator[None]:
    """Point the shared console handler at this test's ``sys.stderr``."""

    from crux_coro.base.logging import get_logger

    get_logger()
    yield
