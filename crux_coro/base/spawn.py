"""Spawn functions: how a coroutine body's concurrent task gets started.

A spawn function receives a zero-argument unit of work and must begin
executing it concurrently with the caller. The engine never observes a
result from it. What happens to a fault escaping the unit of work is the
spawn function's policy:

- :func:`spawn_thread` (default) runs the work on a fresh thread; escaping
  faults reach ``threading.excepthook``.
- :func:`executor_spawn` submits the work to a ``concurrent.futures``
  executor; escaping faults are captured by the future and logged here.
"""
from __future__ import annotations

import itertools
import logging
import threading
from concurrent.futures import Executor, Future
from typing import Callable

from .logging import get_logger, log_event
from .runtime_config import get_runtime_config

SpawnFunc = Callable[[Callable[[], None]], None]

_logger = get_logger("coro.spawn")
_thread_ids = itertools.count(1)


def spawn_thread(task: Callable[[], None]) -> None:
    """Start ``task`` on a new thread named ``<prefix>-<n>``."""
    cfg = get_runtime_config()
    thread = threading.Thread(
        target=task,
        name=f"{cfg.thread_name_prefix}-{next(_thread_ids)}",
        daemon=cfg.daemon_threads,
    )
    thread.start()


def executor_spawn(executor: Executor) -> SpawnFunc:
    """Return a spawn function that submits work to ``executor``.

    Suspended bodies occupy a worker for as long as they live, so the
    executor needs one worker per coroutine that may be alive at once.
    """

    def _report(future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            log_event(
                _logger,
                "spawn.fault",
                level=logging.ERROR,
                error_type=type(exc).__name__,
                error=str(exc),
            )

    def spawn(task: Callable[[], None]) -> None:
        executor.submit(task).add_done_callback(_report)

    return spawn


__all__ = ["SpawnFunc", "spawn_thread", "executor_spawn"]
