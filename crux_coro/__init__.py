"""crux_coro package

Cooperative coroutines on top of threads.

Purpose:
    Run a unit of work on its own thread such that it executes only while a
    controller explicitly resumes it, and hands control back by yielding.
    Controller and body never run user code at the same time, so their
    executions are implicitly synchronized.

Public API (re-exported):
    - Engine: :func:`new_coroutine`, :class:`Resume`, :class:`CoroutineState`
    - Options: :class:`CoroutineOptions`, :func:`spawn_thread`, :func:`executor_spawn`
    - Cancellation: :class:`CancellationToken`, :class:`CancellationSignal`,
      :class:`CancelledError`
    - Faults: :class:`CoroutineKilled`, :class:`KillReason`, :class:`FaultCode`,
      :func:`classify_fault`, :func:`is_kill`
    - Value passing: :func:`enumerate_values`, :func:`generate`, :func:`loop`,
      :func:`new_iterator`, :class:`CoIterator`, :class:`Slot` and friends

Example::

    resume = new_coroutine(lambda yield_: [yield_() for _ in range(3)])
    while resume():
        ...
"""

from .base.cancellation import CancellationSignal, CancellationToken, CancelledError
from .base.errors import CoroutineKilled, FaultCode, KillReason, classify_fault, is_kill
from .base.logging import configure_logger, get_logger
from .base.options import CoroutineOptions
from .base.runtime_config import RuntimeConfig, get_runtime_config
from .base.spawn import SpawnFunc, executor_spawn, spawn_thread
from .engine import CoroutineState, Resume, new_coroutine
from .iterators import (
    AttrSlot,
    CoEnumerator,
    CoGenerator,
    CoIterator,
    CoLoop,
    ItemSlot,
    Slot,
    ValueSlot,
    enumerate_values,
    generate,
    loop,
    new_iterator,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Engine
    "new_coroutine",
    "Resume",
    "CoroutineState",
    "CoroutineOptions",
    "SpawnFunc",
    "spawn_thread",
    "executor_spawn",
    "RuntimeConfig",
    "get_runtime_config",
    # Cancellation
    "CancellationSignal",
    "CancellationToken",
    "CancelledError",
    # Faults
    "CoroutineKilled",
    "FaultCode",
    "KillReason",
    "classify_fault",
    "is_kill",
    # Value passing
    "AttrSlot",
    "ItemSlot",
    "Slot",
    "ValueSlot",
    "CoEnumerator",
    "CoGenerator",
    "CoIterator",
    "CoLoop",
    "enumerate_values",
    "generate",
    "loop",
    "new_iterator",
    # Logging
    "configure_logger",
    "get_logger",
]
