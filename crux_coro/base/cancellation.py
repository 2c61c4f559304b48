"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable cancellation constructs via the canonical
``crux_coro.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts`` for organization.

Notes
-----
- ``CancellationSignal`` is the structural contract the engine consumes; any
	object with ``cancelled``, ``reason``, ``add_callback`` and
	``remove_callback`` can be bound to a coroutine.
- ``CancellationToken`` is the bundled implementation of that contract.
- ``CancelledError`` is raised by bodies that poll a token between yields.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken


@runtime_checkable
class CancellationSignal(Protocol):  # pragma: no cover - structural protocol
    """One-shot, monotonic fire signal observable without blocking."""

    @property
    def cancelled(self) -> bool: ...

    @property
    def reason(self) -> Optional[str]: ...

    def add_callback(self, callback: Callable[[], None]) -> None: ...

    def remove_callback(self, callback: Callable[[], None]) -> None: ...


__all__ = ["CancellationSignal", "CancellationToken", "CancelledError"]
