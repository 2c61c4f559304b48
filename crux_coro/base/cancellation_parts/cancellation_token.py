"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class used to kill suspended coroutines
and to let running bodies poll for early termination. Firing is a one-time,
monotonic transition; the first reason supplied wins.
"""

from __future__ import annotations

from threading import Event, Lock, Timer
from typing import Callable, List

from .state import State
from .cancelled_error import CancelledError


class CancellationToken:
    """A cooperative cancellation token with optional cascading semantics.

    Thread-safe. Child tokens inherit cancellation when the parent is
    cancelled. Callbacks registered with ``add_callback`` run exactly once,
    in the thread that fires the token (or immediately when registered on
    an already cancelled token).
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._fired = Event()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cooperative cancellation, run callbacks and cascade to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            callbacks = list(self._state.callbacks)
            self._state.callbacks.clear()
            children = list(self._children)
        self._fired.set()
        for callback in callbacks:
            callback()
        for child in children:
            child.cancel(reason)

    def cancel_after(self, seconds: float, reason: str | None = "deadline exceeded") -> Timer:
        """Cancel the token once ``seconds`` elapse; returns the started timer.

        The caller may ``cancel()`` the returned timer to disarm the deadline.
        """
        timer = Timer(seconds, self.cancel, args=(reason,))
        timer.daemon = True
        timer.start()
        return timer

    def add_callback(self, callback: Callable[[], None]) -> None:
        """Register ``callback`` to run once when the token fires."""
        with self._lock:
            if not self._state.cancelled:
                self._state.callbacks.append(callback)
                return
        callback()

    def remove_callback(self, callback: Callable[[], None]) -> None:
        """Unregister a callback; unknown callbacks are ignored."""
        with self._lock:
            if callback in self._state.callbacks:
                self._state.callbacks.remove(callback)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the token fires or ``timeout`` elapses; returns ``cancelled``."""
        return self._fired.wait(timeout)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
