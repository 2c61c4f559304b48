"""Unbuffered two-party rendezvous used for every transfer of control.

A :class:`Handoff` holds at most one pending exchange. ``send`` blocks the
sender until a receiver has taken the offer, ``receive`` blocks the
receiver until a sender offers or the handoff is closed. A sender may also
be released by an ``interrupted`` check, re-evaluated whenever
:meth:`Handoff.interrupt` is called; the offer is then withdrawn, so each
``send`` ends in exactly one of {taken, interrupted}.
"""
from __future__ import annotations

import threading
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def _never() -> None:
    return None


class Handoff:
    """Single-sender, single-receiver rendezvous with close semantics."""

    def __init__(self) -> None:
        # Reentrant: interrupt() may run from a finalizer on a thread that
        # already holds the lock.
        self._cond = threading.Condition(threading.RLock())
        self._offered = False
        self._taken = False
        self._closed = False

    def send(self, interrupted: Callable[[], Optional[T]] = _never) -> Optional[T]:
        """Offer one exchange and wait for it to be taken.

        Returns ``None`` once a receiver took the offer, or the first
        non-``None`` result of ``interrupted()``. A check that is already
        satisfied on entry wins over a waiting receiver.
        """
        with self._cond:
            if self._closed:
                raise RuntimeError("send on closed handoff")
            self._offered = True
            self._cond.notify_all()
            while True:
                if self._taken:
                    self._taken = False
                    return None
                outcome = interrupted()
                if outcome is not None:
                    self._offered = False
                    return outcome
                self._cond.wait()

    def receive(self) -> bool:
        """Take the pending offer; ``False`` once the handoff is closed."""
        with self._cond:
            while not self._offered:
                if self._closed:
                    return False
                self._cond.wait()
            self._offered = False
            self._taken = True
            self._cond.notify_all()
            return True

    def close(self) -> None:
        """Release current and future receivers with ``False``."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def interrupt(self) -> None:
        """Wake a blocked sender so it re-evaluates its ``interrupted`` check."""
        with self._cond:
            self._cond.notify_all()


__all__ = ["Handoff"]
