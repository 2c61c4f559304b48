"""Leak sentinel: notices when a resume handle can no longer be called.

The sentinel attaches a ``weakref.finalize`` to the resume handle. When the
handle becomes unreachable (or is closed explicitly) the sentinel fires
once and wakes the suspended body through its handoff. Detection follows
the interpreter's collection cadence: immediate under reference counting,
after a ``gc.collect()`` pass for handles caught in reference cycles.
"""
from __future__ import annotations

import weakref
from typing import Optional

from ..base.errors import KillReason
from .handoff import Handoff


class LeakSentinel:
    """One-shot unreachability notification for a single resume handle."""

    def __init__(self, handoff: Handoff, *, enabled: bool = True) -> None:
        self._handoff = handoff
        self._enabled = enabled
        self._reason: Optional[KillReason] = None
        self._finalizer: Optional[weakref.finalize] = None

    @property
    def reason(self) -> Optional[KillReason]:
        """Kill reason once fired, otherwise ``None``."""
        return self._reason

    def watch(self, handle: object) -> None:
        """Arm the sentinel on ``handle``; no-op when disabled."""
        if not self._enabled:
            return
        # The callback must not reference ``handle``.
        self._finalizer = weakref.finalize(handle, self._fire, KillReason.leaked())
        self._finalizer.atexit = False

    def release(self) -> None:
        """Fire now, as if the handle had become unreachable."""
        if self._finalizer is not None:
            self._finalizer.detach()
        self._fire(KillReason.leaked("resume handle closed"))

    def detach(self) -> None:
        """Disarm without firing, once the body has terminated."""
        if self._finalizer is not None:
            self._finalizer.detach()
            self._finalizer = None

    def _fire(self, reason: KillReason) -> None:
        if self._reason is None:
            self._reason = reason
        self._handoff.interrupt()


__all__ = ["LeakSentinel"]
