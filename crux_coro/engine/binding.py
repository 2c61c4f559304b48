"""Cancellation binding: ties a coroutine's lifetime to a cancellation signal."""
from __future__ import annotations

from typing import Optional

from ..base.cancellation import CancellationSignal
from ..base.errors import KillReason
from .handoff import Handoff


class CancellationBinding:
    """Wakes the suspended body when the bound signal fires.

    The signal is only observed at suspension points; firing while the body
    runs takes effect at its next yield.
    """

    def __init__(self, token: CancellationSignal, handoff: Handoff) -> None:
        self._token = token
        self._handoff = handoff
        self._bound = False

    @property
    def reason(self) -> Optional[KillReason]:
        """Kill reason if the signal has fired, otherwise ``None``."""
        if not self._token.cancelled:
            return None
        return KillReason.cancelled(self._token.reason)

    def bind(self) -> None:
        if not self._bound:
            self._token.add_callback(self._handoff.interrupt)
            self._bound = True

    def unbind(self) -> None:
        if self._bound:
            self._token.remove_callback(self._handoff.interrupt)
            self._bound = False


__all__ = ["CancellationBinding"]
