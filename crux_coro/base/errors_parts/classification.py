"""
Fault classification helpers.

Maps a fault that propagated out of a coroutine body to a :class:`FaultCode`
and decides whether the engine absorbs it. Only the engine's own kill
signal is absorbed; everything else is an application fault.
"""
from __future__ import annotations

from .coroutine_killed import CoroutineKilled
from .fault_code import FaultCode


def is_kill(exc: BaseException) -> bool:
    """Return ``True`` when ``exc`` is the engine's kill signal."""
    return isinstance(exc, CoroutineKilled)


def classify_fault(exc: BaseException) -> FaultCode:
    """Classify a fault raised by a coroutine body.

    Precedence:
        1. ``CoroutineKilled`` maps to its recorded kind.
        2. Anything else is ``APPLICATION``.
    """
    if isinstance(exc, CoroutineKilled):
        return exc.kind
    return FaultCode.APPLICATION


__all__ = ["classify_fault", "is_kill"]
