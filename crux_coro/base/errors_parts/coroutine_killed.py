"""
Kill signal raised inside a coroutine body by its yield operation.

The signal derives from ``BaseException`` so that ordinary ``except
Exception`` handlers inside a body let it through to the engine, the same
way ``asyncio.CancelledError`` and ``GeneratorExit`` behave.
"""
from __future__ import annotations

from .fault_code import FaultCode
from .kill_reason import KillReason


class CoroutineKilled(BaseException):
    """Raised at a suspension point when the coroutine is killed.

    Bodies may intercept it to run cleanup but must re-raise it (or an
    equivalent ``CoroutineKilled``) so the engine can absorb it.

    Attributes:
        reason: The :class:`KillReason` assigned to the coroutine.
    """

    def __init__(self, reason: KillReason) -> None:
        super().__init__(reason)
        self.reason = reason

    @property
    def kind(self) -> FaultCode:  # noqa: D401 - short property
        """Shortcut for ``reason.kind``."""
        return self.reason.kind

    def __str__(self) -> str:
        return f"coroutine killed: {self.reason}"


__all__ = ["CoroutineKilled"]
