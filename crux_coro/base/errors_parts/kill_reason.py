"""
Immutable record of why the engine killed a coroutine.
"""
from __future__ import annotations

from dataclasses import dataclass

from .fault_code import KILL_CODES, FaultCode


@dataclass(frozen=True)
class KillReason:
    """Cause recorded when the engine forcibly ends a suspended body.

    Attributes:
        kind: ``FaultCode.LEAKED`` or ``FaultCode.CANCELLED``.
        cause: Human-readable trigger (the token's reason for cancellations).
    """

    kind: FaultCode
    cause: str

    def __post_init__(self) -> None:
        if self.kind not in KILL_CODES:
            raise ValueError(f"not a kill code: {self.kind!r}")

    @classmethod
    def leaked(cls, cause: str = "resume handle unreachable") -> "KillReason":
        return cls(FaultCode.LEAKED, cause)

    @classmethod
    def cancelled(cls, cause: str | None = None) -> "KillReason":
        return cls(FaultCode.CANCELLED, cause or "operation cancelled")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.kind.value}: {self.cause}"


__all__ = ["KillReason"]
