"""Per-coroutine fields attached to every engine log event."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LogContext:
    """Snapshot of a coroutine at the moment an event is logged.

    ``kind`` and ``cause`` are only set once the coroutine has a kill
    reason; unset fields are left out of the payload.
    """

    coroutine: Optional[str] = None
    state: Optional[str] = None
    kind: Optional[str] = None
    cause: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in vars(self).items() if v is not None}


__all__ = ["LogContext"]
