"""Errors parts package public surface.

Re-exports individual fault taxonomy components for optional direct imports.
Prefer importing from `crux_coro.base.errors` for the stable surface.
"""

from .fault_code import FaultCode, KILL_CODES
from .kill_reason import KillReason
from .coroutine_killed import CoroutineKilled
from .classification import classify_fault, is_kill

__all__ = ["FaultCode", "KILL_CODES", "KillReason", "CoroutineKilled", "classify_fault", "is_kill"]
