"""Unified coroutine fault taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``crux_coro.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.fault_code import FaultCode
from .errors_parts.kill_reason import KillReason
from .errors_parts.coroutine_killed import CoroutineKilled
from .errors_parts.classification import classify_fault, is_kill

__all__ = ["FaultCode", "KillReason", "CoroutineKilled", "classify_fault", "is_kill"]
