"""
Normalized coroutine fault codes (taxonomy).

Defines the `FaultCode` enumeration used by the fault classifier, the kill
signal and structured logging. Values are lowercase snake_case and are
considered a stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class FaultCode(str, Enum):
    """Enumerated fault categories for faults leaving a coroutine body."""

    LEAKED = "leaked"
    CANCELLED = "cancelled"
    APPLICATION = "application"


KILL_CODES = (FaultCode.LEAKED, FaultCode.CANCELLED)


__all__ = ["FaultCode", "KILL_CODES"]
