"""Cancellation error type.

Defines the public ``CancelledError`` raised by ``raise_if_cancelled`` when a
body polls its token between yields. Kept isolated to satisfy the
one-class-per-file policy.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation observes a cancellation request while running.

    This is distinct from the engine's kill signal: a body that polls its
    token and raises this error is reporting an application fault, which the
    engine does not absorb.
    """

__all__ = ["CancelledError"]
