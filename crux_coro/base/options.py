"""Typed construction options for coroutines.

Purpose
-------
Capture the immutable configuration a coroutine is created with: which
cancellation signal kills it, how its body's task is started and whether
the leak sentinel is armed.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_copy`` overrides.

Failure modes & side effects
----------------------------
- Pure data container: no I/O side effects. ``pydantic.ValidationError`` is
  raised when a value has the wrong shape (e.g. a non-callable spawn).
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cancellation import CancellationSignal, CancellationToken
from .runtime_config import get_runtime_config
from .spawn import spawn_thread


class CoroutineOptions(BaseModel):
    """Options recognized by ``new_coroutine``.

    Attributes
    ----------
    cancellation_token:
        Signal that kills the coroutine when it fires. Defaults to a fresh
        token nobody else holds, i.e. one that never fires.
    spawn:
        Function used to start the body's concurrent task. Defaults to
        :func:`~crux_coro.base.spawn.spawn_thread`.
    leak_detection:
        Whether to kill a suspended body once its resume handle becomes
        unreachable. Defaults to ``CORO_LEAK_DETECTION``.
    name:
        Optional label used in structured log events.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    cancellation_token: Any = Field(default_factory=CancellationToken)
    spawn: Callable[[Callable[[], None]], None] = spawn_thread
    leak_detection: bool = Field(default_factory=lambda: get_runtime_config().leak_detection)
    name: Optional[str] = None

    @field_validator("cancellation_token")
    @classmethod
    def _check_token(cls, value: Any) -> Any:
        if not isinstance(value, CancellationSignal):
            raise ValueError(
                "cancellation_token must provide cancelled, reason, add_callback and remove_callback"
            )
        return value


__all__ = ["CoroutineOptions"]
