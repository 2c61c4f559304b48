"""Turn-taking coroutine engine.

A coroutine's body runs on its own concurrent task but only while a
controller is blocked in :class:`Resume`; the body hands control back by
calling the yield operation it receives. Every transfer of control is one
exchange on a :class:`~crux_coro.engine.handoff.Handoff`:

- before running any user code, the body offers one exchange that is
  taken by the first ``resume()``;
- each ``yield_()`` offers one exchange ("suspended", taken by the
  pending ``resume()``) and then waits for the next ``resume()``;
- when the body ends, the handoff is closed and every ``resume()``
  returns ``False`` from then on.

While waiting for the next ``resume()`` the body can instead be killed by
the leak sentinel or the cancellation binding. The kill surfaces inside the
body as :class:`~crux_coro.base.errors.CoroutineKilled`, which the engine
absorbs when it propagates out of the body. Any other fault is logged and
re-raised into the spawn function.
"""
from __future__ import annotations

import itertools
import logging
from enum import Enum
from typing import Any, Callable, Optional

from ..base.errors import CoroutineKilled, KillReason, classify_fault, is_kill
from ..base.logging import LogContext, get_logger, log_event
from ..base.options import CoroutineOptions
from ..base.spawn import SpawnFunc
from .binding import CancellationBinding
from .handoff import Handoff
from .sentinel import LeakSentinel

YieldFunc = Callable[[], None]
Body = Callable[[YieldFunc], Any]

_logger = get_logger("coro.engine")
_ids = itertools.count(1)


class CoroutineState(str, Enum):
    """Lifecycle states of a coroutine."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    SUSPENDED = "suspended"
    FINISHED = "finished"
    KILLED = "killed"
    FAILED = "failed"


class Coroutine:
    """State shared by a resume handle and its body's task.

    Nothing here references the :class:`Resume` handle, so the handle's
    reachability is decided by the controller alone.
    """

    def __init__(self, body: Body, options: CoroutineOptions) -> None:
        self.name = options.name or f"coroutine-{next(_ids)}"
        self.state = CoroutineState.NOT_STARTED
        self.handoff = Handoff()
        self._body = body
        self._kill: Optional[KillReason] = None
        self._sentinel = LeakSentinel(self.handoff, enabled=options.leak_detection)
        self._binding = CancellationBinding(options.cancellation_token, self.handoff)

    def start(self, handle: object, spawn: SpawnFunc) -> None:
        self._sentinel.watch(handle)
        self._binding.bind()
        log_event(_logger, "coroutine.spawn", self._ctx(), level=logging.DEBUG)
        try:
            spawn(self.run)
        except BaseException:
            self._teardown()
            raise

    def release(self) -> None:
        self._sentinel.release()

    def run(self) -> None:
        """Entry point executed on the body's task."""
        try:
            self._wait_resume()
            self._body(self.yield_)
        except BaseException as exc:
            if not is_kill(exc):
                self.state = CoroutineState.FAILED
                log_event(
                    _logger,
                    "coroutine.fault",
                    self._ctx(),
                    level=logging.ERROR,
                    fault=classify_fault(exc).value,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                raise
            if self._kill is None:
                self._kill = exc.reason
            self.state = CoroutineState.KILLED
        else:
            self.state = CoroutineState.FINISHED
            log_event(_logger, "coroutine.finished", self._ctx(), level=logging.DEBUG)
        finally:
            self._teardown()

    def yield_(self) -> None:
        """Suspend the body until the next resume; raises if killed instead."""
        if self._kill is not None:
            raise CoroutineKilled(self._kill)
        self.state = CoroutineState.SUSPENDED
        self.handoff.send()
        self._wait_resume()

    def _wait_resume(self) -> None:
        reason = self.handoff.send(self._pending_kill)
        if reason is None:
            self.state = CoroutineState.RUNNING
            return
        self._kill = reason
        self.state = CoroutineState.KILLED
        log_event(_logger, "coroutine.killed", self._ctx())
        raise CoroutineKilled(reason)

    def _pending_kill(self) -> Optional[KillReason]:
        return self._sentinel.reason or self._binding.reason

    def _teardown(self) -> None:
        self._binding.unbind()
        self._sentinel.detach()
        self.handoff.close()

    def _ctx(self) -> LogContext:
        kill = self._kill
        return LogContext(
            coroutine=self.name,
            state=self.state.value,
            kind=kill.kind.value if kill else None,
            cause=kill.cause if kill else None,
        )


class Resume:
    """Caller-held handle that drives a coroutine one turn per call.

    At most one caller may drive a handle at a time. Dropping every
    reference to the handle while the body is suspended kills the body with
    a ``leaked`` reason; :meth:`close` does the same deterministically.
    """

    def __init__(self, coroutine: Coroutine) -> None:
        self._coroutine = coroutine
        self._closed = False

    def __call__(self) -> bool:
        """Run the body until its next yield or its end.

        Returns ``True`` if the body yielded, ``False`` once it has
        returned, failed or been killed.
        """
        if self._closed:
            return False
        handoff = self._coroutine.handoff
        if not handoff.receive():
            return False
        return handoff.receive()

    def close(self) -> None:
        """Kill the body if it is suspended; later calls return ``False``."""
        if self._closed:
            return
        self._closed = True
        self._coroutine.release()

    @property
    def name(self) -> str:
        return self._coroutine.name

    @property
    def state(self) -> CoroutineState:
        return self._coroutine.state

    def __enter__(self) -> "Resume":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Resume(name={self.name!r}, state={self.state.value!r})"


def new_coroutine(body: Body, options: Optional[CoroutineOptions] = None, **overrides: Any) -> Resume:
    """Create a coroutine running ``body`` and return its resume handle.

    ``body`` receives the yield operation as its only argument. It does not
    start running until the first call to the returned handle. Keyword
    overrides are validated as :class:`CoroutineOptions` fields.
    """
    if options is None:
        options = CoroutineOptions(**overrides)
    elif overrides:
        options = CoroutineOptions(**{**dict(options), **overrides})
    coroutine = Coroutine(body, options)
    resume = Resume(coroutine)
    coroutine.start(resume, options.spawn)
    return resume


__all__ = ["Body", "YieldFunc", "CoroutineState", "Coroutine", "Resume", "new_coroutine"]
