"""Turn-taking rendezvous engine, leak sentinel and cancellation binding."""

from .coroutine import Body, Coroutine, CoroutineState, Resume, YieldFunc, new_coroutine
from .handoff import Handoff

__all__ = ["Body", "Coroutine", "CoroutineState", "Handoff", "Resume", "YieldFunc", "new_coroutine"]
