"""Value-passing wrappers layered on the coroutine engine.

Each wrapper funnels values from the body to the controller through slots
written exactly once per turn; no synchronization is added on top of the
engine's handoff.

- :func:`enumerate_values`: body yields values; ``next(yielded)``.
- :func:`generate`: body yields values and returns one;
  ``next(returned, yielded)``.
- :func:`loop`: body only returns a value; ``next(returned)``.
- :func:`new_iterator`: type-erased form writing into ``ValueSlot`` objects
  fixed at construction; :class:`CoIterator` is its typed wrapper.

Slots passed to one ``next`` call are valid to read until the next call on
the same handle. The body's task only ever references the slot holder,
never the wrapper, so dropping a wrapper kills its suspended body.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from ..base.options import CoroutineOptions
from ..engine.coroutine import CoroutineState, Resume, YieldFunc, new_coroutine
from .slots import Slot, ValueSlot

Y = TypeVar("Y")
R = TypeVar("R")

YieldValueFunc = Callable[[Y], None]


def _require_slot(slot: object, role: str) -> None:
    # Slots are written on the body's task; a bad one must fail here instead.
    if not isinstance(slot, ValueSlot):
        raise TypeError(f"{role} must be an object with set(value), got {type(slot).__name__}")


class _Turn:
    """Slots supplied by the resume call in progress."""

    __slots__ = ("yielded", "returned")

    def __init__(self) -> None:
        self.yielded: Optional[Slot[Any]] = None
        self.returned: Optional[Slot[Any]] = None


class _Handle:
    def __init__(self, resume: Resume, turn: _Turn) -> None:
        self._resume = resume
        self._turn = turn

    def _step(self, returned: Optional[Slot[Any]], yielded: Optional[Slot[Any]]) -> bool:
        self._turn.returned = returned
        self._turn.yielded = yielded
        return self._resume()

    @property
    def name(self) -> str:
        return self._resume.name

    @property
    def state(self) -> CoroutineState:
        return self._resume.state

    def close(self) -> None:
        self._resume.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class CoEnumerator(_Handle, Generic[Y]):
    """Handle returned by :func:`enumerate_values`."""

    def next(self, yielded: Slot[Y]) -> bool:
        """Resume the body; on ``True`` the yielded value is in ``yielded``."""
        _require_slot(yielded, "yielded")
        return self._step(None, yielded)

    __call__ = next

    def __iter__(self) -> Iterator[Y]:
        slot: Slot[Y] = Slot()
        while self.next(slot):
            yield slot.value  # type: ignore[misc]


class CoGenerator(_Handle, Generic[Y, R]):
    """Handle returned by :func:`generate`.

    Iterating yields each value; once exhausted, ``returned`` holds the
    body's return value (``None`` if it was killed).
    """

    def __init__(self, resume: Resume, turn: _Turn) -> None:
        super().__init__(resume, turn)
        self.returned: Optional[R] = None

    def next(self, returned: Slot[R], yielded: Slot[Y]) -> bool:
        """Resume the body.

        On ``True`` the yielded value is in ``yielded``; on the first
        ``False`` after a normal return, the returned value is in
        ``returned``.
        """
        _require_slot(returned, "returned")
        _require_slot(yielded, "yielded")
        return self._step(returned, yielded)

    __call__ = next

    def __iter__(self) -> Iterator[Y]:
        returned: Slot[R] = Slot()
        yielded: Slot[Y] = Slot()
        while self.next(returned, yielded):
            yield yielded.value  # type: ignore[misc]
        if returned.filled:
            self.returned = returned.value


class CoLoop(_Handle, Generic[R]):
    """Handle returned by :func:`loop`."""

    def next(self, returned: Slot[R]) -> bool:
        """Resume the body; after it returns, its value is in ``returned``."""
        _require_slot(returned, "returned")
        return self._step(returned, None)

    __call__ = next


def enumerate_values(
    body: Callable[[YieldValueFunc[Y]], Any],
    options: Optional[CoroutineOptions] = None,
    **overrides: Any,
) -> CoEnumerator[Y]:
    """Run ``body(yield_value)`` as a coroutine yielding values."""
    turn = _Turn()

    def run(yield_: YieldFunc) -> None:
        def yield_value(value: Y) -> None:
            turn.yielded.set(value)  # type: ignore[union-attr]
            yield_()

        body(yield_value)

    return CoEnumerator(new_coroutine(run, options, **overrides), turn)


def generate(
    body: Callable[[YieldValueFunc[Y]], R],
    options: Optional[CoroutineOptions] = None,
    **overrides: Any,
) -> CoGenerator[Y, R]:
    """Run ``body(yield_value)`` as a coroutine yielding values and returning one."""
    turn = _Turn()

    def run(yield_: YieldFunc) -> None:
        def yield_value(value: Y) -> None:
            turn.yielded.set(value)  # type: ignore[union-attr]
            yield_()

        result = body(yield_value)
        turn.returned.set(result)  # type: ignore[union-attr]

    return CoGenerator(new_coroutine(run, options, **overrides), turn)


def loop(
    body: Callable[[YieldFunc], R],
    options: Optional[CoroutineOptions] = None,
    **overrides: Any,
) -> CoLoop[R]:
    """Run ``body(yield_)`` as a coroutine that only returns a value."""
    turn = _Turn()

    def run(yield_: YieldFunc) -> None:
        result = body(yield_)
        turn.returned.set(result)  # type: ignore[union-attr]

    return CoLoop(new_coroutine(run, options, **overrides), turn)


def new_iterator(
    yielded: ValueSlot,
    returned: ValueSlot,
    body: Callable[[Callable[[Any], None]], Any],
    options: Optional[CoroutineOptions] = None,
    **overrides: Any,
) -> Resume:
    """Type-erased iterator protocol on top of a raw coroutine.

    Each value the body yields is written with ``yielded.set(value)`` before
    the resume call returns ``True``; the body's return value is written
    with ``returned.set(value)`` before the first ``False``.
    """
    _require_slot(yielded, "yielded")
    _require_slot(returned, "returned")

    def run(yield_: YieldFunc) -> None:
        def yield_value(value: Any) -> None:
            yielded.set(value)
            yield_()

        returned.set(body(yield_value))

    return new_coroutine(run, options, **overrides)


class CoIterator(Generic[Y, R]):
    """Typed wrapper over :func:`new_iterator`.

    ``next()`` blocks until the next value is available in ``yielded``, or
    until the body returns, in which case its value is in ``returned``.
    """

    def __init__(
        self,
        body: Callable[[YieldValueFunc[Y]], R],
        options: Optional[CoroutineOptions] = None,
        **overrides: Any,
    ) -> None:
        self._yielded: Slot[Y] = Slot()
        self._returned: Slot[R] = Slot()
        self._next = new_iterator(self._yielded, self._returned, body, options, **overrides)

    @property
    def yielded(self) -> Optional[Y]:
        return self._yielded.value

    @property
    def returned(self) -> Optional[R]:
        return self._returned.value

    @property
    def state(self) -> CoroutineState:
        return self._next.state

    def next(self) -> bool:
        return self._next()

    __call__ = next

    def close(self) -> None:
        self._next.close()

    def __iter__(self) -> Iterator[Y]:
        while self._next():
            yield self._yielded.value  # type: ignore[misc]

    def __enter__(self) -> "CoIterator[Y, R]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = [
    "CoEnumerator",
    "CoGenerator",
    "CoLoop",
    "CoIterator",
    "enumerate_values",
    "generate",
    "loop",
    "new_iterator",
]
