"""Value slots written by the value-passing coroutine wrappers.

``Slot`` is the typed, caller-owned container passed to ``next`` calls.
``ValueSlot`` is the type-erased contract used by :func:`new_iterator`:
anything with a ``set(value)`` method, such as ``AttrSlot`` (assigns an
attribute) or ``ItemSlot`` (assigns a key).
"""
from __future__ import annotations

from typing import Any, Generic, MutableMapping, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ValueSlot(Protocol):  # pragma: no cover - structural protocol
    def set(self, value: Any) -> None: ...


class Slot(Generic[T]):
    """Holds the last value written into it.

    ``filled`` tells an unset slot apart from one holding ``None``.
    """

    __slots__ = ("value", "filled")

    def __init__(self, value: Optional[T] = None) -> None:
        self.value = value
        self.filled = False

    def set(self, value: T) -> None:
        self.value = value
        self.filled = True

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Slot({self.value!r})" if self.filled else "Slot(<empty>)"


class AttrSlot:
    """Writes values with ``setattr(target, name, value)``."""

    __slots__ = ("_target", "_name")

    def __init__(self, target: object, name: str) -> None:
        self._target = target
        self._name = name

    def set(self, value: Any) -> None:
        setattr(self._target, self._name, value)


class ItemSlot:
    """Writes values with ``target[key] = value``."""

    __slots__ = ("_target", "_key")

    def __init__(self, target: MutableMapping[Any, Any], key: Any) -> None:
        self._target = target
        self._key = key

    def set(self, value: Any) -> None:
        self._target[self._key] = value


__all__ = ["ValueSlot", "Slot", "AttrSlot", "ItemSlot"]
