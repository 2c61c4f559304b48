"""Value-passing APIs (enumerator, generator, loop, iterator) over the engine."""

from .slots import AttrSlot, ItemSlot, Slot, ValueSlot
from .value_apis import (
    CoEnumerator,
    CoGenerator,
    CoIterator,
    CoLoop,
    enumerate_values,
    generate,
    loop,
    new_iterator,
)

__all__ = [
    "AttrSlot",
    "ItemSlot",
    "Slot",
    "ValueSlot",
    "CoEnumerator",
    "CoGenerator",
    "CoIterator",
    "CoLoop",
    "enumerate_values",
    "generate",
    "loop",
    "new_iterator",
]
