"""A deep equivalence relation for arbitrary values."""

from __future__ import annotations

import dataclasses
import types
from typing import Any

_ATOMIC = (bool, int, float, complex, str, bytes, range, type(None))
_ROUTINES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
)


def equal(x: Any, y: Any) -> bool:
    """Report whether ``x`` and ``y`` are deeply equal.

    Values of different types are never equal. Containers and objects are
    compared element by element, and cycles are followed only once.
    Functions compare equal only when they are the same function.
    Map keys and set members are compared with ``==``, not deeply.
    """
    return _equal(x, y, set())


def _equal(x: Any, y: Any, seen: set[tuple[int, int]]) -> bool:
    if x is None or y is None:
        return x is None and y is None
    if type(x) is not type(y):
        return False
    if isinstance(x, _ATOMIC):
        return x == y
    if isinstance(x, type):
        return x is y
    if isinstance(x, _ROUTINES):
        return x == y

    if x is y:
        return True  # identical references
    key = (id(x), id(y))
    if key in seen:
        return True  # already seen
    seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, dict):
        if len(x) != len(y):
            return False
        return all(k in y and _equal(v, y[k], seen) for k, v in x.items())
    if isinstance(x, (set, frozenset)):
        return x == y
    if dataclasses.is_dataclass(x):
        return all(
            _equal(getattr(x, f.name), getattr(y, f.name), seen)
            for f in dataclasses.fields(x)
        )
    if hasattr(x, "__dict__"):
        return _equal(vars(x), vars(y), seen)
    slots = _slot_names(type(x))
    if slots:
        return all(
            _equal(getattr(x, name, None), getattr(y, name, None), seen) for name in slots
        )
    return bool(x == y)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names