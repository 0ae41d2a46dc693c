"""Sequence helpers: growable integer slices, reversal, rotation and equality."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, MutableSequence, Sequence, TypeVar, overload

from samplekit.textutil import nonempty

T = TypeVar("T")


@dataclass(frozen=True)
class IntSlice:
    """An immutable run of integers with a capacity that grows by doubling."""

    values: tuple[int, ...] = ()
    cap: int = 0

    def __post_init__(self) -> None:
        if self.cap < len(self.values):
            raise ValueError("capacity smaller than length")

    def append(self, y: int) -> IntSlice:
        """Return a slice with ``y`` appended, doubling capacity when full."""
        zlen = len(self.values) + 1
        zcap = self.cap
        if zlen > self.cap:
            zcap = max(zlen, 2 * len(self.values))
        return IntSlice(self.values + (y,), zcap)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[int, ...]: ...

    def __getitem__(self, index):
        return self.values[index]


def reverse(s: MutableSequence[T]) -> None:
    """Reverse ``s`` in place."""
    s[:] = s[::-1]


def rotate(s: Sequence[T], n: int, right: bool) -> list[T]:
    """Return ``s`` rotated by ``n`` positions to the right or to the left."""
    items = list(s)
    if not 0 <= n <= len(items):
        raise ValueError(f"rotation {n} out of range for length {len(items)}")
    if right:
        split = len(items) - n
        return items[split:] + items[:split]
    return items[n:] + items[:n]


def remove_adjacent_duplicates(items: Iterable[str]) -> list[str]:
    """Drop each string equal to its successor, then drop empty strings."""
    values = list(items)
    marked = ["" if a == b else a for a, b in zip(values, values[1:])]
    marked.extend(values[-1:])
    return nonempty(marked)


def maps_equal(x: Mapping[str, int], y: Mapping[str, int]) -> bool:
    """Report whether two maps hold the same keys with the same values."""
    if len(x) != len(y):
        return False
    return all(key in y and y[key] == value for key, value in x.items())


def slices_equal(x: Sequence[str], y: Sequence[str]) -> bool:
    """Report whether two sequences hold equal elements in the same order."""
    return len(x) == len(y) and all(a == b for a, b in zip(x, y))