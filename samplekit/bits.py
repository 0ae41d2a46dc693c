"""Bit manipulation: population count and interface flag bit fields."""

from __future__ import annotations

import enum

_UINT64_LIMIT = 1 << 64


def _build_table() -> tuple[int, ...]:
    table = [0] * 256
    for i in range(256):
        table[i] = table[i // 2] + (i & 1)
    return tuple(table)


_PC = _build_table()


def pop_count(x: int) -> int:
    """Return the number of set bits in the unsigned 64-bit integer ``x``."""
    if not 0 <= x < _UINT64_LIMIT:
        raise ValueError(f"{x} is not an unsigned 64-bit integer")
    return sum(_PC[(x >> shift) & 0xFF] for shift in range(0, 64, 8))


class Flags(enum.IntFlag):
    """Network interface flags."""

    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16


def is_up(v: Flags) -> bool:
    """Report whether the interface is up."""
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return ``v`` with the up flag cleared."""
    return Flags(v & ~Flags.UP)


def set_broadcast(v: Flags) -> Flags:
    """Return ``v`` with the broadcast flag set."""
    return v | Flags.BROADCAST


def is_cast(v: Flags) -> bool:
    """Report whether the interface supports broadcast or multicast."""
    return v & (Flags.BROADCAST | Flags.MULTICAST) != 0