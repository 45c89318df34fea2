"""Small utilities: a pseudo-random generator, running average, hash table."""

from __future__ import annotations

import time
from typing import Callable, Generic, TypeVar

_MASK64 = (1 << 64) - 1

T = TypeVar("T")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class PRNG:
    """xorshift64* generator producing 64-bit unsigned integers."""

    _MULTIPLIER = 2685821657736338717

    def __init__(self, seed: int) -> None:
        seed &= _MASK64
        if not seed:
            raise ValueError("seed must be non-zero")
        self._state = seed

    def rand64(self) -> int:
        s = self._state
        s ^= s >> 12
        s ^= (s << 25) & _MASK64
        s ^= s >> 27
        self._state = s
        return (s * self._MULTIPLIER) & _MASK64

    def rand(self) -> int:
        return self.rand64()

    def sparse_rand(self) -> int:
        """A number with about one bit in eight set."""
        return self.rand64() & self.rand64() & self.rand64()


class RunningAverage:
    """Integer running average with a fixed decay period."""

    PERIOD = 4096
    RESOLUTION = 1024

    def __init__(self) -> None:
        self.average = 0

    def set(self, p: int, q: int) -> None:
        """Reset the average to the rational value p / q."""
        self.average = _trunc_div(p * self.PERIOD * self.RESOLUTION, q)

    def update(self, v: int) -> None:
        self.average = self.RESOLUTION * v + _trunc_div(
            (self.PERIOD - 1) * self.average, self.PERIOD
        )

    def is_greater(self, a: int, b: int) -> bool:
        """Whether the average is strictly greater than a / b."""
        return b * self.average > a * self.PERIOD * self.RESOLUTION


class HashTable(Generic[T]):
    """Fixed-size table indexed by the low bits of a key."""

    def __init__(self, factory: Callable[[], T], size: int) -> None:
        if size <= 0 or size & (size - 1):
            raise ValueError("size must be a positive power of two")
        self._table = [factory() for _ in range(size)]
        self._mask = size - 1

    def __len__(self) -> int:
        return len(self._table)

    def __getitem__(self, key: int) -> T:
        return self._table[(key & 0xFFFFFFFF) & self._mask]


def sigmoid(t: int, x0: int, y0: int, c: int, p: int, q: int) -> int:
    """Integer sigmoid centred on (x0, y0) with amplitude p / q and slope set by c."""
    if c <= 0:
        raise ValueError("c must be positive")
    return y0 + _trunc_div(p * (t - x0), q * (abs(t - x0) + c))


def mul_hi64(a: int, b: int) -> int:
    """High 64 bits of the 128-bit product of two 64-bit values."""
    return ((a & _MASK64) * (b & _MASK64)) >> 64


def now() -> int:
    """Monotonic time in milliseconds."""
    return time.monotonic_ns() // 1_000_000