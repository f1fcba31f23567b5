# scatter_engine/core/utils/rng.py
from __future__ import annotations
import random
import secrets
from typing import Protocol, Union

# golden ratio for 64-bit
_DEF_CONST = 0x9E3779B97F4A7C15
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _splitmix64(x: int) -> int:
    x = (x + _DEF_CONST) & _MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & _MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & _MASK64
    return z ^ (z >> 31)


def seed_from_any(x: Union[int, str, bytes]) -> int:
    if isinstance(x, int):
        return x & _MASK64
    if isinstance(x, bytes):
        acc = 0xcbf29ce484222325
        for b in x:
            acc ^= b
            acc = (acc * 0x100000001B3) & _MASK64
        return acc
    if isinstance(x, str):
        return seed_from_any(x.encode('utf-8'))
    raise TypeError("Unsupported seed type")


def entropy_seed() -> int:
    """Сид из системного источника энтропии (когда RNG не передан явно)."""
    return secrets.randbits(64)


def hash64(*vals: int) -> int:
    h = 0x84222325CBF29CE4
    for v in vals:
        h ^= v & _MASK64
        h = _splitmix64(h)
    return h


def split_chunk_seed(seed: int, rx: int, rz: int) -> int:
    """Детерминированный сид региона (rx, rz) из глобального сида."""
    return hash64(seed, rx & _MASK64, rz & _MASK64)


class RandomSource(Protocol):
    """Всё, что нужно сэмплеру от источника случайности."""

    def uniform(self) -> float: ...
    def randint(self, a: int, b: int) -> int: ...


class RNG:
    __slots__ = ("state",)

    def __init__(self, seed: int):
        self.state = seed & _MASK64

    def u64(self) -> int:
        self.state = _splitmix64(self.state)
        return self.state

    def uniform(self) -> float:
        return (self.u64() >> 11) * (1.0 / (1 << 53))

    def randint(self, a: int, b: int) -> int:
        if a > b: a, b = b, a
        span = b - a + 1
        return a + (self.u64() % span)


class PyRandomSource:
    """Адаптер random.Random -> RandomSource."""

    __slots__ = ("_rnd",)

    def __init__(self, rnd: random.Random | None = None):
        self._rnd = rnd if rnd is not None else random.Random()

    def uniform(self) -> float:
        return self._rnd.random()

    def randint(self, a: int, b: int) -> int:
        if a > b: a, b = b, a
        return self._rnd.randint(a, b)
