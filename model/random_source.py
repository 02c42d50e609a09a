# model/random_source.py

"""
Randomness used by correlation vectors.

Two draws are needed: 128 bits for a fresh base identity, and up to four
bytes of spin entropy. Neither is a security mechanism; they only make
collisions between independent actors unlikely. Both are behind the
:class:`RandomSource` protocol so tests can pin the values.
"""

from __future__ import annotations
import random
import uuid
from itertools import cycle, islice
from typing import Protocol


class RandomSource(Protocol):
    def next_128_bits(self) -> bytes:
        """Return 16 random bytes."""
        ...

    def next_bytes(self, count: int) -> bytes:
        """Return `count` random bytes."""
        ...


class SystemRandomSource:
    """Default source backed by the process-wide uuid4 and `random` generators."""

    def next_128_bits(self) -> bytes:
        return uuid.uuid4().bytes

    def next_bytes(self, count: int) -> bytes:
        if count <= 0:
            return b""
        return random.randbytes(count)


class FixedRandomSource:
    """
    Deterministic source for tests and reproducible tooling.

    `seed` is returned by every `next_128_bits` call; `entropy` is
    replayed cyclically by `next_bytes` (zeros when empty).
    """

    def __init__(self, seed: bytes = bytes(16), entropy: bytes = b"") -> None:
        if len(seed) != 16:
            raise ValueError(f"seed must be 16 bytes, got {len(seed)}")
        self._seed = bytes(seed)
        self._entropy = cycle(entropy or b"\x00")

    def next_128_bits(self) -> bytes:
        return self._seed

    def next_bytes(self, count: int) -> bytes:
        return bytes(islice(self._entropy, max(count, 0)))


_default_source: RandomSource = SystemRandomSource()


def default_random_source() -> RandomSource:
    return _default_source
