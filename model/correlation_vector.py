# model/correlation_vector.py

"""
Correlation vector
==================

A base identity followed by a dot-separated vector of unsigned 32-bit
counters, e.g. ``wC71fJEqSPuHrPQ9ZoXrKg.0.3.1``. Services extend the vector
when they hand work to a callee and increment it for each outgoing call,
so the string records causal order without a coordinator.

The wire form is capped at 128 bytes. Instead of failing, a mutation that
would break the cap turns the vector immutable; it is then written with a
trailing ``!`` and never changes again.

Not thread-safe: one owner at a time, ``copy()`` when forking work.
"""

from __future__ import annotations
import base64
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from utils.logger import get_logger

from .constants import MAX_COUNTER, MAX_VECTOR_LENGTH, SEPARATOR, TERMINATOR
from .random_source import RandomSource, default_random_source
from .spin_params import SpinParams
from .vector_state import VectorState

Seed = Union[uuid.UUID, bytes, int]
Clock = Callable[[], int]


def encode_base(seed: Seed) -> str:
    """
    Encode a 128-bit value as a base identity: standard base64 of the 16 raw
    bytes with the trailing ``=`` padding removed (22 characters).
    """
    if isinstance(seed, uuid.UUID):
        raw = seed.bytes
    elif isinstance(seed, int):
        if not 0 <= seed < 2**128:
            raise ValueError(f"seed must fit in 128 bits, got {seed}")
        raw = seed.to_bytes(16, "big")
    else:
        raw = bytes(seed)
        if len(raw) != 16:
            raise ValueError(f"seed must be 16 bytes, got {len(raw)}")
    return base64.b64encode(raw).decode("ascii").rstrip("=")


def byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def counter_length(counter: int) -> int:
    """Number of decimal digits in `counter`."""
    return len(str(counter))


@dataclass(slots=True)
class CorrelationVector:
    base: str
    vector: List[int]
    state: VectorState = VectorState.MUTABLE
    serialized_length: int = 0
    random_source: Optional[RandomSource] = field(default=None, compare=False, repr=False)
    clock: Optional[Clock] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.vector:
            raise ValueError("a correlation vector needs at least one counter")
        if not self.serialized_length:
            self.serialized_length = byte_length(self.format())

    # ------------------------------------------------------------------ #
    # construction
    # ------------------------------------------------------------------ #
    @classmethod
    def create(
        cls,
        random_source: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
    ) -> CorrelationVector:
        """Create a vector with a fresh random base and a single ``0`` counter."""
        source = random_source or default_random_source()
        cv = cls._from_base(encode_base(source.next_128_bits()), random_source, clock)
        get_logger().vector_created(str(cv), "random base")
        return cv

    @classmethod
    def create_from_seed(
        cls,
        seed: Seed,
        random_source: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
    ) -> CorrelationVector:
        """Create a vector whose base is derived from an explicit 128-bit value."""
        cv = cls._from_base(encode_base(seed), random_source, clock)
        get_logger().vector_created(str(cv), "seed")
        return cv

    @classmethod
    def _from_base(
        cls,
        base: str,
        random_source: Optional[RandomSource],
        clock: Optional[Clock],
    ) -> CorrelationVector:
        return cls(
            base=base,
            vector=[0],
            serialized_length=byte_length(base) + 2,
            random_source=random_source,
            clock=clock,
        )

    @classmethod
    def parse(cls, text: str) -> CorrelationVector:
        """Parse a wire string. See :func:`parser.parse`."""
        from parser import parse

        return parse(text)

    def copy(self) -> CorrelationVector:
        """Return an independent vector with the same state."""
        return CorrelationVector(
            base=self.base,
            vector=list(self.vector),
            state=self.state,
            serialized_length=self.serialized_length,
            random_source=self.random_source,
            clock=self.clock,
        )

    __copy__ = copy

    # ------------------------------------------------------------------ #
    # state
    # ------------------------------------------------------------------ #
    @property
    def immutable(self) -> bool:
        return self.state.is_terminal()

    def _terminate(self, operation: str, proposed_length: int) -> None:
        # The terminator takes the byte the dropped mutation would have used.
        get_logger().cutover(operation, self.serialized_length, proposed_length)
        self.state = VectorState.IMMUTABLE
        self.serialized_length += len(TERMINATOR)

    def _append(self, counter: int, operation: str) -> bool:
        proposed = self.serialized_length + len(SEPARATOR) + counter_length(counter)
        if proposed > MAX_VECTOR_LENGTH:
            self._terminate(operation, proposed)
            return False
        self.vector.append(counter)
        self.serialized_length = proposed
        return True

    # ------------------------------------------------------------------ #
    # mutation
    # ------------------------------------------------------------------ #
    def extend(self) -> None:
        """Append a new ``0`` counter."""
        if self.immutable:
            get_logger().mutation_dropped("extend")
            return
        self._append(0, "extend")

    def increment(self) -> None:
        """Increment the last counter."""
        if self.immutable:
            get_logger().mutation_dropped("increment")
            return

        last = self.vector[-1]
        if last >= MAX_COUNTER:
            self._terminate("increment", self.serialized_length)
            return

        # A single increment adds at most one digit (9 -> 10, 99 -> 100, ...).
        proposed = (
            self.serialized_length + counter_length(last + 1) - counter_length(last)
        )
        if proposed > MAX_VECTOR_LENGTH:
            self._terminate("increment", proposed)
            return

        self.serialized_length = proposed
        self.vector[-1] = last + 1

    def spin(
        self,
        params: Optional[SpinParams] = None,
        random_source: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Append a partly time-based, partly random value followed by a fresh
        ``0`` counter. Used where increment alone cannot keep vectors apart,
        e.g. across restarts.

        Each of the (up to three) appends is checked against the budget on
        its own; the first one that does not fit terminates the vector and
        the remaining appends are skipped.
        """
        if self.immutable:
            get_logger().mutation_dropped("spin")
            return

        params = params or SpinParams()
        source = random_source or self.random_source or default_random_source()
        now = clock or self.clock or time.time_ns

        entropy = source.next_bytes(params.entropy_bytes)
        ticks = now() // 100

        value = ticks >> params.ticks_to_drop
        for byte in entropy:
            value = (value << 8) | byte

        width = params.total_bits
        value &= (1 << width) - 1 if width < 64 else 0xFFFFFFFFFFFFFFFF
        get_logger().spin_value(ticks, entropy, width, value)

        if not self._append(value & 0xFFFFFFFF, "spin"):
            return
        if width > 32 and not self._append(value >> 32, "spin"):
            return
        self._append(0, "spin")

    # ------------------------------------------------------------------ #
    # formatting
    # ------------------------------------------------------------------ #
    def format(self) -> str:
        """Return the wire string."""
        counters = SEPARATOR.join(str(c) for c in self.vector)
        suffix = TERMINATOR if self.immutable else ""
        return f"{self.base}{SEPARATOR}{counters}{suffix}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"CorrelationVector({self.format()!r})"
