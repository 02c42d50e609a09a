# model/vector_state.py
# This file is part of Corvec - Correlation Vector tracing
#
# Mutability state of a correlation vector

from enum import Enum, auto


class VectorState(Enum):
    """Two-state lifecycle of a correlation vector.

    A vector starts MUTABLE and moves to IMMUTABLE exactly once, either
    when a mutation would overflow the length budget or when it is parsed
    from a terminated string. There is no transition back.

    Values:
        MUTABLE: extend, increment and spin are applied
        IMMUTABLE: every mutation is a no-op; the wire form ends with "!"
    """

    MUTABLE = auto()
    IMMUTABLE = auto()

    def __str__(self) -> str:
        return self.name

    def is_terminal(self) -> bool:
        """Return True if no further mutation can take effect."""
        return self is VectorState.IMMUTABLE
