# model/spin_params.py

"""
Spin parameters
===============

Configuration for :meth:`CorrelationVector.spin`. Three independent knobs
select how much randomness is mixed in, how coarse the timestamp is, and
how many timestamp bits survive before the value wraps around.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type, TypeVar

_E = TypeVar("_E", bound=Enum)


class SpinEntropy(Enum):
    """Number of random bytes appended below the timestamp."""

    NONE = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4

    @property
    def byte_count(self) -> int:
        return self.value


class SpinCounterInterval(Enum):
    """Resolution of the timestamp, as low tick bits to discard.

    One tick is 100ns, so COARSE (24 bits) advances roughly every 1.67s and
    FINE (16 bits) roughly every 6.5ms.
    """

    COARSE = 24
    FINE = 16

    @property
    def ticks_to_drop(self) -> int:
        return self.value


class SpinCounterPeriodicity(Enum):
    """Number of timestamp bits kept in the spun value."""

    NONE = 0
    SHORT = 16
    MEDIUM = 24
    LONG = 32

    @property
    def bits(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class SpinParams:
    spin_entropy: SpinEntropy = SpinEntropy.TWO
    spin_counter_interval: SpinCounterInterval = SpinCounterInterval.FINE
    spin_counter_periodicity: SpinCounterPeriodicity = SpinCounterPeriodicity.SHORT

    @property
    def entropy_bytes(self) -> int:
        return self.spin_entropy.byte_count

    @property
    def ticks_to_drop(self) -> int:
        return self.spin_counter_interval.ticks_to_drop

    @property
    def total_bits(self) -> int:
        """
        Width of the spun value: periodicity bits plus eight bits per
        entropy byte. Ranges from 0 to 64.
        """
        return self.spin_counter_periodicity.bits + self.entropy_bytes * 8

    @classmethod
    def from_names(
        cls,
        entropy: Optional[str] = None,
        interval: Optional[str] = None,
        periodicity: Optional[str] = None,
    ) -> SpinParams:
        """
        Build parameters from case-insensitive enum member names, e.g.
        ``SpinParams.from_names(entropy="four", periodicity="long")``.
        Omitted names keep the defaults. Unknown names raise ValueError.
        """
        defaults = cls()
        return cls(
            spin_entropy=_lookup(SpinEntropy, entropy, defaults.spin_entropy),
            spin_counter_interval=_lookup(
                SpinCounterInterval, interval, defaults.spin_counter_interval
            ),
            spin_counter_periodicity=_lookup(
                SpinCounterPeriodicity, periodicity, defaults.spin_counter_periodicity
            ),
        )

    def __str__(self) -> str:
        return (
            f"entropy={self.spin_entropy.name} "
            f"interval={self.spin_counter_interval.name} "
            f"periodicity={self.spin_counter_periodicity.name}"
        )


def _lookup(enum_cls: Type[_E], name: Optional[str], default: _E) -> _E:
    if name is None:
        return default
    try:
        return enum_cls[name.strip().upper()]
    except KeyError:
        choices = ", ".join(m.name.lower() for m in enum_cls)
        raise ValueError(
            f"Unknown {enum_cls.__name__} '{name}' (expected one of: {choices})"
        ) from None
