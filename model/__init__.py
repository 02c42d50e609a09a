# model/__init__.py

"""
Domain objects for correlation vectors: the vector itself, its mutability
state, spin parameters and the randomness it draws on. Parsing lives in the
`parser` package so these types stay free of wire-format error handling.
"""

from .constants import MAX_VECTOR_LENGTH, MAX_WIRE_LENGTH, SEPARATOR, TERMINATOR
from .vector_state import VectorState
from .spin_params import (
    SpinParams,
    SpinEntropy,
    SpinCounterInterval,
    SpinCounterPeriodicity,
)
from .random_source import RandomSource, SystemRandomSource, FixedRandomSource
from .correlation_vector import CorrelationVector, encode_base

__all__ = [
    "CorrelationVector",
    "VectorState",
    "SpinParams",
    "SpinEntropy",
    "SpinCounterInterval",
    "SpinCounterPeriodicity",
    "RandomSource",
    "SystemRandomSource",
    "FixedRandomSource",
    "encode_base",
    "MAX_VECTOR_LENGTH",
    "MAX_WIRE_LENGTH",
    "SEPARATOR",
    "TERMINATOR",
]
