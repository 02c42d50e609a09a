# parser/__init__.py
# This file is part of Corvec - Correlation Vector tracing
#
# Wire-string parsing for correlation vectors

"""Correlation vector parsing.

Turns a received wire string such as ``"wC71fJEqSPuHrPQ9ZoXrKg.0.3!"`` into a
:class:`model.CorrelationVector`. The input is checked against the 128-byte
ceiling, a trailing ``!`` marks the vector immutable, the base is copied
verbatim and every counter must be an unsigned 32-bit decimal integer.

Core Functions:
    parse: Wire string to CorrelationVector
    parse_counter: Strict unsigned 32-bit decimal conversion

Example:
    >>> from parser import parse
    >>> cv = parse("base.0!")
    >>> cv.vector, cv.immutable
    ([0], True)
"""

from model.constants import MAX_COUNTER, MAX_WIRE_LENGTH, TERMINATOR
from model.correlation_vector import CorrelationVector, byte_length
from model.vector_state import VectorState
from utils.logger import get_logger

from .exceptions import (
    ParseError,
    EmptyInputError,
    MissingVectorError,
    InvalidCounterError,
    StringTooLongError,
)
from .lexer import CVLexer, split_segments


def parse_counter(segment: str) -> int:
    """Convert a counter segment to an int without wrapping or leniency.

    Only ASCII digits are accepted; signs, whitespace, underscores and
    non-ASCII digits are rejected even though ``int()`` would take them.

    Raises:
        ValueError: Segment is empty, not all digits, or above 2**32 - 1
    """
    if not (segment.isascii() and segment.isdigit()):
        raise ValueError(f"invalid literal for unsigned counter: {segment!r}")
    value = int(segment)
    if value > MAX_COUNTER:
        raise ValueError(f"counter {value} does not fit in 32 bits")
    return value


def parse(text: str) -> CorrelationVector:
    """Parse a correlation vector wire string.

    Args:
        text: Received correlation vector, at most 128 UTF-8 bytes

    Returns:
        The parsed vector; immutable if the input ended with the terminator

    Raises:
        StringTooLongError: Over 128 bytes, or exactly 128 without a terminator
        EmptyInputError: Nothing to parse
        MissingVectorError: A base with no counters
        InvalidCounterError: A counter is not an unsigned 32-bit integer
    """
    logger = get_logger()
    logger.debug(f"Parsing correlation vector: {text!r}")

    length = byte_length(text)
    terminated = text.endswith(TERMINATOR)

    if length > MAX_WIRE_LENGTH or (length == MAX_WIRE_LENGTH and not terminated):
        logger.debug(f"Rejected input of {length} bytes")
        raise StringTooLongError(text)

    body = text[: -len(TERMINATOR)] if terminated else text
    segments = split_segments(body)

    if not segments:
        raise EmptyInputError(text)
    if len(segments) == 1:
        raise MissingVectorError(text)

    base, counters = segments[0], segments[1:]
    vector = []
    for position, segment in enumerate(counters):
        try:
            vector.append(parse_counter(segment))
        except ValueError as exc:
            logger.debug(f"Counter {position} rejected: {exc}")
            raise InvalidCounterError(text, segment, position) from exc

    cv = CorrelationVector(
        base=base,
        vector=vector,
        state=VectorState.IMMUTABLE if terminated else VectorState.MUTABLE,
        serialized_length=length,
    )
    logger.vector_created(str(cv), "wire string")
    return cv


__all__ = [
    "parse",
    "parse_counter",
    "split_segments",
    "CVLexer",
    "ParseError",
    "EmptyInputError",
    "MissingVectorError",
    "InvalidCounterError",
    "StringTooLongError",
]
