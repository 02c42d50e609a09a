# parser/exceptions.py
# This file is part of Corvec - Correlation Vector tracing
#
# Exceptions raised while parsing correlation vector strings

"""Error taxonomy for correlation vector parsing.

Every failure to read a wire string raises a subclass of :class:`ParseError`,
so callers can catch the whole family at once or react to a specific cause.
Mutations never raise; they degrade to an immutable vector instead.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Base class for correlation vector parse failures.

    Attributes:
        text: The input string that was rejected
    """

    default_message = "Invalid correlation vector"

    def __init__(self, text: str, message: Optional[str] = None):
        self.text = text
        super().__init__(f"{message or self.default_message}: {text!r}")


class EmptyInputError(ParseError):
    """The input contained nothing to parse."""

    default_message = "Empty input"


class MissingVectorError(ParseError):
    """A base was present but no counters followed it."""

    default_message = "Missing vector portion of correlation vector"


class InvalidCounterError(ParseError):
    """A counter segment is not an unsigned 32-bit decimal integer.

    The underlying ``ValueError`` is available as ``__cause__``.

    Attributes:
        segment: The offending counter text
        position: Index of the counter within the vector (0 = first counter)
    """

    default_message = "Invalid vector portion of correlation vector"

    def __init__(self, text: str, segment: str, position: int):
        self.segment = segment
        self.position = position
        super().__init__(
            text,
            f"{self.default_message} (counter {position} is {segment!r})",
        )


class StringTooLongError(ParseError):
    """The input exceeds the 128-byte ceiling, or fills it without a terminator."""

    default_message = "String is too long to be a valid correlation vector"
