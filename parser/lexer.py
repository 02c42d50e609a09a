# parser/lexer.py
# This file is part of Corvec - Correlation Vector tracing
#
# Lexical analyzer for correlation vector strings using SLY

"""Lexical analyzer for correlation vector wire strings.

Breaks the body of a correlation vector (the string with any trailing
terminator already removed) into segment and separator tokens. The base is
opaque, so a segment is any run of characters other than the separator;
counter validation happens in the parser, not here.

Supported Tokens:
- DOT: the "." separator
- SEGMENT: a maximal run of non-separator characters
"""

from typing import List

from sly import Lexer


class CVLexer(Lexer):
    """SLY-based lexer for correlation vector bodies.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip (none; every byte is significant)
    """

    tokens = {"SEGMENT", "DOT"}

    ignore = ""

    DOT = r"\."
    SEGMENT = r"[^.]+"


def split_segments(body: str) -> List[str]:
    """Split a body into its dot-separated segments.

    Empty segments are kept, so ``"a..1"`` yields ``["a", "", "1"]`` and
    ``"a."`` yields ``["a", ""]``. An empty body yields ``[]``.

    Args:
        body: Correlation vector text without its terminator

    Returns:
        Segments in order; the first one is the base
    """
    if not body:
        return []

    segments = [""]
    for tok in CVLexer().tokenize(body):
        if tok.type == "DOT":
            segments.append("")
        else:
            segments[-1] = tok.value
    return segments
