# model/constants.py
# This file is part of Corvec - Correlation Vector tracing
#
# Wire-format constants shared by the vector engine and the parser

SEPARATOR = "."
TERMINATOR = "!"

# Data portion budget; the terminator may take the final byte.
MAX_VECTOR_LENGTH = 127
MAX_WIRE_LENGTH = 128

MAX_COUNTER = 2**32 - 1
