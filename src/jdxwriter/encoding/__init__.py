"""JCAMP-DX numeric vector encoding.

Implements the FIX, SQZ, DIF, DIFDUP, CSV and PAC data compression forms.
"""

from jdxwriter.encoding.pseudo_digits import (
    PSEUDO_DIGITS,
    difference_digit,
    duplicate_digit,
    squeezed_digit,
)
from jdxwriter.encoding.vector_encoder import (
    MAX_LINE_LENGTH,
    NEWLINE,
    Encoding,
    encode,
)

__all__ = [
    "PSEUDO_DIGITS",
    "difference_digit",
    "duplicate_digit",
    "squeezed_digit",
    "MAX_LINE_LENGTH",
    "NEWLINE",
    "Encoding",
    "encode",
]
