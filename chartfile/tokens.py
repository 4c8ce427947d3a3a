"""
Tokenizer helpers for section body lines.

Lines are split on the space character only, like ``str.split(" ")``:
tabs stay inside tokens and two adjacent spaces produce an empty token.
The full line is kept by the caller so event grammars can re-read it.
"""

from __future__ import annotations

import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# No leading "+", no surrounding whitespace, ASCII digits only
_INT_TOKEN = re.compile(r"-?[0-9]+")

# Significant digits in the widest int32 value
_INT32_MAX_DIGITS = len(str(INT32_MAX))


def split_tokens(line: str) -> list[str]:
    """Split *line* on single spaces, keeping empty tokens."""
    return line.split(" ")


def to_int32(digits: str) -> int | None:
    """Convert an already-matched ``[+-]?[0-9]+`` string to int32.

    Returns ``None`` when the value does not fit in 32 bits.  Over-long
    digit runs are rejected before ``int()`` sees them.
    """
    if len(digits.lstrip("+-").lstrip("0")) > _INT32_MAX_DIGITS:
        return None
    value = int(digits)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def parse_int_token(token: str) -> int | None:
    """Parse a whole token as a signed 32-bit integer.

    Returns ``None`` when the token is not entirely an integer or does
    not fit in 32 bits.
    """
    if not _INT_TOKEN.fullmatch(token):
        return None
    return to_int32(token)
