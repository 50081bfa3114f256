"""Lenient number parsing and formatting.

The parsers skip leading whitespace, accept one optional sign and read
digits until the first character that does not belong, never failing.
Text after an embedded NUL character is ignored.
"""

from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_WHITESPACE = " \t\n\v\f\r"
_LEADING = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_FLOAT = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)(?:\.([0-9]*))?")
_FLOAT_SHAPE = re.compile(r"[ \t\n\v\f\r]*[+-]?([0-9.]*)[ \t\n\v\f\r]*")


def _visible(text: str) -> str:
    return text.split("\0", 1)[0]


def _wrap(value: int, bits: int) -> int:
    span = 1 << bits
    value %= span
    return value - span if value >= span >> 1 else value


def _leading_integer(text: str) -> int:
    match = _LEADING.match(_visible(text))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def parse_int(text: str) -> int:
    """Read a leading integer, wrapping around like a 32-bit int."""
    return _wrap(_leading_integer(text), 32)


def parse_long(text: str) -> int:
    """Read a leading integer, wrapping around like a 64-bit long."""
    return _wrap(_leading_integer(text), 64)


def parse_float(text: str) -> float:
    """Read a leading decimal number such as ``-0.75``; no exponents."""
    match = _FLOAT.match(_visible(text))
    sign, whole_digits, fraction_digits = match.groups()
    whole = 0.0
    for digit in whole_digits:
        whole = whole * 10.0 + int(digit)
    fraction = 0.0
    divisor = 1.0
    for digit in fraction_digits or "":
        fraction = fraction * 10.0 + int(digit)
        divisor *= 10.0
    value = whole + fraction / divisor
    return -value if sign == "-" else value


def is_float(text: str) -> bool:
    """True if the text is one decimal number, optionally padded and signed."""
    match = _FLOAT_SHAPE.fullmatch(_visible(text))
    if match is None:
        return False
    body = match.group(1)
    return body.count(".") <= 1 and any(ch.isdigit() for ch in body)


def is_invalid_int(number: int) -> bool:
    """True if the number does not fit in a 32-bit signed int."""
    return number < INT_MIN or number > INT_MAX


def int_to_str(number: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if is_invalid_int(number):
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)