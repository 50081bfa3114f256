"""A small printf-style formatter.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``; there are no flags, widths or precisions. An
unknown conversion character is dropped and consumes no argument. Integer
arguments are reduced to the width of the C type they stand for.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable
from typing import Any, Optional

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _visible(text: str) -> str:
    return text.split("\0", 1)[0]


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``number`` taken as a 32-bit unsigned int."""
    digits = f"{operator.index(number) & _UINT_MASK:x}"
    return digits.upper() if upper else digits


def format_pointer(address: Optional[int]) -> str:
    """``0x`` followed by lower-case hex digits, or ``(nil)`` for zero."""
    if address is None:
        return "(nil)"
    value = operator.index(address) & _ULONG_MASK
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c needs a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _format_str(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s needs a string, got {type(arg).__name__}")
    return _visible(arg)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": format_pointer,
    "d": lambda arg: str(_signed32(operator.index(arg))),
    "i": lambda arg: str(_signed32(operator.index(arg))),
    "u": lambda arg: str(operator.index(arg) & _UINT_MASK),
    "x": lambda arg: format_hex(arg),
    "X": lambda arg: format_hex(arg, upper=True),
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args``.

    Raises ``ValueError`` when the format ends in a lone ``%`` and
    ``TypeError`` when there are fewer arguments than conversions.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(_visible(fmt))
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(convert(arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output.

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)