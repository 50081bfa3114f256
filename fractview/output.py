"""Writing characters, strings and numbers to text streams.

Every writer takes an optional ``stream``; when it is left out the current
``sys.stdout`` is used. Strings end at their first NUL character, as a C
string would.
"""

from __future__ import annotations

import sys
from typing import NoReturn, Optional, TextIO, Union

from .numparse import int_to_str

CharLike = Union[str, int]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _visible(text: str) -> str:
    return text.split("\0", 1)[0]


def _char(ch: CharLike) -> str:
    if isinstance(ch, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(ch, int):
        return chr(ch % 256)
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    raise TypeError("expected a character or an integer code")


def put_char(ch: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer is taken as a byte value."""
    _target(stream).write(_char(ch))


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(_visible(text))


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(_visible(text) + "\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal.

    Raises ``OverflowError`` for numbers outside the 32-bit range.
    """
    _target(stream).write(int_to_str(number))


def terminate(message: Optional[str] = None, success: bool = True) -> NoReturn:
    """Print ``message`` and leave the program.

    With no message the program simply exits with status 0. On success the
    message and a newline go to standard output and the status is 0. On
    failure the message goes to standard error, the newline to standard
    output, and the status is 1.
    """
    if message is None:
        raise SystemExit(0)
    text = _visible(message)
    if success:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
        raise SystemExit(0)
    sys.stderr.write(text)
    sys.stderr.flush()
    sys.stdout.write("\n")
    sys.stdout.flush()
    raise SystemExit(1)