"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code
point. Only the ASCII ranges are recognised; anything else is reported as
not matching and is left unchanged by the case conversions.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(ch: CharLike) -> int:
    if isinstance(ch, bool):
        raise TypeError("expected a character or an integer code point")
    if isinstance(ch, int):
        return ch
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    raise TypeError("expected a character or an integer code point")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(ch: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(ch)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(ch: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(ch) <= ord("9")


def is_alnum(ch: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(ch) or is_digit(ch)


def is_ascii(ch: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(ch) <= 127


def is_print(ch: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(ch) <= 126


def is_sign(ch: CharLike) -> bool:
    """True for '+' and '-'."""
    return _code(ch) in (ord("+"), ord("-"))


def to_lower(ch: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(ch)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(ch, code + 32)
    return ch


def to_upper(ch: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(ch)
    if ord("a") <= code <= ord("z"):
        return _same_kind(ch, code - 32)
    return ch