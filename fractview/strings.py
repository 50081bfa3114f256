"""String helpers with C-string semantics.

Every input string ends at its first NUL character, as a C string would;
whatever follows it is ignored. Sizes and positions are counts, so negative
values raise ``ValueError``. Searches return an index, or ``None`` when
nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional, Union

CharLike = Union[str, int]


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


def _count(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``; a result length
    smaller than that total means the copy was truncated.
    """
    _count(size, "size")
    src = _visible(src)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would need.
    When ``size`` is zero or no larger than ``dst``, ``dst`` is returned as
    is, together with ``size`` plus the length of ``src``.
    """
    _count(size, "size")
    dst = _visible(dst)
    src = _visible(src)
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def find_char(text: str, ch: CharLike) -> Optional[int]:
    """Index of the first ``ch`` in ``text``; the end index for NUL."""
    text = _visible(text)
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def find_last_char(text: str, ch: CharLike) -> Optional[int]:
    """Index of the last ``ch`` in ``text``; the end index for NUL."""
    text = _visible(text)
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def find_substring(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _count(length, "length")
    haystack = _visible(haystack)
    needle = _visible(needle)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns zero when equal, otherwise the code point difference of the
    first differing pair; the end of a string counts as code point 0.
    """
    _count(n, "n")
    first = _visible(first)[:n]
    second = _visible(second)[:n]
    for index in range(max(len(first), len(second))):
        a = first[index] if index < len(first) else "\0"
        b = second[index] if index < len(second) else "\0"
        if a != b:
            return ord(a) - ord(b)
    return 0


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _visible(first) + _visible(second)


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return _visible(text).strip(_visible(charset))


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _count(start, "start")
    _count(length, "length")
    text = _visible(text)
    if start >= len(text):
        return ""
    return text[start : start + length]


def split(text: str, separator: CharLike) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    text = _visible(text)
    sep = _char(separator)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_visible(text)))


def _is_terminator(value: Any) -> bool:
    return value == "\0" or (isinstance(value, int) and not isinstance(value, bool) and value == 0)


def apply_indexed(
    buffer: MutableSequence[Any], func: Callable[[int, Any], Any]
) -> None:
    """Call ``func(index, element)`` for each element, in place.

    Processing stops at a NUL terminator. A result other than ``None``
    replaces the element.
    """
    for index in range(len(buffer)):
        element = buffer[index]
        if _is_terminator(element):
            break
        replacement = func(index, element)
        if replacement is not None:
            buffer[index] = replacement