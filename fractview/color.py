"""Packed RGBA colours for escape-time counts."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_ALPHA = 255


def create_color(r: int, g: int, b: int) -> int:
    """Pack red, green and blue into a 32-bit RGBA value, fully opaque."""
    return ((r << 24) | (g << 16) | (b << 8) | _ALPHA) & _MASK


def pixel_color(iterations: int, max_iter: int) -> int:
    """Black for points that never escaped, shades of green otherwise."""
    if iterations == max_iter:
        return create_color(0, 0, 0)
    return create_color(0, (iterations * 30) % 256, 0)