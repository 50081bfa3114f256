"""Escape-time iteration for the Mandelbrot and Julia sets."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .color import pixel_color
from .view import View


class FractalSet(Enum):
    """The fractals that can be drawn."""

    MANDELBROT = 1
    JULIA = 2


def _iterate(z: complex, c: complex, max_iter: int) -> int:
    for iteration in range(max_iter):
        if z.real * z.real + z.imag * z.imag > 4:
            return iteration
        z = z * z + c
    return max(max_iter, 0)


def mandelbrot(c: complex, max_iter: int) -> int:
    """Steps before z -> z*z + c, started at zero, leaves radius 2."""
    return _iterate(0j, c, max_iter)


def julia(z: complex, c: complex, max_iter: int) -> int:
    """Steps before z -> z*z + c, started at ``z``, leaves radius 2."""
    return _iterate(z, c, max_iter)


def escape_time(
    fractal_set: FractalSet,
    view: View,
    x: int,
    y: int,
    max_iter: int,
    julia_c: Optional[complex] = None,
) -> int:
    """Iteration count for pixel ``(x, y)`` of ``view``.

    A Julia set needs its constant ``julia_c``; ``ValueError`` otherwise.
    """
    fractal_set = FractalSet(fractal_set)
    point = view.to_complex(x, y)
    if fractal_set is FractalSet.MANDELBROT:
        return mandelbrot(point, max_iter)
    if julia_c is None:
        raise ValueError("a Julia set needs a constant")
    return julia(point, julia_c, max_iter)


def render(
    fractal_set: FractalSet,
    view: View,
    max_iter: int,
    julia_c: Optional[complex] = None,
) -> list[list[int]]:
    """Colours of every pixel, as rows from top to bottom."""
    fractal_set = FractalSet(fractal_set)
    if fractal_set is FractalSet.JULIA and julia_c is None:
        raise ValueError("a Julia set needs a constant")
    return [
        [
            pixel_color(escape_time(fractal_set, view, x, y, max_iter, julia_c), max_iter)
            for x in range(view.width)
        ]
        for y in range(view.height)
    ]