"""Command line: choose a fractal and open the viewer."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from .app import Viewer
from .chars import to_lower
from .fractal import FractalSet
from .numparse import is_float, parse_float
from .output import terminate

DEFAULT_JULIA = complex(-0.2842, -0.70176)

ERROR_MSG = "".join(
    [
        "\033[1;35m============================================\033[0m \n ",
        "\033[1;36m      ✦･ﾟ: *✧･ﾟ:* *:･ﾟ✧*:･ﾟ✦\033[0m \n ",
        "\033[1;37m   fract-ol: Choose your fractal!\033[0m \n ",
        "\033[1;36m      ✦･ﾟ: *✧･ﾟ:* *:･ﾟ✧*:･ﾟ✦\033[0m \n ",
        "\033[1;33m ✿ Usage ✿\033[0m  ./fractol mandelbrot \n ",
        "    \t     ./fractol julia <real> <imaginary> \n ",
        "\033[1;33m ✿ Examples ✿\033[0m \n ",
        "\t    ./fractol mandelbrot \n ",
        "\t    ./fractol julia -0.8 0.156 \n ",
        "\t    ./fractol julia\t(uses default values) \n\n ",
        "\033[1;35m ♡ Available fractals ♡\033[0m \n ",
        "\t    - mandelbrot \n ",
        "\t    - julia \033[1;91m \n ",
        "   Please try again with a valid input!\033[0m \n ",
        "\033[1;35m============================================\033[0m",
    ]
)

_HELP_LINES = (
    "============================================",
    "    \t ✦･ﾟ: *✧･ﾟ:**:･ﾟ✧*:･ﾟ✦",
    "    \t  fract-ol: Controls!",
    "   \t ✦･ﾟ: *✧･ﾟ:**:･ﾟ✧*:･ﾟ✦",
    " ✿ Controls ✿",
    "   Zoom In/Out:    Scroll Mouse Wheel Up/Down",
    "   Quit:           Press ESC, X",
    "",
    " ♡ Have Fun Exploring Fractals! ♡",
    "=============================================",
)


class UsageError(Exception):
    """The command line does not describe a fractal that can be drawn."""


@dataclass(frozen=True)
class Config:
    """What to draw: the fractal and, for a Julia set, its constant."""

    fractal_set: FractalSet
    julia_c: Optional[complex] = None


def parse_set(name: str) -> FractalSet:
    """The fractal named by ``name``, ignoring ASCII case."""
    lowered = "".join(to_lower(ch) for ch in name)
    if lowered == "mandelbrot":
        return FractalSet.MANDELBROT
    if lowered == "julia":
        return FractalSet.JULIA
    raise UsageError(f"unknown fractal {name!r}")


def _julia_constant(real: str, imag: str) -> complex:
    if not is_float(real) or not is_float(imag):
        raise UsageError("the Julia constant must be two decimal numbers")
    c = complex(parse_float(real), parse_float(imag))
    if not (-2 < c.real < 2) or not (-2 < c.imag < 2):
        raise UsageError("the Julia constant must lie strictly between -2 and 2")
    return c


def parse_arguments(args: Sequence[str]) -> Config:
    """Build a ``Config`` from the arguments after the program name."""
    if not args:
        raise UsageError("no fractal given")
    fractal_set = parse_set(args[0])
    if fractal_set is FractalSet.MANDELBROT:
        if len(args) != 1:
            raise UsageError("mandelbrot takes no further arguments")
        return Config(fractal_set)
    if len(args) == 1:
        return Config(fractal_set, DEFAULT_JULIA)
    if len(args) == 3:
        return Config(fractal_set, _julia_constant(args[1], args[2]))
    raise UsageError("julia takes either no arguments or a real and an imaginary part")


def help_text() -> str:
    """The controls summary shown when the viewer starts."""
    return "\n".join(_HELP_LINES) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line, print the controls and run the viewer."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_arguments(args)
    except UsageError:
        terminate(ERROR_MSG, success=False)
    sys.stdout.write(help_text())
    sys.stdout.flush()
    Viewer(config.fractal_set, config.julia_c).run()
    return 0