"""Interactive Mandelbrot and Julia set viewer, with the helpers it is built on."""

__version__ = "0.1.0"