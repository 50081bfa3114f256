"""Mapping between window pixels and points of the complex plane."""

from __future__ import annotations

from dataclasses import dataclass

WIDTH = 800
HEIGHT = 800
DEFAULT_SCALE = 200.0
ZOOM_MIN = 0.0001
ZOOM_MAX = 100000
ZOOM_FACTOR = 1.3


@dataclass
class View:
    """The visible region: window size, scale, zoom level and offset."""

    width: int = WIDTH
    height: int = HEIGHT
    scale: float = DEFAULT_SCALE
    zoom: float = 1.0
    xdelta: float = 0.0
    ydelta: float = 0.0

    def to_complex(self, x: float, y: float) -> complex:
        """The point of the plane shown at pixel ``(x, y)``."""
        factor = self.scale * self.zoom
        return complex(
            (x - self.width / 2.0) / factor + self.xdelta,
            (y - self.height / 2.0) / factor + self.ydelta,
        )

    def zoom_at(self, x: float, y: float, direction: float) -> None:
        """Zoom in (positive direction) or out (negative) around pixel ``(x, y)``.

        The point under the pixel stays where it is. Zooming in stops once
        the zoom reaches ``ZOOM_MAX``; zooming out stops at ``ZOOM_MIN``.
        """
        before = self.to_complex(x, y)
        if direction > 0 and self.zoom < ZOOM_MAX:
            self.zoom *= ZOOM_FACTOR
        elif direction < 0 and self.zoom > ZOOM_MIN:
            self.zoom /= ZOOM_FACTOR
        after = self.to_complex(x, y)
        self.xdelta += before.real - after.real
        self.ydelta += before.imag - after.imag