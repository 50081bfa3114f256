"""The interactive fractal window."""

from __future__ import annotations

import os
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .fractal import FractalSet, render  # noqa: E402
from .view import View  # noqa: E402

TITLE = "fract-ol"
DEFAULT_MAX_ITER = 50


class Viewer:
    """Holds the fractal state and reacts to input; ``run`` opens the window."""

    def __init__(
        self,
        fractal_set: FractalSet,
        julia_c: Optional[complex] = None,
        view: Optional[View] = None,
        max_iter: int = DEFAULT_MAX_ITER,
    ) -> None:
        self.fractal_set = FractalSet(fractal_set)
        if self.fractal_set is FractalSet.JULIA and julia_c is None:
            raise ValueError("a Julia set needs a constant")
        self.julia_c = julia_c
        self.view = view if view is not None else View()
        self.max_iter = max_iter
        self.need_to_draw = True
        self.running = True
        self.pixels: list[list[int]] = []
        self.surface: Optional[pygame.Surface] = None

    def handle_scroll(self, x: float, y: float, ydelta: float) -> None:
        """Zoom around the pointer at ``(x, y)`` and ask for a redraw."""
        self.view.zoom_at(x, y, ydelta)
        self.need_to_draw = True

    def handle_key(self, key: int) -> None:
        """Escape closes the viewer."""
        if key == pygame.K_ESCAPE:
            self.running = False

    def redraw(self) -> bool:
        """Render again if needed; returns whether anything was drawn."""
        if not self.need_to_draw:
            return False
        self.pixels = render(self.fractal_set, self.view, self.max_iter, self.julia_c)
        if self.surface is not None:
            data = b"".join(
                color.to_bytes(4, "big") for row in self.pixels for color in row
            )
            image = pygame.image.frombuffer(
                data, (self.view.width, self.view.height), "RGBA"
            )
            self.surface.blit(image, (0, 0))
        self.need_to_draw = False
        return True

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((self.view.width, self.view.height))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(event.key)
                    elif event.type == pygame.MOUSEWHEEL:
                        mouse_x, mouse_y = pygame.mouse.get_pos()
                        self.handle_scroll(mouse_x, mouse_y, event.y)
                if not self.running:
                    break
                if self.redraw():
                    pygame.display.flip()
                clock.tick(60)
        finally:
            self.surface = None
            pygame.quit()