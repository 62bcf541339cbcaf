# render.py
from __future__ import annotations
from typing import Protocol, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import BG, Config, InitializationError

Color = Tuple[int, int, int]


class Surface(Protocol):
    """Drawing primitives the game loop needs from a host."""

    def clear(self) -> None: ...
    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None: ...
    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color, width: int = 1) -> None: ...
    def circle(self, x: int, y: int, radius: int, color: Color) -> None: ...


def draw_grid(surface: Surface, width: int, height: int, columns: int, rows: int,
              color: Color, line_width: int = 1) -> None:
    """Inner grid lines only; the canvas border is left alone."""
    for x in range(1, columns):
        px = width * x // columns
        surface.line(px, 0, px, height, color, line_width)
    for y in range(1, rows):
        py = height * y // rows
        surface.line(0, py, width, py, color, line_width)


# ---------- pygame ----------
class PygameSurface:
    def __init__(self, screen: pygame.Surface):
        self.screen = screen

    @property
    def size(self) -> Tuple[int, int]:
        return self.screen.get_size()

    def clear(self) -> None:
        self.screen.fill(BG)

    def fill_rect(self, x, y, width, height, color) -> None:
        pygame.draw.rect(self.screen, color, pygame.Rect(x, y, width, height))

    def line(self, x1, y1, x2, y2, color, width=1) -> None:
        pygame.draw.line(self.screen, color, (x1, y1), (x2, y2), width)

    def circle(self, x, y, radius, color) -> None:
        pygame.draw.circle(self.screen, color, (x, y), radius)


def open_display(cfg: Config, caption: str = "Snake") -> PygameSurface:
    """
    Bring up the pygame window for cfg's canvas.
    Raises InitializationError if there is no display to draw on, or the
    display refuses to hand out a 2D surface.
    """
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise InitializationError(f"Display was not found: {exc}") from exc
    if not pygame.display.get_init():
        raise InitializationError("Display was not found.")

    try:
        screen = pygame.display.set_mode((cfg.width, cfg.height))
    except pygame.error as exc:
        raise InitializationError(f"2D rendering surface is not supported: {exc}") from exc

    pygame.display.set_caption(caption)
    return PygameSurface(screen)


# ---------- numpy frame buffer ----------
class ArraySurface:
    """
    Off-screen surface backed by a (height, width, 3) uint8 array.
    Everything is clipped to the canvas, so a snake that has wandered off
    the grid simply isn't drawn.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def clear(self) -> None:
        self.pixels[:] = BG

    def fill_rect(self, x, y, width, height, color) -> None:
        x0, x1 = max(x, 0), min(x + width, self.width)
        y0, y1 = max(y, 0), min(y + height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self.pixels[y0:y1, x0:x1] = color

    def line(self, x1, y1, x2, y2, color, width=1) -> None:
        steps = max(abs(x2 - x1), abs(y2 - y1)) + 1
        xs = np.rint(np.linspace(x1, x2, steps)).astype(int)
        ys = np.rint(np.linspace(y1, y2, steps)).astype(int)
        half = (width - 1) // 2
        for px, py in zip(xs, ys):
            self.fill_rect(px - half, py - half, width, width, color)

    def circle(self, x, y, radius, color) -> None:
        yy, xx = np.ogrid[: self.height, : self.width]
        mask = (xx - x) ** 2 + (yy - y) ** 2 <= radius ** 2
        self.pixels[mask] = color

    def pixel(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[y, x]
        return (int(r), int(g), int(b))
