import pygame # type: ignore
import pytest

from src.snake.config import Config, InitializationError, BLACK, WHITE, MAGENTA
from src.snake.render import ArraySurface, PygameSurface, draw_grid, open_display


def test_array_surface_fill_and_clear():
    canvas = ArraySurface(60, 45)
    canvas.fill_rect(15, 15, 15, 15, WHITE)
    assert canvas.pixel(15, 15) == WHITE
    assert canvas.pixel(29, 29) == WHITE
    assert canvas.pixel(30, 30) == BLACK
    canvas.clear()
    assert canvas.pixels.sum() == 0


def test_array_surface_clips_off_canvas():
    canvas = ArraySurface(45, 45)
    canvas.fill_rect(-15, 0, 15, 15, WHITE)      # entirely left of the canvas
    canvas.fill_rect(45, 45, 15, 15, WHITE)      # entirely past the corner
    assert canvas.pixels.sum() == 0

    canvas.fill_rect(-5, -5, 15, 15, MAGENTA)
    assert canvas.pixel(0, 0) == MAGENTA
    assert canvas.pixel(9, 9) == MAGENTA
    assert canvas.pixel(10, 10) == BLACK
    assert canvas.pixel(44, 44) == BLACK


def test_array_surface_line_and_circle():
    canvas = ArraySurface(30, 30)
    canvas.line(0, 10, 29, 10, WHITE)
    assert all(canvas.pixel(x, 10) == WHITE for x in range(30))
    assert canvas.pixel(5, 11) == BLACK

    canvas.circle(20, 20, 3, MAGENTA)
    assert canvas.pixel(20, 20) == MAGENTA
    assert canvas.pixel(23, 20) == MAGENTA
    assert canvas.pixel(23, 23) == BLACK


def test_draw_grid_inner_lines(surface):
    draw_grid(surface, 60, 45, 4, 3, WHITE)
    lines = [c[1:5] for c in surface.calls]
    assert lines == [
        (15, 0, 15, 45), (30, 0, 30, 45), (45, 0, 45, 45),
        (0, 15, 60, 15), (0, 30, 60, 30),
    ]


def test_pygame_surface_draws():
    screen = pygame.Surface((45, 45))
    surf = PygameSurface(screen)
    surf.clear()
    surf.fill_rect(15, 15, 15, 15, WHITE)
    assert tuple(screen.get_at((20, 20)))[:3] == WHITE
    assert tuple(screen.get_at((0, 0)))[:3] == BLACK
    assert surf.size == (45, 45)


def test_open_display_dummy_driver():
    try:
        surf = open_display(Config())
        assert surf.size == (495, 495)
    finally:
        pygame.quit()


def test_open_display_missing_display(monkeypatch):
    def no_display():
        raise pygame.error("No available video device")

    monkeypatch.setattr(pygame.display, "init", no_display)
    with pytest.raises(InitializationError, match="Display was not found"):
        open_display(Config())


def test_open_display_no_surface(monkeypatch):
    def refuse(*args, **kwargs):
        raise pygame.error("Couldn't create window")

    monkeypatch.setattr(pygame.display, "set_mode", refuse)
    try:
        with pytest.raises(InitializationError, match="2D rendering surface"):
            open_display(Config())
    finally:
        pygame.quit()
