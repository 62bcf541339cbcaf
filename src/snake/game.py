# game.py
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
import math

import numpy as np  # type: ignore

from .config import Config, CFG, BG, SNAKE, FOOD, GRID_LINE
from .entities import Snake, Food
from .render import Surface, draw_grid


# ---------- Helpers ----------
def distance(a: Tuple[int, int], b: Tuple[int, int]) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def draw_cell(surface: Surface, x: int, y: int, size: int, color) -> None:
    surface.fill_rect(x, y, size, size, color)


# ---------- State ----------
@dataclass
class GameState:
    snake: Snake
    food: Food
    rng: np.random.Generator
    cfg: Config
    last_tick: float = 0.0          # ms timestamp of last tick
    meals: int = 0

    @property
    def tick_interval(self) -> float:
        return self.cfg.frame_interval


def new_game_state(cfg: Config = CFG, rng: Optional[np.random.Generator] = None) -> GameState:
    """Build the whole session. Raises InitializationError on bad geometry."""
    cfg.validate()
    if rng is None:
        rng = np.random.default_rng(cfg.seed)
    snake = Snake(head=cfg.start, cell_size=cfg.cell_size)
    food = Food.random(rng, cfg.grid_w, cfg.grid_h, cfg.cell_size)
    return GameState(snake=snake, food=food, rng=rng, cfg=cfg)


# ---------- Update / Draw ----------
def consume(state: GameState) -> bool:
    """Grow and respawn food if the head sits on it. Returns True on a meal."""
    if distance(state.snake.head, state.food.position) > 0:
        return False
    state.snake.grow()
    state.food.relocate(state.rng)
    state.meals += 1
    return True


def draw_game(surface: Surface, state: GameState) -> None:
    cfg = state.cfg
    surface.clear()
    surface.fill_rect(0, 0, cfg.width, cfg.height, BG)
    if cfg.show_grid:
        draw_grid(surface, cfg.width, cfg.height, cfg.grid_w, cfg.grid_h, GRID_LINE)

    for x, y in state.snake.segments():
        draw_cell(surface, x, y, cfg.cell_size, SNAKE)

    fx, fy = state.food.position
    if cfg.round_food:
        half = cfg.cell_size // 2
        surface.circle(fx + half, fy + half, half, FOOD)
    else:
        draw_cell(surface, fx, fy, cfg.cell_size, FOOD)


def step_game(state: GameState) -> bool:
    """One simulation step without drawing. Returns True if food was eaten."""
    state.snake.advance()
    return consume(state)


def tick(state: GameState, surface: Surface) -> bool:
    """
    One full tick: move, paint, then check for a meal.
    The frame is painted before the meal is resolved, so the eaten food is
    still visible under the head and the new food shows up next tick.
    Returns True if food was eaten.
    """
    state.snake.advance()
    draw_game(surface, state)
    return consume(state)


def on_frame(state: GameState, surface: Surface, now_ms: float) -> bool:
    """
    Clock callback. Gates on the tick interval and runs at most one tick.
    Returns True if a tick fired.
    """
    if now_ms - state.last_tick < state.tick_interval:
        return False  # not time to move yet

    state.last_tick = now_ms
    tick(state, surface)
    return True


def run_frames(state: GameState, surface: Surface, timestamps: Iterable[float]) -> int:
    """Feed a sequence of clock readings through on_frame. Returns ticks fired."""
    return sum(1 for now in timestamps if on_frame(state, surface, now))
