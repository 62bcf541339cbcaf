import os

# No window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np  # type: ignore
import pytest

from src.snake.config import Config
from src.snake.game import new_game_state


class RecordingSurface:
    """Surface that remembers every call instead of drawing."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", x, y, width, height, color))

    def line(self, x1, y1, x2, y2, color, width=1):
        self.calls.append(("line", x1, y1, x2, y2, color, width))

    def circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius, color))


@pytest.fixture
def cfg():
    return Config(seed=123)


@pytest.fixture
def state(cfg):
    return new_game_state(cfg, rng=np.random.default_rng(cfg.seed))


@pytest.fixture
def surface():
    return RecordingSurface()
