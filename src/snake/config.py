from dataclasses import dataclass

# ----- Window & grid -----
CELL_SIZE = 15
WIDTH, HEIGHT = 495, 495
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE

# ----- Timing -----
FRAME_RATE = 15                   # ticks per second
FRAME_INTERVAL = 1000 / FRAME_RATE  # ms between ticks
HOST_FPS = 60                     # how often the host polls the clock

# ----- Colors -----
BLACK   = (0, 0, 0)
WHITE   = (255, 255, 255)
MAGENTA = (255, 0, 255)
GRID_LINE = (40, 40, 48)

BG, SNAKE, FOOD = BLACK, WHITE, MAGENTA

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class InitializationError(RuntimeError):
    """Startup cannot continue (no display, no surface, bad geometry)."""


# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    frame_rate: int = FRAME_RATE
    cell_size: int = CELL_SIZE
    width: int = WIDTH
    height: int = HEIGHT
    show_grid: bool = False
    round_food: bool = False

    @property
    def grid_w(self) -> int:
        return self.width // self.cell_size

    @property
    def grid_h(self) -> int:
        return self.height // self.cell_size

    @property
    def frame_interval(self) -> float:
        return 1000 / self.frame_rate

    @property
    def start(self):
        """Start cell of the snake's head, one cell in from the top-left."""
        return (self.cell_size, self.cell_size)

    def validate(self) -> "Config":
        if self.cell_size <= 0:
            raise InitializationError(f"Cell size must be positive, got {self.cell_size}.")
        if self.frame_rate <= 0:
            raise InitializationError(f"Frame rate must be positive, got {self.frame_rate}.")
        if self.width <= 0 or self.height <= 0:
            raise InitializationError(f"Canvas size must be positive, got {self.width}x{self.height}.")
        if self.width % self.cell_size or self.height % self.cell_size:
            raise InitializationError(
                f"Canvas {self.width}x{self.height} is not a multiple of the "
                f"cell size {self.cell_size}; positions would leave the grid."
            )
        return self


CFG = Config(seed=0)
