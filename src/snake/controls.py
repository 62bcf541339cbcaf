# controls.py
from typing import Dict, Iterable, Tuple
import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .entities import Snake
from .game import GameState

KEY_DIRECTIONS: Dict[int, Tuple[int, int]] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


def route_event(snake: Snake, event: pygame.event.Event) -> bool:
    """Forward arrow keys to snake.turn. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        direction = KEY_DIRECTIONS.get(event.key)
        if direction is not None:
            snake.turn(direction)
    return True


def handle_input(state: GameState, events: Iterable[pygame.event.Event]) -> bool:
    running = True
    for event in events:
        if not route_event(state.snake, event):
            running = False
    return running
