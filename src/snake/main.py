# main.py
import argparse
import math
import sys

import pygame # type: ignore

from .config import Config, CFG, FRAME_RATE, HOST_FPS, InitializationError
from .controls import handle_input
from .game import GameState, new_game_state, on_frame, run_frames
from .render import ArraySurface, open_display


def report(state: GameState) -> None:
    hx, hy = state.snake.head
    fx, fy = state.food.position
    print(f"[SNAKE] length={state.snake.length}, meals={state.meals}, "
          f"head=({hx},{hy}), food=({fx},{fy})")


def play(cfg: Config) -> GameState:
    """Windowed session; runs until the window is closed."""
    cfg.validate()
    pygame.init()
    try:
        surface = open_display(cfg, caption="Snake")
        state = new_game_state(cfg)
        clock = pygame.time.Clock()
        print(f"[SNAKE] {cfg.grid_w}x{cfg.grid_h} grid, {cfg.frame_rate} ticks/s, seed={cfg.seed}")

        running = True
        while running:
            # 1) input
            running = handle_input(state, pygame.event.get())
            if not running:
                break

            # 2) tick (gated inside on_frame) + render
            meals = state.meals
            if on_frame(state, surface, pygame.time.get_ticks()):
                if state.meals != meals:
                    print(f"[SNAKE] ate, length={state.snake.length}, food → {state.food.position}")
                pygame.display.flip()

            clock.tick(HOST_FPS)
    finally:
        pygame.quit()
    return state


def play_headless(cfg: Config, frames: int) -> GameState:
    """Play `frames` frames on an off-screen buffer, one tick per frame."""
    state = new_game_state(cfg)
    surface = ArraySurface(cfg.width, cfg.height)
    # Whole milliseconds, rounded up, so every synthetic frame clears the gate
    step_ms = math.ceil(cfg.frame_interval)
    ticks = run_frames(state, surface, (step_ms * (i + 1) for i in range(frames)))
    print(f"[SNAKE] headless: {ticks} tick(s) over {frames} frame(s)")
    return state


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake.")
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--fps", type=int, default=FRAME_RATE, help="simulation ticks per second")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size)
    parser.add_argument("--width", type=int, default=CFG.width, help="canvas width in pixels")
    parser.add_argument("--height", type=int, default=CFG.height, help="canvas height in pixels")
    parser.add_argument("--grid", action="store_true", help="draw grid lines")
    parser.add_argument("--round-food", action="store_true", help="draw food as a disc instead of a square")
    parser.add_argument(
        "--headless",
        type=int,
        default=None,
        metavar="FRAMES",
        help="run FRAMES ticks without a window and print the final state",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    cfg = Config(
        seed=args.seed,
        frame_rate=args.fps,
        cell_size=args.cell_size,
        width=args.width,
        height=args.height,
        show_grid=args.grid,
        round_food=args.round_food,
    )

    try:
        if args.headless is not None:
            state = play_headless(cfg, args.headless)
        else:
            state = play(cfg)
    except InitializationError as exc:
        print(f"[SNAKE] error: {exc}", file=sys.stderr)
        return 1

    report(state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
