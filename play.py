from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from gridsnake import constants
from gridsnake.board import Direction
from gridsnake.game import GameSession, create_session, set_pending_direction, tick
from gridsnake.render import HeadlessRenderer, PygameRenderer, render

KEY_BINDINGS = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--size", type=int, default=constants.SIZE, help="Board side length in cells")
    parser.add_argument("--ups", type=int, default=constants.UPDATES_PER_SECOND, help="Game updates per second")
    parser.add_argument("--fps", type=int, default=constants.FRAMES_PER_SECOND, help="Frames drawn per second")
    parser.add_argument("--window", type=int, nargs=2, default=constants.WINDOW_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window, steering randomly, and keep frames in memory",
    )
    parser.add_argument("--ticks", type=int, default=200, help="Ticks to run in headless mode")
    parser.add_argument("--verbose", action="store_true", help="Log game events")
    args = parser.parse_args(argv)

    for name in ("size", "ups", "fps", "ticks"):
        if getattr(args, name) < 1:
            parser.error(f"--{name} must be at least 1")
    if min(args.window) < 1:
        parser.error("--window sizes must be at least 1")
    return args


def run_headless(session: GameSession, ticks: int, seed=None) -> HeadlessRenderer:
    """Drive the session with random directions and record every frame."""
    renderer = HeadlessRenderer(max_frames=ticks)
    rng = random.Random(seed)
    directions = list(Direction)
    for _ in range(ticks):
        set_pending_direction(session, rng.choice(directions))
        result = tick(session)
        renderer.draw(render(session))
        if result.lost:
            break
    return renderer


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    session = create_session(args.size, seed=args.seed)

    if args.headless:
        renderer = run_headless(session, args.ticks, seed=args.seed)
        print(f"Ran {len(renderer.frames)} ticks, length: {len(session.snake)}, fruits eaten: {session.score}")
        renderer.close()
        return

    renderer = PygameRenderer(window_size=tuple(args.window))
    clock = pygame.time.Clock()
    tick_interval_ms = 1000.0 / args.ups
    elapsed_ms = 0.0

    while not session.quit_requested:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                renderer.close()
                sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    renderer.close()
                    sys.exit()
                direction = KEY_BINDINGS.get(event.key)
                if direction is not None:
                    set_pending_direction(session, direction)

        elapsed_ms += clock.tick(args.fps)
        while elapsed_ms >= tick_interval_ms:
            elapsed_ms -= tick_interval_ms
            tick(session)

        renderer.draw(render(session))

    print(f"Game over! Final length: {len(session.snake)}, fruits eaten: {session.score}")
    renderer.close()


if __name__ == "__main__":
    main()
