from __future__ import annotations

import argparse
import logging
import sys
import time

import pygame

from . import config
from .assets import AssetLoader
from .game import Game, PointerButton
from .render import Renderer

_SLOT_KEYS = {getattr(pygame, f"K_{n}"): n - 1 for n in range(1, 10)}
_MOUSE_BUTTONS = {1: PointerButton.LEFT, 3: PointerButton.RIGHT}
_RELEASE_BUTTONS = (1, 2, 3)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tileworld", add_help=True)
    parser.add_argument("--seed", type=int, default=None, help="Terrain seed (random when omitted).")
    parser.add_argument("--world-width", type=int, default=config.WORLD_W, help="World width in tiles.")
    parser.add_argument("--world-height", type=int, default=config.WORLD_H, help="World height in tiles.")
    parser.add_argument("--width", type=int, default=config.WIDTH, help="Window width in pixels.")
    parser.add_argument("--height", type=int, default=config.HEIGHT, help="Window height in pixels.")
    parser.add_argument("--fps", type=int, default=config.FPS_LIMIT, help="Frame rate cap.")
    parser.add_argument("--assets", default=config.ASSET_DIR, help="Directory holding optional textures.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def handle_event(game: Game, event: pygame.event.Event, now: float) -> bool:
    """Forward one pygame event to the game. Returns False when the app should quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
        return False
    if event.type == pygame.KEYDOWN:
        if event.key in _SLOT_KEYS:
            game.select_slot(_SLOT_KEYS[event.key])
        game.key_down(pygame.key.name(event.key))
    elif event.type == pygame.KEYUP:
        game.key_up(pygame.key.name(event.key))
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button in _MOUSE_BUTTONS:
        wx, wy = game.state.camera.screen_to_tile(*event.pos)
        game.pointer_down(_MOUSE_BUTTONS[event.button], wx, wy, now)
    elif event.type == pygame.MOUSEBUTTONUP and event.button in _RELEASE_BUTTONS:
        # Wheel scrolls arrive as buttons 4 and 5.
        game.pointer_up()
    elif event.type == pygame.MOUSEMOTION:
        game.pointer_move(*game.state.camera.screen_to_tile(*event.pos))
    return True


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    world = config.WorldConfig(width=args.world_width, height=args.world_height, seed=args.seed)
    game = Game(world, view_size=(args.width, args.height))

    pygame.init()
    pygame.display.set_caption("tileworld")
    screen = pygame.display.set_mode((args.width, args.height))
    renderer = Renderer(screen, AssetLoader(args.assets, game.grid.catalog))
    clock = pygame.time.Clock()

    step = 1.0 / config.TICK_RATE
    accumulator = 0.0
    last = time.monotonic()

    while True:
        now = time.monotonic()
        accumulator = min(accumulator + (now - last), step * 5)
        last = now

        for event in pygame.event.get():
            if not handle_event(game, event, now):
                pygame.quit()
                sys.exit()

        while accumulator >= step:
            for removed in game.tick(now, step):
                block = game.grid.catalog.get(removed.block_id)
                renderer.effects.on_block_removed(removed, block.color if block else None)
            accumulator -= step

        renderer.draw(game.view(now), now)
        pygame.display.flip()
        clock.tick(args.fps)


if __name__ == "__main__":
    main()
