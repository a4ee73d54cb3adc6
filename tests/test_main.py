from __future__ import annotations

import pygame

from tileworld import config
from tileworld.__main__ import handle_event, parse_args
from tileworld.game import Game, PointerButton

from conftest import grid_from_rows


def _game() -> Game:
    rows = ["." * 20] * 8 + ["g" * 20] + ["d" * 20] * 3
    return Game(grid=grid_from_rows(rows), view_size=(320, 240))


def _screen_pos(game: Game, wx: int, wy: int) -> tuple[int, int]:
    ox, oy = game.state.camera.offset()
    return (wx * config.TILE - ox + 5, wy * config.TILE - oy + 5)


def test_right_press_starts_break_under_cursor() -> None:
    game = _game()
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=_screen_pos(game, 8, 9))
    assert handle_event(game, event, 0.0)
    target = game.state.breaker.target
    assert (target.wx, target.wy) == (8, 9)


def test_wheel_release_keeps_break() -> None:
    game = _game()
    game.pointer_down(PointerButton.RIGHT, 3, 9, now=0.0)
    for button in (4, 5):
        handle_event(game, pygame.event.Event(pygame.MOUSEBUTTONUP, button=button, pos=(0, 0)), 0.1)
    assert game.state.breaker.target is not None
    handle_event(game, pygame.event.Event(pygame.MOUSEBUTTONUP, button=3, pos=(0, 0)), 0.2)
    assert game.state.breaker.target is None


def test_quit_event_stops_loop() -> None:
    assert not handle_event(_game(), pygame.event.Event(pygame.QUIT), 0.0)


def test_parse_args_overrides() -> None:
    args = parse_args(["--seed", "5", "--world-width", "64", "--log-level", "DEBUG"])
    assert args.seed == 5
    assert args.world_width == 64
    assert args.world_height == config.WORLD_H
    assert args.log_level == "DEBUG"
