from __future__ import annotations

import pytest

from tileworld import config
from tileworld.blocks import BlockId
from tileworld.events import BlockPlaced, BlockRemoved
from tileworld.game import Game, PointerButton
from tileworld.physics import is_grounded

from conftest import grid_from_rows

DT = 1.0 / config.TICK_RATE


def _flat_game() -> Game:
    rows = ["." * 20] * 8 + ["g" * 20] + ["d" * 20] * 3
    return Game(grid=grid_from_rows(rows), view_size=(320, 240))


def test_player_spawns_resting_on_surface() -> None:
    game = _flat_game()
    body = game.state.body
    assert body.x == 20 * config.TILE / 2
    assert body.bottom == pytest.approx(8 * config.TILE)
    assert is_grounded(body, game.grid)


def test_generated_world_spawn_is_grounded() -> None:
    game = Game(config.WorldConfig(width=40, height=30, seed=7), view_size=(320, 240))
    assert is_grounded(game.state.body, game.grid)
    start = game.state.body.y
    game.tick(0.0)
    assert game.state.body.y == pytest.approx(start)


def test_movement_keys_drive_the_body() -> None:
    game = _flat_game()
    x0 = game.state.body.x
    game.key_down("D")
    game.tick(0.0, DT)
    assert game.state.body.x == pytest.approx(x0 + config.RUN_SPEED * DT)
    game.key_up("d")
    game.tick(DT, DT)
    assert game.state.body.x == pytest.approx(x0 + config.RUN_SPEED * DT)


def test_jump_key() -> None:
    game = _flat_game()
    game.key_down("space")
    game.tick(0.0)
    assert game.state.body.vy == config.JUMP_VELOCITY


def test_hold_to_break_removes_block_on_tick() -> None:
    game = _flat_game()
    game.pointer_down(PointerButton.RIGHT, 10, 8, now=0.0)
    assert game.tick(0.5) == []
    assert game.grid.get(10, 8) == BlockId.GRASS
    events = game.tick(config.SOFT_BREAK_SECONDS)
    assert events == [BlockRemoved(10, 8, BlockId.GRASS, config.SOFT_BREAK_SECONDS)]
    assert game.grid.get(10, 8) == BlockId.AIR


def test_pointer_up_cancels_break() -> None:
    game = _flat_game()
    game.pointer_down(PointerButton.RIGHT, 3, 9, now=0.0)
    assert game.state.breaker.target is not None
    game.pointer_up()
    assert game.state.breaker.target is None
    game.tick(5.0)
    assert game.grid.get(3, 9) == BlockId.DIRT


def test_place_selected_block() -> None:
    game = _flat_game()
    game.select_slot(2)
    placed = game.pointer_down(PointerButton.LEFT, 12, 7, now=0.0)
    assert placed == BlockPlaced(12, 7, BlockId.STONE)
    assert game.grid.get(12, 7) == BlockId.STONE
    assert game.grid.get(12, 8) == BlockId.DIRT


def test_pointer_outside_world_is_ignored() -> None:
    game = _flat_game()
    assert game.pointer_down(PointerButton.LEFT, -3, 7, now=0.0) is None
    game.pointer_down(PointerButton.RIGHT, 40, 9, now=0.0)
    assert game.state.breaker.target is None


def test_view_snapshot_is_read_only() -> None:
    game = _flat_game()
    game.pointer_move(4, 8)
    game.pointer_down(PointerButton.RIGHT, 4, 9, now=0.0)
    frame = game.view(config.SOFT_BREAK_SECONDS / 2)
    assert frame.progress == 0.5
    assert frame.hover == (4, 8)
    assert frame.target.wx == 4
    with pytest.raises(ValueError):
        frame.cells[0, 0] = 1
    frame.target.completed = True
    assert not game.state.breaker.target.completed


def test_burying_break_target_clears_overlay() -> None:
    game = _flat_game()
    game.pointer_down(PointerButton.RIGHT, 12, 8, now=0.0)
    game.select_slot(2)
    assert game.pointer_down(PointerButton.LEFT, 12, 7, now=0.1) is not None
    assert game.grid.get(12, 8) == BlockId.DIRT
    frame = game.view(0.2)
    assert frame.target is None
    assert frame.progress == 0.0
    assert game.state.breaker.target is None
    assert game.tick(1.0) == []
    assert game.grid.get(12, 8) == BlockId.DIRT
