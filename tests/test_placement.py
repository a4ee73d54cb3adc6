from __future__ import annotations

import pytest

from tileworld import config
from tileworld.blocks import BlockId
from tileworld.physics import Body, advance
from tileworld.placement import can_place, overlaps_body, place, refusal_reason

from conftest import flat_grid

TILE = config.TILE


def _player_at_tile(tx: int, ground_row: int) -> Body:
    # Horizontally centered in column tx, standing on ground_row.
    body = Body(x=tx * TILE + (TILE - config.PLAYER_W) / 2, y=0.0)
    body.y = ground_row * TILE - body.h
    return body


def _setup(top: str = "s", fill: str = "s"):
    grid = flat_grid(20, 14, ground_row=10, top=top, fill=fill)
    body = _player_at_tile(10, 10)
    assert body.center_tile() == (10, 9)
    return grid, body


def test_radius_boundary_sixteen_accepted() -> None:
    grid, body = _setup()
    assert refusal_reason(14, 9, BlockId.STONE, grid, body) is None
    assert can_place(14, 9, BlockId.STONE, grid, body)


def test_radius_boundary_seventeen_rejected() -> None:
    grid, body = _setup()
    grid.set(14, 9, BlockId.STONE)  # gives (14, 8) a neighbor
    assert refusal_reason(14, 8, BlockId.STONE, grid, body) == "out of reach"


def test_floating_block_rejected() -> None:
    grid, body = _setup()
    assert refusal_reason(12, 7, BlockId.STONE, grid, body) == "no neighbor"


def test_overlapping_player_rejected() -> None:
    grid, body = _setup()
    assert refusal_reason(10, 9, BlockId.STONE, grid, body) == "overlaps player"


def test_occupied_cell_rejected() -> None:
    grid, body = _setup()
    assert refusal_reason(12, 10, BlockId.STONE, grid, body) == "occupied"


def test_wall_in_front_blocks_placement() -> None:
    grid, body = _setup()
    grid.set(12, 9, BlockId.STONE)
    assert refusal_reason(13, 9, BlockId.STONE, grid, body) == "blocked"


def test_out_of_world_and_air_selection_rejected() -> None:
    grid, body = _setup()
    assert not can_place(-1, 9, BlockId.STONE, grid, body)
    assert not can_place(12, 9, BlockId.AIR, grid, body)
    assert not can_place(12, 9, 77, grid, body)


def test_place_buries_surface_block() -> None:
    grid, body = _setup(top="g", fill="d")
    placed = place(12, 9, BlockId.STONE, grid, body)
    assert placed is not None
    assert grid.get(12, 9) == BlockId.STONE
    assert grid.get(12, 10) == BlockId.DIRT
    # Neighbouring surface is untouched.
    assert grid.get(13, 10) == BlockId.GRASS


def test_refused_place_leaves_grid_untouched() -> None:
    grid, body = _setup()
    version = grid.version
    assert place(12, 7, BlockId.STONE, grid, body) is None
    assert grid.version == version


def test_fill_gap_under_landed_body() -> None:
    grid = flat_grid(20, 14, ground_row=10)
    for x in range(11, 20):
        grid.fill_column(x, 0, BlockId.AIR)
    # Straddles the ledge: left foot on column 10, right foot over the gap.
    body = Body(x=11 * TILE - config.PLAYER_W / 2, y=10 * TILE - config.PLAYER_H - 12)
    for _ in range(30):
        advance(body, grid, 1.0 / config.TICK_RATE)
    assert body.grounded
    assert body.bottom == pytest.approx(10 * TILE)
    assert not overlaps_body(11, 10, body)
    assert refusal_reason(11, 10, BlockId.STONE, grid, body) is None
    assert place(11, 10, BlockId.STONE, grid, body) is not None


def test_overlap_is_strict_at_edges() -> None:
    body = Body(x=2 * TILE, y=3 * TILE)
    assert overlaps_body(2, 3, body)
    assert not overlaps_body(1, 3, body)
    assert not overlaps_body(2, 4, body)
    body.x = 2 * TILE - 1
    assert overlaps_body(1, 3, body)
