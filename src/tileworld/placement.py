from __future__ import annotations

import logging

from . import config
from .blocks import SUBSURFACE, SURFACE, BlockId
from .events import BlockPlaced
from .grid import TileGrid
from .physics import Body, tile_span

LOGGER = logging.getLogger(__name__)

_NEIGHBORS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def overlaps_body(wx: int, wy: int, body: Body, tile: int = config.TILE) -> bool:
    # Same span as collision; a body resting flush on a row does not occupy it.
    return wx in tile_span(body.x, body.x + body.w, tile) and wy in tile_span(body.y, body.bottom, tile)


def has_neighbor(grid: TileGrid, wx: int, wy: int) -> bool:
    return any(not grid.is_empty(wx + dx, wy + dy) for dx, dy in _NEIGHBORS)


def refusal_reason(
    wx: int,
    wy: int,
    selected: int,
    grid: TileGrid,
    body: Body,
    tile: int = config.TILE,
) -> str | None:
    """Name of the first placement rule that fails, or None when placement is allowed."""
    if not grid.in_bounds(wx, wy):
        return "out of world"
    if selected == BlockId.AIR or selected not in grid.catalog:
        return "nothing selected"
    if not grid.is_empty(wx, wy):
        return "occupied"
    if overlaps_body(wx, wy, body, tile):
        return "overlaps player"
    if not has_neighbor(grid, wx, wy):
        return "no neighbor"
    ptx, pty = body.center_tile(tile)
    dx = wx - ptx
    dy = wy - pty
    if dx * dx + dy * dy > config.PLACE_RADIUS * config.PLACE_RADIUS:
        return "out of reach"
    # One step back from the target toward the player must be clear.
    if not grid.is_empty(wx - _sign(dx), wy - _sign(dy)):
        return "blocked"
    return None


def can_place(wx: int, wy: int, selected: int, grid: TileGrid, body: Body, tile: int = config.TILE) -> bool:
    return refusal_reason(wx, wy, selected, grid, body, tile) is None


def place(wx: int, wy: int, selected: int, grid: TileGrid, body: Body, tile: int = config.TILE) -> BlockPlaced | None:
    reason = refusal_reason(wx, wy, selected, grid, body, tile)
    if reason is not None:
        LOGGER.debug("placement at (%d, %d) refused: %s", wx, wy, reason)
        return None
    grid.set(wx, wy, selected)
    # A block placed on exposed surface buries it.
    if grid.get(wx, wy + 1) == SURFACE:
        grid.set(wx, wy + 1, SUBSURFACE)
    return BlockPlaced(wx, wy, int(selected))
