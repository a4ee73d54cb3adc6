from __future__ import annotations

import math
from dataclasses import dataclass

from . import config
from .grid import TileGrid


@dataclass
class Body:
    x: float
    y: float
    w: float = config.PLAYER_W
    h: float = config.PLAYER_H
    vx: float = 0.0
    vy: float = 0.0
    grounded: bool = False

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.w / 2, self.y + self.h / 2)

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)

    def center_tile(self, tile: int = config.TILE) -> tuple[int, int]:
        cx, cy = self.center
        return (math.floor(cx / tile), math.floor(cy / tile))


def tile_span(lo: float, hi: float, tile: int) -> range:
    # Trailing edge pulled in so a box flush with a tile boundary does not touch the next tile.
    return range(math.floor(lo / tile), math.floor((hi - config.EDGE_EPSILON) / tile) + 1)


def solid_at_pixel(grid: TileGrid, px: float, py: float, tile: int = config.TILE) -> bool:
    return grid.is_solid(math.floor(px / tile), math.floor(py / tile))


def colliding_box(grid: TileGrid, x: float, y: float, w: float, h: float, tile: int = config.TILE) -> bool:
    cols = tile_span(x, x + w, tile)
    for ty in tile_span(y, y + h, tile):
        for tx in cols:
            if grid.is_solid(tx, ty):
                return True
    return False


def is_grounded(body: Body, grid: TileGrid, tile: int = config.TILE) -> bool:
    below = body.bottom + 1
    return solid_at_pixel(grid, body.x + 1, below, tile) or solid_at_pixel(grid, body.x + body.w - 1, below, tile)


def landing_row(body: Body, grid: TileGrid, new_y: float, tile: int = config.TILE) -> int | None:
    """Highest solid row the body's bottom edge sweeps into when moving down to ``new_y``."""
    cols = tile_span(body.x, body.x + body.w, tile)
    first = math.floor((body.bottom - config.EDGE_EPSILON) / tile)
    last = math.floor((new_y + body.h - config.EDGE_EPSILON) / tile)
    for ty in range(first, last + 1):
        if any(grid.is_solid(tx, ty) for tx in cols):
            return ty
    return None


def move_axis_tile(body: Body, grid: TileGrid, delta: float, axis: int, tile: int = config.TILE) -> bool:
    """Apply ``delta`` along one axis in full, or reject it. Returns True when moved."""
    if delta == 0:
        return True
    if axis == 0:
        if colliding_box(grid, body.x + delta, body.y, body.w, body.h, tile):
            body.vx = 0.0
            return False
        body.x += delta
        return True

    new_y = body.y + delta
    if not colliding_box(grid, body.x, new_y, body.w, body.h, tile):
        body.y = new_y
        return True
    if delta > 0:
        row = landing_row(body, grid, new_y, tile)
        if row is not None:
            body.y = row * tile - body.h
    body.vy = 0.0
    return False


def advance(body: Body, grid: TileGrid, dt: float, jump: bool = False, tile: int = config.TILE) -> Body:
    """One fixed physics step: gravity, jump, then x and y moves against the grid."""
    body.vy += config.GRAVITY * dt
    if jump and is_grounded(body, grid, tile):
        body.vy = config.JUMP_VELOCITY
    move_axis_tile(body, grid, body.vx * dt, 0, tile)
    move_axis_tile(body, grid, body.vy * dt, 1, tile)
    body.grounded = is_grounded(body, grid, tile)
    return body
