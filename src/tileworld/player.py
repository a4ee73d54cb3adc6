from __future__ import annotations

import math
from dataclasses import dataclass, field

from . import config
from .grid import TileGrid
from .physics import Body, advance

LEFT_KEYS = frozenset({"a", "left"})
RIGHT_KEYS = frozenset({"d", "right"})
JUMP_KEYS = frozenset({"w", "up", "space"})


@dataclass
class MoveInput:
    held: set[str] = field(default_factory=set)

    def key_down(self, key: str) -> None:
        self.held.add(key.lower())

    def key_up(self, key: str) -> None:
        self.held.discard(key.lower())

    @property
    def left(self) -> bool:
        return bool(self.held & LEFT_KEYS)

    @property
    def right(self) -> bool:
        return bool(self.held & RIGHT_KEYS)

    @property
    def jump(self) -> bool:
        return bool(self.held & JUMP_KEYS)


def spawn_body(grid: TileGrid, tile: int = config.TILE) -> Body:
    body = Body(x=grid.width * tile / 2, y=0.0)
    place_on_surface(body, grid, tile)
    return body


def place_on_surface(body: Body, grid: TileGrid, tile: int = config.TILE) -> None:
    """Rest the body flush on the highest surface row under the columns it spans."""
    first = math.floor(body.x / tile)
    last = math.floor((body.x + body.w - config.EDGE_EPSILON) / tile)
    rows = [grid.surface_row(x) for x in range(first, last + 1)]
    rows = [r for r in rows if r is not None]
    if not rows:
        return
    body.y = min(rows) * tile - body.h
    body.vy = 0.0
    body.grounded = True


def update(body: Body, controls: MoveInput, grid: TileGrid, dt: float) -> Body:
    if controls.left:
        body.vx = -config.RUN_SPEED
    elif controls.right:
        body.vx = config.RUN_SPEED
    else:
        body.vx = 0.0
    return advance(body, grid, dt, jump=controls.jump)
