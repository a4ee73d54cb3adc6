"""Hold-to-break state machine.

At most one block is being broken at a time. A target starts on a
break-intent, progresses with elapsed time, and leaves through exactly one
of: cancel (pointer released), invalidation (the tile changed under it),
or completion (the tile is removed and a ``BlockRemoved`` event fires).
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum, auto

from . import config
from .blocks import SOFT_BLOCKS, BlockId
from .events import BlockRemoved
from .grid import TileGrid
from .rng import Lcg, mix_seed

LOGGER = logging.getLogger(__name__)


class BreakState(Enum):
    IDLE = auto()
    BREAKING = auto()


def break_duration(block_id: int) -> float:
    if block_id in SOFT_BLOCKS:
        return config.SOFT_BREAK_SECONDS
    return config.HARD_BREAK_SECONDS


@dataclass
class BreakTarget:
    wx: int
    wy: int
    block_id: int
    start_time: float
    duration: float
    seed: int
    completed: bool = False

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, (now - self.start_time) / self.duration))


class BreakStateMachine:
    def __init__(self) -> None:
        self.target: BreakTarget | None = None

    @property
    def state(self) -> BreakState:
        return BreakState.IDLE if self.target is None else BreakState.BREAKING

    def start(self, grid: TileGrid, wx: int, wy: int, now: float) -> bool:
        if not grid.in_bounds(wx, wy):
            return False
        block_id = grid.get(wx, wy)
        if block_id == BlockId.AIR:
            return False
        if self.target is not None and (self.target.wx, self.target.wy) == (wx, wy):
            return False
        self.target = BreakTarget(
            wx=wx,
            wy=wy,
            block_id=block_id,
            start_time=now,
            duration=break_duration(block_id),
            seed=mix_seed(wx, wy, block_id),
        )
        LOGGER.debug("break started at (%d, %d) on block %d", wx, wy, block_id)
        return True

    def cancel(self) -> bool:
        if self.target is None or self.target.completed:
            return False
        LOGGER.debug("break cancelled at (%d, %d)", self.target.wx, self.target.wy)
        self.target = None
        return True

    def progress(self, now: float) -> float:
        if self.target is None:
            return 0.0
        return self.target.progress(now)

    def sample(self, grid: TileGrid, now: float) -> float:
        """Progress of the live target, dropping it first if its tile changed."""
        target = self.target
        if target is None:
            return 0.0
        if grid.get(target.wx, target.wy) != target.block_id:
            LOGGER.debug("break target at (%d, %d) went stale", target.wx, target.wy)
            self.target = None
            return 0.0
        return target.progress(now)

    def update(self, grid: TileGrid, now: float) -> BlockRemoved | None:
        if self.sample(grid, now) < 1.0:
            return None
        target = self.target
        target.completed = True
        grid.set(target.wx, target.wy, BlockId.AIR)
        self.target = None
        LOGGER.debug("broke block %d at (%d, %d)", target.block_id, target.wx, target.wy)
        return BlockRemoved(target.wx, target.wy, target.block_id, now)


def crack_lines(seed: int, progress: float, tile: float = config.TILE) -> list[tuple[float, float, float, float]]:
    """Crack segments in tile-local pixels; replayable from the target's seed."""
    rng = Lcg(seed)
    segments: list[tuple[float, float, float, float]] = []
    for _ in range(math.floor(progress * config.MAX_CRACKS)):
        x1 = rng.next_float() * tile
        y1 = rng.next_float() * tile
        x2 = rng.next_float() * tile
        y2 = rng.next_float() * tile
        segments.append((x1, y1, x2, y2))
        if rng.next_float() > config.CRACK_BRANCH_CHANCE:
            bx = x1 + (x2 - x1) * rng.next_float()
            by = y1 + (y2 - y1) * rng.next_float()
            ex = bx + (rng.next_float() - 0.5) * config.CRACK_BRANCH_LENGTH
            ey = by + (rng.next_float() - 0.5) * config.CRACK_BRANCH_LENGTH
            segments.append((bx, by, ex, ey))
    return segments


def frame_index(progress: float, frame_count: int, speed: float = config.BREAK_FRAME_SPEED) -> int:
    if frame_count <= 0:
        return -1
    if progress >= 1:
        return frame_count - 1
    return min(frame_count - 1, math.floor(progress * frame_count * speed))
