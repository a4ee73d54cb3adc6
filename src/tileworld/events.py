"""Plain event records returned from a tick. No behaviour lives here."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BlockRemoved:
    wx: int
    wy: int
    block_id: int
    time: float


@dataclass(frozen=True)
class BlockPlaced:
    wx: int
    wy: int
    block_id: int
