from __future__ import annotations

import math
import random
from dataclasses import dataclass

from . import config
from .events import BlockRemoved


@dataclass
class Particle:
    x: float
    y: float
    vx: float  # px/ms
    vy: float
    size: float
    color: tuple[int, int, int]


@dataclass
class BreakBurst:
    t0: float
    particles: list[Particle]
    duration: float = config.PARTICLE_LIFETIME

    def fraction(self, now: float) -> float:
        return min(1.0, (now - self.t0) / self.duration)

    def expired(self, now: float) -> bool:
        return now - self.t0 >= self.duration

    def positions(self, now: float) -> list[tuple[float, float, float]]:
        """(x, y, size) per particle; particles shrink as the burst fades."""
        elapsed_ms = (now - self.t0) * 1000.0
        shrink = 1.0 - self.fraction(now)
        return [
            (p.x + p.vx * elapsed_ms, p.y + p.vy * elapsed_ms, max(1.0, p.size * shrink))
            for p in self.particles
        ]


def spawn_burst(
    event: BlockRemoved,
    color: tuple[int, int, int],
    rng: random.Random | None = None,
    tile: int = config.TILE,
) -> BreakBurst:
    rng = rng or random
    cx = event.wx * tile + tile / 2
    cy = event.wy * tile + tile / 2
    particles = []
    for _ in range(config.PARTICLE_COUNT):
        angle = rng.random() * math.tau
        speed = config.PARTICLE_SPEED_MIN + rng.random() * config.PARTICLE_SPEED_RANGE
        vx = math.cos(angle) * speed
        vy = math.sin(angle) * speed - rng.random() * config.PARTICLE_LIFT
        size = config.PARTICLE_SIZE_MIN + rng.random() * config.PARTICLE_SIZE_RANGE
        particles.append(Particle(cx, cy, vx, vy, size, color))
    return BreakBurst(t0=event.time, particles=particles)


class Effects:
    def __init__(self, rng: random.Random | None = None):
        self.bursts: list[BreakBurst] = []
        self._rng = rng

    def on_block_removed(self, event: BlockRemoved, color: tuple[int, int, int] | None) -> None:
        self.bursts.append(spawn_burst(event, color or (153, 153, 153), self._rng))

    def prune(self, now: float) -> None:
        self.bursts = [b for b in self.bursts if not b.expired(now)]
