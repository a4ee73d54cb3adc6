from __future__ import annotations

import logging
import math

import numpy as np

from . import config
from .blocks import DEEP, SUBSURFACE, SURFACE, BlockCatalog, default_catalog
from .grid import TileGrid
from .value_noise import NoiseField

LOGGER = logging.getLogger(__name__)


def column_height(noise: NoiseField, x: int, mid: int) -> int:
    n = 0.0
    for freq, weight in zip(config.OCTAVE_FREQUENCIES, config.OCTAVE_WEIGHTS):
        n += noise.value_at(x * freq) * weight
    # Gentle sine for macro-scale rolling hills.
    n += (math.sin(x * config.MACRO_FREQUENCY) * 0.5 + 0.5) * config.MACRO_WEIGHT
    offset = (n - 0.5) * config.HEIGHT_AMP
    return max(config.MIN_SURFACE_ROW, math.floor(mid + offset))


def smooth_heights(heights: list[int], passes: int = config.SMOOTHING_PASSES) -> list[int]:
    heights = list(heights)
    for _ in range(passes):
        smoothed = heights.copy()
        # Edge columns keep their raw height.
        for x in range(1, len(heights) - 1):
            smoothed[x] = (heights[x - 1] + heights[x] + heights[x + 1]) // 3
        heights = smoothed
    return heights


def surface_heights(noise: NoiseField, width: int, height: int) -> list[int]:
    mid = math.floor(height * config.SURFACE_BASELINE)
    raw = [column_height(noise, x, mid) for x in range(width)]
    return smooth_heights(raw)


def fill_strata(grid: TileGrid, heights: list[int]) -> None:
    for x, h in enumerate(heights):
        # Columns whose surface falls below the grid are simply truncated.
        grid.fill_column(x, h, SURFACE, h + 1)
        grid.fill_column(x, h + 1, SUBSURFACE, h + 1 + config.SUBSURFACE_DEPTH)
        grid.fill_column(x, h + 1 + config.SUBSURFACE_DEPTH, DEEP)


class TerrainGenerator:
    def __init__(
        self,
        width: int = config.WORLD_W,
        height: int = config.WORLD_H,
        noise: NoiseField | None = None,
        catalog: BlockCatalog | None = None,
        seed: int | None = None,
    ):
        self.width = int(width)
        self.height = int(height)
        self.catalog = catalog if catalog is not None else default_catalog()
        if noise is None:
            rng = np.random.default_rng(seed)
            noise = NoiseField.random(self.width + config.NOISE_GUARD_COLUMNS, rng)
        self.noise = noise
        self.seed = seed
        self.heights: list[int] = []

    @classmethod
    def from_config(cls, world: config.WorldConfig, catalog: BlockCatalog | None = None) -> "TerrainGenerator":
        return cls(world.width, world.height, catalog=catalog, seed=world.seed)

    def generate(self) -> TileGrid:
        self.heights = surface_heights(self.noise, self.width, self.height)
        grid = TileGrid(self.width, self.height, self.catalog)
        fill_strata(grid, self.heights)
        if self.heights:
            LOGGER.info(
                "generated %dx%d world (seed=%s, surface rows %d..%d)",
                self.width,
                self.height,
                self.seed,
                min(self.heights),
                max(self.heights),
            )
        return grid
