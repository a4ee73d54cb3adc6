from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from tileworld.blocks import BlockId, default_catalog
from tileworld.grid import TileGrid

_LEGEND = {".": BlockId.AIR, "d": BlockId.DIRT, "g": BlockId.GRASS, "s": BlockId.STONE}


def grid_from_rows(rows: list[str]) -> TileGrid:
    """Build a grid from strings: '.' air, 'd' dirt, 'g' grass, 's' stone."""
    cells = np.array([[_LEGEND[c] for c in row] for row in rows], dtype=np.uint8)
    return TileGrid.from_array(cells, default_catalog())


def flat_grid(width: int, height: int, ground_row: int, top: str = "s", fill: str = "s") -> TileGrid:
    rows = []
    for y in range(height):
        if y < ground_row:
            rows.append("." * width)
        elif y == ground_row:
            rows.append(top * width)
        else:
            rows.append(fill * width)
    return grid_from_rows(rows)


@pytest.fixture
def catalog():
    return default_catalog()
