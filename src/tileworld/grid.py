from __future__ import annotations

import numpy as np

from .blocks import BlockCatalog, BlockId, UnknownBlockError


class TileGrid:
    """Row-major block-id grid, indexed ``cells[y, x]`` with y growing downward.

    Reads outside the grid return air and writes outside it are dropped, so
    the world has open boundaries for every caller.
    """

    def __init__(self, width: int, height: int, catalog: BlockCatalog):
        self.width = int(width)
        self.height = int(height)
        self.catalog = catalog
        self._cells = np.zeros((self.height, self.width), dtype=np.uint8)
        # Bumped on every successful write; presentation caches key off it.
        self.version = 0

    @classmethod
    def from_array(cls, cells: np.ndarray, catalog: BlockCatalog) -> "TileGrid":
        cells = np.asarray(cells)
        grid = cls(cells.shape[1], cells.shape[0], catalog)
        if cells.size and int(cells.max()) >= len(catalog):
            raise UnknownBlockError(int(cells.max()))
        grid._cells[:, :] = cells
        return grid

    @property
    def cells(self) -> np.ndarray:
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return BlockId.AIR
        return int(self._cells[y, x])

    def is_empty(self, x: int, y: int) -> bool:
        return self.get(x, y) == BlockId.AIR

    def is_solid(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return bool(self.catalog.solid_lut[self._cells[y, x]])

    def set(self, x: int, y: int, block_id: int) -> bool:
        if block_id not in self.catalog:
            raise UnknownBlockError(block_id)
        if not self.in_bounds(x, y):
            return False
        if self._cells[y, x] != block_id:
            self._cells[y, x] = block_id
            self.version += 1
        return True

    def fill_column(self, x: int, top: int, block_id: int, bottom: int | None = None) -> None:
        # Rows top..bottom-1 (clipped to the grid).
        if block_id not in self.catalog:
            raise UnknownBlockError(block_id)
        if not 0 <= x < self.width:
            return
        start = max(0, top)
        end = self.height if bottom is None else min(self.height, bottom)
        if start >= end:
            return
        self._cells[start:end, x] = block_id
        self.version += 1

    def surface_row(self, x: int) -> int | None:
        """Topmost non-empty row in column ``x``, or None for an empty column."""
        if not 0 <= x < self.width:
            return None
        filled = np.flatnonzero(self._cells[:, x])
        if filled.size == 0:
            return None
        return int(filled[0])

    def column_depths(self, block_id: int) -> np.ndarray:
        return column_depths(self._cells, block_id)


def column_depths(cells: np.ndarray, block_id: int) -> np.ndarray:
    """Per-cell count of contiguous ``block_id`` tiles directly above, 0 elsewhere."""
    match = cells == block_id
    depths = np.zeros(cells.shape, dtype=np.int32)
    for y in range(1, cells.shape[0]):
        depths[y] = np.where(match[y] & match[y - 1], depths[y - 1] + 1, 0)
    return depths
