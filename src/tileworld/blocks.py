"""Block type catalog.

Grid cells store small integers; this module is the only place that maps
them to names, solidity and fallback colors.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator

import numpy as np


class BlockId(IntEnum):
    AIR = 0
    DIRT = 1
    GRASS = 2
    STONE = 3


SURFACE = BlockId.GRASS
SUBSURFACE = BlockId.DIRT
DEEP = BlockId.STONE
SOFT_BLOCKS = frozenset({SURFACE, SUBSURFACE})


class CatalogError(ValueError):
    pass


class UnknownBlockError(KeyError):
    pass


@dataclass(frozen=True)
class BlockType:
    id: int
    name: str
    solid: bool
    color: tuple[int, int, int] | None
    texture: str | None = None


class BlockCatalog:
    def __init__(self, records: Iterable[BlockType]):
        self._records = tuple(records)
        if not self._records:
            raise CatalogError("catalog must contain at least the air block")
        for index, record in enumerate(self._records):
            if record.id != index:
                raise CatalogError(f"block {record.name!r} has id {record.id}, expected {index}")
        if self._records[0].solid:
            raise CatalogError("block 0 must be non-solid air")
        # Indexed by raw cell value; used for vectorised solidity tests.
        self.solid_lut = np.array([r.solid for r in self._records], dtype=bool)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BlockType]:
        return iter(self._records)

    def __contains__(self, block_id: object) -> bool:
        return isinstance(block_id, (int, np.integer)) and 0 <= block_id < len(self._records)

    def __getitem__(self, block_id: int) -> BlockType:
        if block_id not in self:
            raise UnknownBlockError(block_id)
        return self._records[block_id]

    def get(self, block_id: int) -> BlockType | None:
        if block_id not in self:
            return None
        return self._records[block_id]

    def is_solid(self, block_id: int) -> bool:
        record = self.get(block_id)
        return record is not None and record.solid

    def name_of(self, block_id: int) -> str:
        record = self.get(block_id)
        return record.name if record is not None else "None"


DEFAULT_BLOCKS = (
    BlockType(BlockId.AIR, "Air", False, None),
    BlockType(BlockId.DIRT, "Dirt", True, (139, 90, 43), "dirt.png"),
    BlockType(BlockId.GRASS, "Grass", True, (63, 191, 105), "grass.png"),
    BlockType(BlockId.STONE, "Stone", True, (125, 125, 125), "stone.png"),
)


def default_catalog() -> BlockCatalog:
    return BlockCatalog(DEFAULT_BLOCKS)
