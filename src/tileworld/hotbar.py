from __future__ import annotations

from dataclasses import dataclass, field

from . import config
from .blocks import BlockCatalog, BlockId


def default_slots(catalog: BlockCatalog, count: int = config.HOTBAR_SLOTS) -> list[int]:
    return [i + 1 if i + 1 < len(catalog) else BlockId.AIR for i in range(count)]


@dataclass
class Hotbar:
    slots: list[int]
    selected_block: int = BlockId.GRASS
    active_slot: int = 0
    catalog: BlockCatalog | None = field(default=None, repr=False)

    @classmethod
    def for_catalog(cls, catalog: BlockCatalog) -> "Hotbar":
        return cls(slots=default_slots(catalog), catalog=catalog)

    def select_slot(self, index: int) -> bool:
        if not 0 <= index < len(self.slots):
            return False
        self.active_slot = index
        block_id = self.slots[index]
        if block_id != BlockId.AIR and (self.catalog is None or block_id in self.catalog):
            self.selected_block = block_id
        return True
