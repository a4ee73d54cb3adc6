from __future__ import annotations

import pytest

from tileworld.blocks import (
    DEFAULT_BLOCKS,
    BlockCatalog,
    BlockId,
    BlockType,
    CatalogError,
    UnknownBlockError,
)


def test_default_catalog_ids_are_indices(catalog) -> None:
    assert [b.id for b in catalog] == list(range(len(catalog)))
    assert not catalog.is_solid(BlockId.AIR)
    assert catalog.is_solid(BlockId.STONE)
    assert catalog.solid_lut.tolist() == [False, True, True, True]


def test_lookup_is_bounds_checked(catalog) -> None:
    assert catalog.get(99) is None
    assert catalog.get(-1) is None
    assert catalog.name_of(99) == "None"
    with pytest.raises(UnknownBlockError):
        catalog[len(catalog)]
    assert catalog[BlockId.GRASS].name == "Grass"


def test_catalog_rejects_out_of_order_ids() -> None:
    records = [DEFAULT_BLOCKS[0], DEFAULT_BLOCKS[2]]
    with pytest.raises(CatalogError):
        BlockCatalog(records)


def test_catalog_rejects_solid_air() -> None:
    with pytest.raises(CatalogError):
        BlockCatalog([BlockType(0, "Air", True, None)])


def test_catalog_rejects_empty() -> None:
    with pytest.raises(CatalogError):
        BlockCatalog([])
