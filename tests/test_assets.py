from __future__ import annotations

import pygame

from tileworld import config
from tileworld.assets import AssetLoader, cover_tile, load_assets, slice_frames
from tileworld.blocks import BlockId


def _save(path, size, color=(200, 10, 10)) -> None:
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))


def test_missing_directory_falls_back(tmp_path, catalog) -> None:
    assets = load_assets(tmp_path / "nope", catalog)
    assert assets.textures == {}
    assert assets.break_frames == []
    assert assets.sky is None


def test_textures_are_cropped_to_tile(tmp_path, catalog) -> None:
    _save(tmp_path / "dirt.png", (64, 48))
    _save(tmp_path / "frames.png", (3 * config.TILE, config.TILE))
    assets = load_assets(tmp_path, catalog)
    assert set(assets.textures) == {BlockId.DIRT}
    assert assets.textures[BlockId.DIRT].get_size() == (config.TILE, config.TILE)
    assert len(assets.break_frames) == 3


def test_broken_file_is_skipped(tmp_path, catalog) -> None:
    (tmp_path / "stone.png").write_bytes(b"not an image")
    assets = load_assets(tmp_path, catalog)
    assert BlockId.STONE not in assets.textures


def test_cover_tile_and_slice_frames() -> None:
    wide = pygame.Surface((90, 30))
    assert cover_tile(wide, 16).get_size() == (16, 16)
    strip = pygame.Surface((64, 64))
    assert len(slice_frames(strip, 32)) == 4


def test_loader_resolves_in_background(tmp_path, catalog) -> None:
    _save(tmp_path / "grass.png", (32, 32))
    loader = AssetLoader(tmp_path, catalog)
    loader.future.result(timeout=10)
    assets = loader.ready()
    assert assets is not None
    assert BlockId.GRASS in assets.textures
