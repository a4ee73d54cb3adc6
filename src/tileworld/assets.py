"""Optional textures, loaded off the tick loop.

Every file is optional. A missing or unreadable image leaves its slot empty
and the renderer falls back to flat colors and procedural cracks.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from . import config
from .blocks import BlockCatalog

LOGGER = logging.getLogger(__name__)

FRAMES_FILE = "frames.png"
SKY_FILE = "sky.png"


@dataclass
class Assets:
    textures: dict[int, pygame.Surface] = field(default_factory=dict)
    break_frames: list[pygame.Surface] = field(default_factory=list)
    sky: pygame.Surface | None = None


def _load_image(path: Path) -> pygame.Surface | None:
    if not path.is_file():
        return None
    try:
        return pygame.image.load(str(path))
    except (OSError, pygame.error) as exc:
        LOGGER.warning("could not load %s: %s", path, exc)
        return None


def cover_tile(image: pygame.Surface, tile: int = config.TILE) -> pygame.Surface:
    """Center-crop ``image`` to a square and scale it to ``tile`` pixels."""
    w, h = image.get_size()
    side = min(w, h)
    crop = image.subsurface(pygame.Rect((w - side) // 2, (h - side) // 2, side, side))
    return pygame.transform.scale(crop, (tile, tile))


def slice_frames(strip: pygame.Surface, tile: int = config.TILE) -> list[pygame.Surface]:
    w, h = strip.get_size()
    cols = max(1, w // tile)
    rows = max(1, h // tile)
    frames = []
    for r in range(rows):
        for c in range(cols):
            rect = pygame.Rect(c * tile, r * tile, min(tile, w), min(tile, h))
            frames.append(strip.subsurface(rect).copy())
    return frames


def load_assets(directory: str | Path, catalog: BlockCatalog, tile: int = config.TILE) -> Assets:
    directory = Path(directory)
    assets = Assets()
    for block in catalog:
        if not block.texture:
            continue
        image = _load_image(directory / block.texture)
        if image is not None:
            assets.textures[block.id] = cover_tile(image, tile)
    strip = _load_image(directory / FRAMES_FILE)
    if strip is not None:
        assets.break_frames = slice_frames(strip, tile)
    assets.sky = _load_image(directory / SKY_FILE)
    LOGGER.info(
        "loaded %d block textures, %d break frames, sky=%s from %s",
        len(assets.textures),
        len(assets.break_frames),
        assets.sky is not None,
        directory,
    )
    return assets


class AssetLoader:
    """Runs ``load_assets`` on a worker thread; the renderer polls ``ready()``."""

    def __init__(self, directory: str | Path, catalog: BlockCatalog, tile: int = config.TILE):
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="assets")
        self.future: Future[Assets] = self._executor.submit(load_assets, directory, catalog, tile)
        self._executor.shutdown(wait=False)

    def ready(self) -> Assets | None:
        if not self.future.done():
            return None
        if self.future.exception() is not None:
            LOGGER.warning("asset loading failed: %s", self.future.exception())
            return Assets()
        return self.future.result()
