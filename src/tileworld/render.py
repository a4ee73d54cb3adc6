from __future__ import annotations

import math

import numpy as np
import pygame

from . import config
from .assets import AssetLoader, Assets
from .blocks import DEEP
from .breaking import crack_lines, frame_index
from .effects import Effects
from .game import FrameView
from .grid import column_depths
from .hud import draw_hud


def stone_darkness(depths: np.ndarray) -> np.ndarray:
    """Overlay alpha (0..1) per cell from contiguous deep-tile depth."""
    return np.minimum(1.0, depths / config.STONE_DARK_DEPTH) * config.STONE_MAX_DARK


class Renderer:
    def __init__(self, screen: pygame.Surface, loader: AssetLoader | None = None, effects: Effects | None = None):
        self.screen = screen
        self.loader = loader
        self.effects = effects or Effects()
        self.assets: Assets | None = None
        self._scaled_sky: pygame.Surface | None = None
        self._dark_version = -1
        self._darkness: np.ndarray | None = None
        self._font: pygame.font.Font | None = None
        # Keyed by (size, color, alpha); sizes are one tile or a particle, so it stays small.
        self._overlays: dict[tuple[tuple[int, int], tuple[int, int, int], int], pygame.Surface] = {}

    def _alpha_rect(self, rect: pygame.Rect, color: tuple[int, int, int], alpha: float) -> None:
        a = max(0, min(255, int(alpha * 255)))
        if a == 0 or rect.width <= 0 or rect.height <= 0:
            return
        key = (rect.size, tuple(color), a)
        overlay = self._overlays.get(key)
        if overlay is None:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill((*color, a))
            self._overlays[key] = overlay
        self.screen.blit(overlay, rect.topleft)

    def _poll_assets(self) -> Assets:
        if self.assets is None and self.loader is not None:
            self.assets = self.loader.ready()
        return self.assets or Assets()

    def _darkness_for(self, frame: FrameView) -> np.ndarray:
        if self._darkness is None or self._dark_version != frame.grid_version:
            self._darkness = stone_darkness(column_depths(frame.cells, DEEP))
            self._dark_version = frame.grid_version
        return self._darkness

    def draw(self, frame: FrameView, now: float) -> None:
        assets = self._poll_assets()
        self._draw_sky(assets)
        self._draw_tiles(frame, assets)
        self._draw_player(frame)
        self._draw_effects(frame, now)
        self._draw_break(frame, assets)
        self._draw_hover(frame)
        if self._font is None:
            self._font = pygame.font.Font(None, 20)
        draw_hud(self.screen, self._font, frame, assets)

    def _draw_sky(self, assets: Assets) -> None:
        if assets.sky is None:
            self.screen.fill(config.SKY_COLOR)
            return
        w, h = self.screen.get_size()
        if self._scaled_sky is None or self._scaled_sky.get_size()[0] < w:
            iw, ih = assets.sky.get_size()
            scale = max(w / iw, h / ih)
            self._scaled_sky = pygame.transform.scale(assets.sky, (math.ceil(iw * scale), math.ceil(ih * scale)))
        dw, dh = self._scaled_sky.get_size()
        self.screen.blit(self._scaled_sky, ((w - dw) // 2, (h - dh) // 2))

    def _draw_tiles(self, frame: FrameView, assets: Assets) -> None:
        tile = config.TILE
        w, h = self.screen.get_size()
        cam_x, cam_y = frame.camera
        rows, cols = frame.cells.shape
        tx0, ty0 = max(0, cam_x // tile), max(0, cam_y // tile)
        tx1 = min(cols, math.ceil((cam_x + w) / tile))
        ty1 = min(rows, math.ceil((cam_y + h) / tile))
        darkness = self._darkness_for(frame)
        outline = pygame.Surface((tile, tile), pygame.SRCALPHA)
        pygame.draw.rect(outline, (0, 0, 0, config.TILE_OUTLINE_ALPHA), outline.get_rect(), 1)

        for y in range(ty0, ty1):
            for x in range(tx0, tx1):
                block_id = int(frame.cells[y, x])
                if block_id == 0:
                    continue
                rect = pygame.Rect(x * tile - cam_x, y * tile - cam_y, tile, tile)
                texture = assets.textures.get(block_id)
                if texture is not None:
                    self.screen.blit(texture, rect.topleft)
                else:
                    block = frame.catalog.get(block_id)
                    color = block.color if block is not None and block.color else (153, 153, 153)
                    self.screen.fill(color, rect)
                    self.screen.blit(outline, rect.topleft)
                self._alpha_rect(rect, (0, 0, 0), float(darkness[y, x]))

    def _draw_player(self, frame: FrameView) -> None:
        cam_x, cam_y = frame.camera
        x, y, w, h = frame.player_rect
        rect = pygame.Rect(round(x - cam_x), round(y - cam_y), round(w), round(h))
        self.screen.fill(config.PLAYER_COLOR, rect)
        pygame.draw.rect(self.screen, (0, 0, 0), rect, 1)

    def _draw_effects(self, frame: FrameView, now: float) -> None:
        cam_x, cam_y = frame.camera
        self.effects.prune(now)
        for burst in self.effects.bursts:
            alpha = 1.0 - burst.fraction(now)
            for particle, (px, py, size) in zip(burst.particles, burst.positions(now)):
                rect = pygame.Rect(round(px - size / 2 - cam_x), round(py - size / 2 - cam_y), round(size), round(size))
                self._alpha_rect(rect, particle.color, alpha)

    def _draw_break(self, frame: FrameView, assets: Assets) -> None:
        target = frame.target
        if target is None:
            return
        tile = config.TILE
        cam_x, cam_y = frame.camera
        p = frame.progress
        rect = pygame.Rect(target.wx * tile - cam_x, target.wy * tile - cam_y, tile, tile)
        self._alpha_rect(rect, (0, 0, 0), config.BREAK_TINT_ALPHA * p)

        if assets.break_frames:
            idx = frame_index(p, len(assets.break_frames))
            crack = assets.break_frames[idx].copy()
            crack.set_alpha(int(config.BREAK_FRAME_ALPHA * 255))
            self.screen.blit(crack, rect.topleft)
            return
        for x1, y1, x2, y2 in crack_lines(target.seed, p, tile):
            pygame.draw.line(
                self.screen,
                (0, 0, 0),
                (rect.x + x1 + 0.5, rect.y + y1 + 0.5),
                (rect.x + x2 + 0.5, rect.y + y2 + 0.5),
                2,
            )

    def _draw_hover(self, frame: FrameView) -> None:
        if frame.hover is None:
            return
        hx, hy = frame.hover
        rows, cols = frame.cells.shape
        if not (0 <= hx < cols and 0 <= hy < rows) or frame.cells[hy, hx] == 0:
            return
        tile = config.TILE
        cam_x, cam_y = frame.camera
        rect = pygame.Rect(hx * tile - cam_x + 1, hy * tile - cam_y + 1, tile - 2, tile - 2)
        pygame.draw.rect(self.screen, config.HOVER_COLOR, rect, 2)
