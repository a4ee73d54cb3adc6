from __future__ import annotations

import pygame

from . import config
from .assets import Assets
from .game import FrameView

SLOT_SIZE = 36
SLOT_GAP = 4


def hotbar_rects(screen_w: int, screen_h: int, count: int) -> list[pygame.Rect]:
    total = count * SLOT_SIZE + (count - 1) * SLOT_GAP
    x0 = (screen_w - total) // 2
    y = screen_h - SLOT_SIZE - 12
    return [pygame.Rect(x0 + i * (SLOT_SIZE + SLOT_GAP), y, SLOT_SIZE, SLOT_SIZE) for i in range(count)]


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, frame: FrameView, assets: Assets) -> None:
    w, h = screen.get_size()

    panel = pygame.Surface((220, 50), pygame.SRCALPHA)
    panel.fill((0, 0, 0, config.HUD_ALPHA))
    screen.blit(panel, (10, h - 60))
    label = f"Selected: {frame.catalog.name_of(frame.selected_block)} (1-9 to change)"
    screen.blit(font.render(label, True, (255, 255, 255)), (18, h - 42))

    for i, rect in enumerate(hotbar_rects(w, h, len(frame.hotbar_slots))):
        block_id = frame.hotbar_slots[i]
        pygame.draw.rect(screen, (40, 40, 40), rect)
        texture = assets.textures.get(block_id)
        block = frame.catalog.get(block_id)
        if texture is not None:
            screen.blit(pygame.transform.scale(texture, rect.size), rect.topleft)
        elif block is not None and block.color:
            screen.fill(block.color, rect)
        border = (255, 255, 255) if i == frame.active_slot else (20, 20, 20)
        pygame.draw.rect(screen, border, rect, 2)
