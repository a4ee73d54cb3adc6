from __future__ import annotations

from dataclasses import dataclass

from . import config
from .breaking import BreakTarget
from .physics import Body


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


@dataclass
class Camera:
    """Smoothed viewport origin in world pixels."""

    x: float = 0.0
    y: float = 0.0
    smooth: float = config.CAMERA_SMOOTH

    @classmethod
    def centered_on(cls, body: Body, view_w: int, view_h: int) -> "Camera":
        cx, cy = body.center
        return cls(x=cx - view_w / 2, y=cy - view_h / 2)

    def update(
        self,
        body: Body,
        target: BreakTarget | None,
        view_w: int,
        view_h: int,
        world_w: int,
        world_h: int,
        tile: int = config.TILE,
    ) -> None:
        max_x = max(0, world_w - view_w)
        max_y = max(0, world_h - view_h)
        cx, cy = body.center
        tx = clamp(cx - view_w / 2, 0, max_x)
        self.x += (tx - self.x) * self.smooth

        # Vertical follow only while digging below the player's row.
        _, pty = body.center_tile(tile)
        if target is not None and target.wy > pty:
            ty = clamp(cy - view_h / 2, 0, max_y)
            self.y += (ty - self.y) * self.smooth
        self.y = clamp(self.y, 0, max_y)

    def offset(self) -> tuple[int, int]:
        # Whole pixels so tiles do not shimmer.
        return (round(self.x), round(self.y))

    def screen_to_tile(self, sx: float, sy: float, tile: int = config.TILE) -> tuple[int, int]:
        ox, oy = self.offset()
        return (int((sx + ox) // tile), int((sy + oy) // tile))
