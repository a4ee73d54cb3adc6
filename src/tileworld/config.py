from __future__ import annotations

from dataclasses import dataclass

# --- Window ---
WIDTH = 960
HEIGHT = 640
FPS_LIMIT = 60
TICK_RATE = 60  # Fixed simulation steps per second.

# --- World ---
TILE = 32  # Pixels per tile.
WORLD_W = 200
WORLD_H = 80

# --- Terrain ---
SURFACE_BASELINE = 0.45  # Baseline surface row as a fraction of world height.
MIN_SURFACE_ROW = 3
OCTAVE_FREQUENCIES = (0.12, 0.34, 0.78)
OCTAVE_WEIGHTS = (0.55, 0.28, 0.12)
MACRO_FREQUENCY = 0.02
MACRO_WEIGHT = 0.05
HEIGHT_AMP = 10.0
SMOOTHING_PASSES = 2
SUBSURFACE_DEPTH = 5
NOISE_GUARD_COLUMNS = 4

# --- Player ---
PLAYER_W = TILE * 0.6
PLAYER_H = TILE * 0.9
RUN_SPEED = 192.0  # px/s
GRAVITY = 1620.0  # px/s^2
JUMP_VELOCITY = -330.0  # px/s, roughly one tile of clearance.
EDGE_EPSILON = 0.001

# --- Interaction ---
PLACE_RADIUS = 4  # Tiles.
SOFT_BREAK_SECONDS = 0.75
HARD_BREAK_SECONDS = 2.0
MAX_CRACKS = 8
CRACK_BRANCH_CHANCE = 0.66
CRACK_BRANCH_LENGTH = 12.0
BREAK_FRAME_SPEED = 0.5  # Frame strip advances at half the break progress.
BREAK_TINT_ALPHA = 0.18
BREAK_FRAME_ALPHA = 0.75
HOTBAR_SLOTS = 9

# --- Camera ---
CAMERA_SMOOTH = 0.14  # Lower = slower follow.

# --- Effects ---
PARTICLE_COUNT = 14
PARTICLE_LIFETIME = 0.5  # s
PARTICLE_SPEED_MIN = 0.12  # px/ms
PARTICLE_SPEED_RANGE = 0.6
PARTICLE_LIFT = 0.15
PARTICLE_SIZE_MIN = 4.0
PARTICLE_SIZE_RANGE = 6.0

# --- Rendering ---
SKY_COLOR = (135, 206, 235)
PLAYER_COLOR = (255, 221, 87)
HOVER_COLOR = (255, 255, 255)
TILE_OUTLINE_ALPHA = 20
STONE_DARK_DEPTH = 16
STONE_MAX_DARK = 0.45
HUD_ALPHA = 85

ASSET_DIR = "textures"


@dataclass(frozen=True)
class WorldConfig:
    width: int = WORLD_W
    height: int = WORLD_H
    seed: int | None = None

    @property
    def pixel_width(self) -> int:
        return self.width * TILE

    @property
    def pixel_height(self) -> int:
        return self.height * TILE
